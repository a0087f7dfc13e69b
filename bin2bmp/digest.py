# ==================================================
# bin2bmp/digest.py
# ==================================================
from hashlib import blake2b
import os

from .const import *


def truncate(digest: bytes) -> int:
    """First 16 bytes of a wider digest as a big‑endian integer."""
    return int.from_bytes(digest[:DIGEST_TRUNCATED_SIZE], "big")


def file_digest(f) -> int:
    """Fingerprint of everything in the open binary file `f`.

    Reads from offset 0 to EOF in CHUNK_SIZE pieces; the position is left at EOF.
    """
    h = blake2b(digest_size=DIGEST_SIZE)
    f.seek(0)
    for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
        h.update(chunk)
    return truncate(h.digest())


def path_digest(path: str | os.PathLike) -> int:
    with open(path, "rb") as f:
        return file_digest(f)
