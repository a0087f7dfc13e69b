# ==================================================
# bin2bmp/files.py   – path helpers around embed/extract
# ==================================================
"""
Convert files by path.  Each conversion runs against a temporary copy in
the same directory; the copy replaces the destination only once the
transform has finished, so an interrupted or failed run leaves the source
as it was.
"""
from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from .const import BMP_SUFFIX
from .header import VerificationOutcome
from .transform import embed, extract

log = logging.getLogger(__name__)


def bmp_name(path: Path) -> Path:
    return path.with_name(path.name + BMP_SUFFIX)

def bin_name(path: Path) -> Path:
    # drop the ".bmp" suffix
    return path.with_name(path.name[:-len(BMP_SUFFIX)])

def is_bmp(path: str | os.PathLike) -> bool:
    # case sensitive: "photo.BMP" is an input, not a container
    return str(path).endswith(BMP_SUFFIX)


def _convert_copy(src: Path, dst: Path, op):
    fd, tmp = tempfile.mkstemp(prefix=f".{src.name}.", suffix=".tmp", dir=src.parent)
    os.close(fd)
    tmp = Path(tmp)
    try:
        shutil.copyfile(src, tmp)
        with open(tmp, "r+b") as f:
            result = op(f)
            os.fsync(f.fileno())
        shutil.copymode(src, tmp)
        tmp.replace(dst)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    if dst != src:
        src.unlink()
    log.info("%s -> %s", src, dst)
    return result


def bin_to_bmp(path: str | os.PathLike, compute_digest: bool = False,
               rename: bool = True) -> Path:
    """Convert `path` into a bitmap; returns the path of the bitmap."""
    src = Path(path)
    dst = bmp_name(src) if rename else src
    _convert_copy(src, dst, lambda f: embed(f, compute_digest))
    return dst


def bmp_to_bin(path: str | os.PathLike, verify: bool = False,
               rename: bool = True) -> tuple[Path, Optional[VerificationOutcome]]:
    """Restore the original file from a bitmap produced by bin_to_bmp."""
    src = Path(path)
    dst = bin_name(src) if rename else src
    outcome = _convert_copy(src, dst, lambda f: extract(f, verify))
    return dst, outcome


def convert(path: str | os.PathLike, digest: bool = False, rename: bool = True):
    """
    `.bmp` paths are converted back, anything else is converted to a bitmap.
    `digest` embeds a fingerprint on the way in and checks it on the way out.
    Returns (destination, outcome); outcome is None for forward conversions
    and for reverse ones without `digest`.
    """
    if is_bmp(path):
        return bmp_to_bin(path, verify=digest, rename=rename)
    return bin_to_bmp(path, compute_digest=digest, rename=rename), None
