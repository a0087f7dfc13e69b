# ==================================================
# bin2bmp/transform.py
# ==================================================
"""
In‑place conversion of an open read/write binary file.

Forward: the first TOTAL_HEADER_SIZE bytes are copied to the end of the file,
the header is written over them and the file is resized to the bitmap size.
Reverse: the copied prefix is moved back to offset 0 and the file is cut to
its original length.

Neither direction is atomic; see bin2bmp.files for the copy‑and‑replace wrappers.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from .const import *
from .digest import file_digest
from .errors import FileTooLargeError
from .header import Header, VerificationOutcome

log = logging.getLogger(__name__)


def _size(f) -> int:
    return f.seek(0, os.SEEK_END)


def embed(f, compute_digest: bool = False) -> Header:
    """bin -> bmp.  Returns the header that was written."""
    # digest must see the untouched file
    digest = file_digest(f) if compute_digest else None

    file_size = _size(f)
    header = Header.new(file_size, digest)
    if header.file_size > U32_MAX:
        raise FileTooLargeError(file_size, U32_MAX)
    # pack before the first write so an encoding error leaves the file as it was
    header_bytes = header.pack()
    log.debug("embed: %d bytes -> %dx%d, padding %d",
              file_size, header.width, header.height, header.padding_size)

    if file_size < TOTAL_HEADER_SIZE:
        f.truncate(TOTAL_HEADER_SIZE)

    f.seek(0)
    prefix = f.read(TOTAL_HEADER_SIZE)

    f.seek(0, os.SEEK_END)
    f.write(prefix)

    f.seek(0)
    f.write(header_bytes)

    # padding; for short inputs this also cuts the copied prefix down to
    # the original bytes plus zeros
    f.truncate(header.pixmap_size + BITMAP_HEADER_SIZE)
    f.flush()
    return header


def extract(f, verify: bool = False) -> Optional[VerificationOutcome]:
    """bmp -> bin.  Returns the verification outcome, or None unless `verify`."""
    header = Header.read_from(f)
    header.validate()
    log.debug("extract: %r", header)

    end = _size(f)
    # A prefix shorter than TOTAL_HEADER_SIZE was appended after the zero
    # extension, i.e. at TOTAL_HEADER_SIZE rather than at original_file_size.
    prefix_at = max(end - TOTAL_HEADER_SIZE - header.padding_size, TOTAL_HEADER_SIZE)
    f.seek(prefix_at)
    prefix = f.read(TOTAL_HEADER_SIZE)

    f.seek(0)
    f.write(prefix)

    f.truncate(header.original_file_size)
    f.flush()

    if not verify:
        return None
    outcome = header.verify(file_digest(f))
    log.info("verification: %s", outcome.value)
    return outcome
