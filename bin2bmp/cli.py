#!/usr/bin/env python3
"""
bin2bmp command line
────────────────────
* `bin2bmp FILE`        → FILE.bmp  (a 32‑bit BMP holding FILE's bytes)
* `bin2bmp FILE.bmp`    → FILE      (the original bytes back)
* `-v` embeds a digest on the way in and checks it on the way out
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__
from .errors import B2BError
from .files import convert, is_bmp
from .header import Header, VerificationOutcome

# ───────────────────────── configuration ──────────────────────
LOG_LEVEL = os.getenv("BIN2BMP_LOG_LEVEL", "WARNING").upper()

logger = logging.getLogger("bin2bmp")


def _level(name: str) -> int:
    # unknown names fall back to WARNING
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level=logging.WARNING):
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)


def _rw_file(value: str) -> Path:
    path = Path(value)
    if not path.exists():
        raise argparse.ArgumentTypeError("The specified path does not exist.")
    if not path.is_file() or not os.access(path, os.R_OK | os.W_OK):
        raise argparse.ArgumentTypeError("Cannot read or write to specified file.")
    return path


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bin2bmp",
        description="Losslessly convert any file into a 32-bit bitmap and back.")
    p.add_argument("path", type=_rw_file,
                   help="Path to a binary or bitmap file to convert. Converts non-bitmaps "
                        "into bitmaps, and bitmaps back into non-bitmaps")
    p.add_argument("-v", "--verify", action="store_true",
                   help="embed a digest when creating a bitmap, check it when restoring")
    p.add_argument("--no-rename", dest="rename", action="store_false",
                   help="convert in place without adding/removing the .bmp suffix")
    p.add_argument("--info", action="store_true",
                   help="print the header of a bitmap created by bin2bmp and exit")
    p.add_argument("--debug", action="store_true", help="debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def show_info(path: Path):
    with open(path, "rb") as f:
        header = Header.read_from(f)
    header.validate()
    digest = "none" if header.digest is None else f"{header.digest:032x}"
    print(f"{path}: {header.width}x{header.height} px, {header.pixmap_size} pixel bytes, "
          f"original {header.original_file_size} bytes, padding {header.padding_size}, "
          f"digest {digest}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else _level(LOG_LEVEL))

    try:
        if args.info:
            show_info(args.path)
            return 0
        dst, outcome = convert(args.path, digest=args.verify, rename=args.rename)
    except (B2BError, OSError, ValueError) as e:
        logger.error("%s: %s", args.path, e)
        return 1

    print(dst)
    if outcome is VerificationOutcome.VERIFIED:
        print("Verification succeeded.")
    elif outcome is VerificationOutcome.MISMATCHED:
        logger.warning("Verification failed: restored file does not match the embedded digest.")
    elif outcome is VerificationOutcome.NOT_POSSIBLE:
        logger.warning("Verification not possible: bitmap was created without a digest.")
    elif args.verify and not is_bmp(args.path):
        logger.info("Embedded digest in %s", dst)
    return 0


if __name__ == "__main__":
    sys.exit(main())
