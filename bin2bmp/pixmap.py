# ==================================================
# bin2bmp/pixmap.py
# ==================================================
import os

import numpy as np

from .const import BITMAP_HEADER_SIZE, BYTES_PER_PIXEL
from .header import Header


def load_pixels(path: str | os.PathLike, top_down: bool = True) -> np.ndarray:
    """
    Pixel grid of a bitmap written by bin2bmp as a (height, width, 4) uint8
    array in stored BGRA order.  Rows are stored bottom‑up; `top_down`
    flips them into display order.
    """
    with open(path, "rb") as f:
        header = Header.read_from(f)
        header.validate()
        f.seek(BITMAP_HEADER_SIZE)
        raw = f.read(header.pixmap_size)
    if len(raw) != header.pixmap_size:
        raise ValueError(f"Pixel data truncated: {len(raw)} of {header.pixmap_size} bytes")
    grid = np.frombuffer(raw, dtype=np.uint8).reshape(
        header.height, header.width, BYTES_PER_PIXEL)
    return grid[::-1] if top_down else grid
