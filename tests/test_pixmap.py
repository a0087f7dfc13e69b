import numpy as np
import pytest

from bin2bmp.const import BITMAP_HEADER_SIZE, B2B_HEADER_SIZE
from bin2bmp.errors import InvalidBitmapIdError
from bin2bmp.files import bin_to_bmp
from bin2bmp.pixmap import load_pixels


def test_shape_and_content(make_file):
    path, _ = make_file(777)
    bmp = bin_to_bmp(path)
    raw = bmp.read_bytes()[BITMAP_HEADER_SIZE:]

    stored = load_pixels(bmp, top_down=False)
    assert stored.dtype == np.uint8
    assert stored.shape[2] == 4
    assert stored.tobytes() == raw

    shown = load_pixels(bmp)
    assert np.array_equal(shown, stored[::-1])


def test_conversion_header_is_first_pixels(make_file):
    path, _ = make_file(data=b"hello")
    bmp = bin_to_bmp(path)
    stored = load_pixels(bmp, top_down=False)
    assert stored.shape == (3, 4, 4)
    first = stored.reshape(-1, 4)[:B2B_HEADER_SIZE // 4].tobytes()
    assert first == bmp.read_bytes()[BITMAP_HEADER_SIZE:BITMAP_HEADER_SIZE + B2B_HEADER_SIZE]


def test_rejects_foreign_file(make_file):
    path, _ = make_file(data=bytes(400))
    with pytest.raises(InvalidBitmapIdError):
        load_pixels(path)
