# ==================================================
# bin2bmp/header.py
# ==================================================
"""
Combined 178‑byte header written at offset 0 of every produced bitmap:
a BITMAPV5 file/DIB header (138 bytes) followed by the conversion header
(40 bytes).  The conversion header sits inside the pixel data, so image
viewers treat it as the first ten pixels.
"""
from __future__ import annotations

import enum
import struct
from math import isqrt
from typing import Optional

from .const import *
from .errors import (HeaderSerializationError, InvalidBitmapIdError,
                     InvalidSignatureError, BadPaddingSizeError)

_BITMAP = struct.Struct(BITMAP_HEADER_FMT)
_B2B = struct.Struct(B2B_HEADER_FMT)
assert _BITMAP.size == BITMAP_HEADER_SIZE and _B2B.size == B2B_HEADER_SIZE


class VerificationOutcome(enum.Enum):
    VERIFIED = "verified"
    MISMATCHED = "mismatched"
    NOT_POSSIBLE = "not possible"


# -------- u128 helpers ----------------------------------------------------

def _u128(n: int) -> bytes:
    return n.to_bytes(16, "little")

def _from_u128(raw: bytes) -> int:
    return int.from_bytes(raw, "little")

def pack_digest(digest: Optional[int]) -> int:
    """None -> 0, otherwise the low 127 bits with the presence bit set."""
    if digest is None:
        return 0
    return (digest & DIGEST_MASK) | DIGEST_PRESENT

def unpack_digest(raw: int) -> Optional[int]:
    if raw & DIGEST_PRESENT:
        return raw & DIGEST_MASK
    return None

# -------- geometry --------------------------------------------------------

def geometry(file_size: int) -> tuple[int, int, int, int]:
    """
    Smallest roughly square pixmap holding `file_size` bytes plus the
    conversion header.  Returns (width, height, pixmap_size, padding_size).

    width is the least integer with 4·width² ≥ total, i.e. ceil(sqrt(total / 4)),
    computed without floats so every u32 size is exact.
    """
    total = file_size + B2B_HEADER_SIZE
    quads = -(-total // BYTES_PER_PIXEL)
    width = isqrt(quads - 1) + 1
    height = -(-total // (width * BYTES_PER_PIXEL))
    pixmap_size = width * height * BYTES_PER_PIXEL
    padding_size = pixmap_size - total
    return width, height, pixmap_size, padding_size

# --------------------------------------------------------------------------

class BitmapHeader:
    FIELDS = (
        "id", "file_size", "unused1", "offset",
        "dib_size", "width", "height", "planes", "bpp",
        "compression", "pixmap_size", "horizontal", "vertical", "palette", "important",
        "red_mask", "green_mask", "blue_mask", "alpha_mask", "color_space",
        "endpoints_a", "endpoints_b",
        "endpoints_c", "red_gamma", "green_gamma", "blue_gamma",
        "intent", "profile_data", "profile_size", "reserved",
    )
    U128_FIELDS = ("endpoints_a", "endpoints_b")

    def __init__(self, **fields):
        for name in self.FIELDS:
            setattr(self, name, fields[name])

    @classmethod
    def new(cls, width: int, height: int, pixmap_size: int):
        return cls(
            id=BITMAP_ID, file_size=pixmap_size + BITMAP_HEADER_SIZE,
            unused1=0, offset=BITMAP_HEADER_SIZE,
            dib_size=DIB_HEADER_SIZE, width=width, height=height,
            planes=1, bpp=BITS_PER_PIXEL, compression=BI_BITFIELDS,
            pixmap_size=pixmap_size,
            horizontal=PELS_PER_METER, vertical=PELS_PER_METER,
            palette=0, important=0,
            red_mask=RED_MASK, green_mask=GREEN_MASK,
            blue_mask=BLUE_MASK, alpha_mask=ALPHA_MASK,
            color_space=LCS_WINDOWS_COLOR_SPACE,
            endpoints_a=0, endpoints_b=0, endpoints_c=0,
            red_gamma=0, green_gamma=0, blue_gamma=0,
            intent=0, profile_data=0, profile_size=0, reserved=0,
        )

    def pack(self) -> bytes:
        values = [getattr(self, name) for name in self.FIELDS]
        for name in self.U128_FIELDS:
            i = self.FIELDS.index(name)
            values[i] = _u128(values[i])
        return _BITMAP.pack(*values)

    @classmethod
    def unpack(cls, data: bytes):
        values = dict(zip(cls.FIELDS, _BITMAP.unpack(data)))
        for name in cls.U128_FIELDS:
            values[name] = _from_u128(values[name])
        return cls(**values)

    def as_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.FIELDS}


class B2BHeader:
    def __init__(self, padding_size: int, original_file_size: int,
                 signature: int = B2B_SIGNATURE, digest: Optional[int] = None):
        self.padding_size = padding_size
        self.original_file_size = original_file_size
        self.signature = signature
        self.digest = digest

    def pack(self) -> bytes:
        return _B2B.pack(self.padding_size, self.original_file_size,
                         _u128(self.signature), _u128(pack_digest(self.digest)))

    @classmethod
    def unpack(cls, data: bytes):
        padding, original, sig, digest = _B2B.unpack(data)
        return cls(padding, original, _from_u128(sig), unpack_digest(_from_u128(digest)))


class Header:
    """Bitmap header plus conversion header."""

    def __init__(self, bmp: BitmapHeader, b2b: B2BHeader):
        self.bmp = bmp
        self.b2b = b2b

    @classmethod
    def new(cls, file_size: int, digest: Optional[int] = None):
        width, height, pixmap_size, padding_size = geometry(file_size)
        return cls(BitmapHeader.new(width, height, pixmap_size),
                   B2BHeader(padding_size, file_size, digest=digest))

    # -- accessors ---------------------------------------------------------
    @property
    def width(self) -> int: return self.bmp.width

    @property
    def height(self) -> int: return self.bmp.height

    @property
    def pixmap_size(self) -> int: return self.bmp.pixmap_size

    @property
    def file_size(self) -> int: return self.bmp.file_size

    @property
    def padding_size(self) -> int: return self.b2b.padding_size

    @property
    def original_file_size(self) -> int: return self.b2b.original_file_size

    @property
    def digest(self) -> Optional[int]: return self.b2b.digest

    # -- (de)serialisation -------------------------------------------------
    def pack(self) -> bytes:
        try:
            return self.bmp.pack() + self.b2b.pack()
        except (struct.error, OverflowError) as e:
            raise HeaderSerializationError(f"Cannot encode header: {e}") from e

    @classmethod
    def unpack(cls, data: bytes):
        if len(data) < TOTAL_HEADER_SIZE:
            raise HeaderSerializationError(
                f"Need {TOTAL_HEADER_SIZE} header bytes, got {len(data)}")
        return cls(BitmapHeader.unpack(data[:BITMAP_HEADER_SIZE]),
                   B2BHeader.unpack(data[BITMAP_HEADER_SIZE:TOTAL_HEADER_SIZE]))

    @classmethod
    def read_from(cls, f):
        f.seek(0)
        return cls.unpack(f.read(TOTAL_HEADER_SIZE))

    # -- validation --------------------------------------------------------
    def check_id(self):
        if self.bmp.id != BITMAP_ID:
            raise InvalidBitmapIdError(self.bmp.id)

    def check_padding_size(self):
        if self.padding_size >= self.pixmap_size:
            raise BadPaddingSizeError(self.padding_size, self.pixmap_size)

    def check_signature(self):
        # A V5 bitmap could carry these 16 bytes by chance, but a bitmap that
        # was re-encoded or given another header size will not.
        if self.b2b.signature != B2B_SIGNATURE:
            raise InvalidSignatureError(self.b2b.signature)

    def validate(self):
        self.check_id()
        self.check_padding_size()
        self.check_signature()

    def verify(self, other_digest: int) -> VerificationOutcome:
        if self.digest is None:
            return VerificationOutcome.NOT_POSSIBLE
        if self.digest == other_digest & DIGEST_MASK:
            return VerificationOutcome.VERIFIED
        return VerificationOutcome.MISMATCHED

    def __eq__(self, other):
        if not isinstance(other, Header):
            return NotImplemented
        return (self.bmp.as_dict() == other.bmp.as_dict()
                and vars(self.b2b) == vars(other.b2b))

    def __repr__(self):
        return (f"Header(width={self.width}, height={self.height}, "
                f"pixmap_size={self.pixmap_size}, padding_size={self.padding_size}, "
                f"original_file_size={self.original_file_size}, "
                f"digest={'none' if self.digest is None else f'{self.digest:032x}'})")
