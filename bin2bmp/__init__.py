__version__ = "0.1.0"

from .errors import (B2BError, HeaderSerializationError, InvalidBitmapIdError,
                     InvalidSignatureError, BadPaddingSizeError, FileTooLargeError)
from .header import Header, VerificationOutcome, geometry
from .transform import embed, extract
from .files import bin_to_bmp, bmp_to_bin, convert
from .pixmap import load_pixels

__all__ = [
    "Header", "VerificationOutcome", "geometry",
    "embed", "extract", "bin_to_bmp", "bmp_to_bin", "convert", "load_pixels",
    "B2BError", "HeaderSerializationError", "InvalidBitmapIdError",
    "InvalidSignatureError", "BadPaddingSizeError", "FileTooLargeError",
]
