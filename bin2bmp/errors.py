# ==================================================
# bin2bmp/errors.py
# ==================================================
class B2BError(Exception):
    """Base class for conversion errors."""
    pass


class HeaderSerializationError(B2BError, ValueError):
    """Header could not be packed or unpacked."""
    pass


class InvalidBitmapIdError(B2BError, ValueError):
    """First two bytes are not the bitmap id."""
    def __init__(self, found):
        self.found = found
        super().__init__(f"Invalid bitmap id: 0x{found:04X}")


class InvalidSignatureError(B2BError, ValueError):
    """Bitmap was not produced by bin2bmp (or was re-encoded since)."""
    def __init__(self, found):
        self.found = found
        super().__init__(f"Invalid bin2bmp signature: 0x{found:032X}")


class BadPaddingSizeError(B2BError, ValueError):
    def __init__(self, padding_size, pixmap_size):
        self.padding_size = padding_size
        self.pixmap_size = pixmap_size
        super().__init__(f"Padding size {padding_size} not below pixmap size {pixmap_size}")


class FileTooLargeError(B2BError):
    """Input cannot be described by the u32 size fields."""
    def __init__(self, size, limit):
        self.size = size
        self.limit = limit
        super().__init__(f"{size}-byte input does not fit a bitmap of at most {limit} bytes")
