"""
Exceptions raised by the bitmap codec.
"""


class BitmapError(Exception):
    """Base class for bitmap codec errors."""
    pass


class FormatError(BitmapError):
    """Raised when a stream is not a supported 24-bit uncompressed bitmap."""
    pass


class TruncatedFileError(BitmapError, OSError):
    """Stream ended before the header or pixel data was complete"""
    def __init__(self, expected, actual, what="pixel data"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Truncated {what}: expected {expected} bytes, got {actual}")
