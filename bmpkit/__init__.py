"""
Codec and in-memory model for uncompressed 24-bit BMP images.

This package contains:
- Reading and writing of BITMAPFILEHEADER / BITMAPINFOHEADER files
- The RasterImage pixel grid model
- Per-pixel color filters (invert, grayscale, brightness, contrast)
- Geometric operations (crop)
- Terminal preview and conversion to Pillow / OpenCV
"""

from .bitmap import RasterImage, create_bitmap, decode_bitmap, encode_bitmap, read_bitmap
from .errors import BitmapError, FormatError, TruncatedFileError
from .headers import FileHeader, InfoHeader, Pixel

__version__ = "1.0.0"

__all__ = [
    "BitmapError",
    "FileHeader",
    "FormatError",
    "InfoHeader",
    "Pixel",
    "RasterImage",
    "TruncatedFileError",
    "create_bitmap",
    "decode_bitmap",
    "encode_bitmap",
    "read_bitmap",
]
