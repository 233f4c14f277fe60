"""
Fixed-layout header records of a DIB file.

See BITMAPFILEHEADER and BITMAPINFOHEADER:
https://learn.microsoft.com/en-us/windows/win32/api/wingdi/ns-wingdi-bitmapfileheader
"""

import struct
from dataclasses import astuple, dataclass
from typing import NamedTuple

from .constants import (
    BITS_PER_PIXEL,
    BMP_SIGNATURE,
    COMPRESSION_NONE,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    PIXEL_DATA_OFFSET,
)
from .errors import FormatError

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")


class Pixel(NamedTuple):
    r: int
    g: int
    b: int


@dataclass
class FileHeader:
    type: bytes = BMP_SIGNATURE
    size: int = 0            # whole file, in bytes
    reserved1: int = 0
    reserved2: int = 0
    off_bits: int = PIXEL_DATA_OFFSET  # start of the pixel array

    def pack(self) -> bytes:
        return _FILE_HEADER.pack(*astuple(self))

    @classmethod
    def unpack(cls, data: bytes) -> "FileHeader":
        if len(data) < FILE_HEADER_SIZE:
            raise FormatError(
                f"malformed header: file header needs {FILE_HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_FILE_HEADER.unpack_from(data))


@dataclass
class InfoHeader:
    size: int = INFO_HEADER_SIZE
    width: int = 0
    height: int = 0              # negative means rows are stored top-down
    planes: int = 1
    bit_count: int = BITS_PER_PIXEL
    compression: int = COMPRESSION_NONE
    size_image: int = 0
    x_pixels_per_m: int = 0
    y_pixels_per_m: int = 0
    colors_used: int = 0
    colors_important: int = 0

    def pack(self) -> bytes:
        return _INFO_HEADER.pack(*astuple(self))

    @classmethod
    def unpack(cls, data: bytes) -> "InfoHeader":
        if len(data) < INFO_HEADER_SIZE:
            raise FormatError(
                f"malformed header: info header needs {INFO_HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_INFO_HEADER.unpack_from(data))
