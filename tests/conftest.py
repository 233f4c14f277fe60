"""
Pytest fixtures: small synthetic bitmaps and hand-built BMP byte streams.
"""

import struct

import numpy as np
import pytest

from bmpkit.bitmap import create_bitmap


def build_bmp(rows, top_down=False, bit_count=24, compression=0, magic=b"BM",
              off_bits=54, info_size=40, pad_byte=b"\x00", trailing_padding=True):
    """
    Build raw BMP bytes from rows of (R, G, B) tuples, listed top-to-bottom.
    """
    height = len(rows)
    width = len(rows[0])
    stride = ((width * 24 + 31) // 32) * 4
    padding = stride - width * 3

    encoded_rows = []
    for row in rows:
        data = b"".join(bytes((b, g, r)) for r, g, b in row)
        encoded_rows.append(data + pad_byte * padding)
    if not top_down:
        encoded_rows.reverse()
    pixel_data = b"".join(encoded_rows)
    if not trailing_padding and padding:
        pixel_data = pixel_data[:-padding]

    gap = b"\x00" * (off_bits - 54)
    file_size = off_bits + len(pixel_data)
    file_header = struct.pack("<2sIHHI", magic, file_size, 0, 0, off_bits)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        info_size, width, -height if top_down else height,
        1, bit_count, compression, stride * height, 2835, 2835, 0, 0,
    )
    return file_header + info_header + gap + pixel_data


@pytest.fixture
def rgb_rows():
    # 3x2, width 3 -> 9 bytes per row, 3 bytes padding
    return [
        [(255, 0, 0), (0, 255, 0), (0, 0, 255)],
        [(10, 20, 30), (100, 150, 200), (255, 255, 255)],
    ]


@pytest.fixture
def sample_image():
    """4x3 image with distinct values in every channel."""
    image = create_bitmap(4, 3)
    image.pixels[...] = np.arange(4 * 3 * 3, dtype=np.uint8).reshape(3, 4, 3) * 7
    return image


@pytest.fixture
def random_image():
    rng = np.random.default_rng(616)
    image = create_bitmap(5, 7)
    image.pixels[...] = rng.integers(0, 256, size=(7, 5, 3), dtype=np.uint8)
    return image


@pytest.fixture
def make_bmp():
    return build_bmp
