"""
Format constants for 24-bit uncompressed bitmaps.
"""

BMP_SIGNATURE = b"BM"  # 0x42 0x4D

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE  # no palette

BITS_PER_PIXEL = 24
BYTES_PER_PIXEL = BITS_PER_PIXEL // 8
COMPRESSION_NONE = 0  # BI_RGB
ROW_ALIGNMENT = 4

# ITU-R 601-2, in thousandths
LUMA_WEIGHTS = (299, 587, 114)

CHANNELS = ("red", "green", "blue")
BRIGHTNESS_METHODS = ("add", "multiply")
