"""
Reading, writing and the in-memory model of 24-bit uncompressed bitmaps.

Pixels are held as a numpy uint8 array of shape (H, W, 3) in RGB order,
rows top-to-bottom, whatever the row order on disk was.
"""

import io
import logging
from dataclasses import replace
from os import PathLike

import numpy as np

from .constants import (
    BITS_PER_PIXEL,
    BMP_SIGNATURE,
    BYTES_PER_PIXEL,
    CHANNELS,
    COMPRESSION_NONE,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    PIXEL_DATA_OFFSET,
)
from .errors import FormatError, TruncatedFileError
from .headers import FileHeader, InfoHeader, Pixel

logger = logging.getLogger(__name__)


def row_layout(width: int) -> tuple[int, int]:
    """
    Return (stride, padding) for a row of `width` pixels.

    Rows are padded to a multiple of 4 bytes, so padding is 0..3.
    """
    stride = ((width * BITS_PER_PIXEL + 31) // 32) * 4
    return stride, stride - width * BYTES_PER_PIXEL


class RasterImage:
    """
    A decoded bitmap: both headers plus a dense RGB pixel grid.

    `stride` and `padding` describe the encoded row layout and are derived
    from the grid width. Operations that change the grid dimensions must
    call `update_meta()` before the image is written again.
    """

    def __init__(
        self,
        file_header: FileHeader,
        info_header: InfoHeader,
        pixels: np.ndarray,
        filename: str | None = None,
    ):
        self.filename = filename
        self.file_header = file_header
        self.info_header = info_header
        self.pixels = pixels
        self.stride, self.padding = row_layout(self.width)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def pixel(self, x: int, y: int) -> Pixel:
        r, g, b = self.pixels[y, x]
        return Pixel(int(r), int(g), int(b))

    def set_pixel(self, x: int, y: int, pixel) -> None:
        self.pixels[y, x] = tuple(pixel)

    def copy(self) -> "RasterImage":
        """Return an independent copy (headers and pixels)."""
        return RasterImage(
            replace(self.file_header),
            replace(self.info_header),
            self.pixels.copy(),
            filename=self.filename,
        )

    def check_grid(self) -> None:
        """Raise ValueError unless pixels is a non-empty (H, W, 3) uint8 array."""
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(f"pixel grid must have shape (H, W, 3), got {self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"pixel grid must be uint8, got {self.pixels.dtype}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("pixel grid must not be empty")

    def update_meta(self) -> None:
        """Recompute stride, padding and the size fields from the pixel grid."""
        self.check_grid()

        self.stride, self.padding = row_layout(self.width)
        size_image = self.stride * self.height

        self.info_header.width = self.width
        self.info_header.height = self.height
        self.info_header.size_image = size_image
        self.file_header.size = FILE_HEADER_SIZE + INFO_HEADER_SIZE + size_image

    def get_channel(self, channel: str) -> "RasterImage":
        """
        Return a copy holding only one color channel.

        channel is one of "red", "green" or "blue"; the other two channels
        are set to zero.
        """
        if channel not in CHANNELS:
            raise ValueError("invalid color channel: only red, green, and blue are supported")

        result = self.copy()
        keep = CHANNELS.index(channel)
        for c in range(3):
            if c != keep:
                result.pixels[:, :, c] = 0
        return result

    def save(self, path: str | PathLike) -> None:
        """Write the image to `path` as a bottom-up 24-bit bitmap."""
        with open(path, "wb") as f:
            encode_bitmap(self, f)

    def __eq__(self, other):
        if not isinstance(other, RasterImage):
            return NotImplemented
        return (
            self.stride == other.stride
            and self.padding == other.padding
            and np.array_equal(self.pixels, other.pixels)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"RasterImage(filename={self.filename!r}, width={self.width}, "
            f"height={self.height}, stride={self.stride}, padding={self.padding})"
        )


def create_bitmap(width: int, height: int) -> RasterImage:
    """Create a black 24-bit bitmap of the given size."""
    if width <= 0:
        raise ValueError("width must be > 0")
    if height <= 0:
        raise ValueError("height must be > 0")

    stride, _ = row_layout(width)
    size_image = stride * height

    bf_header = FileHeader(size=PIXEL_DATA_OFFSET + size_image, off_bits=PIXEL_DATA_OFFSET)
    bi_header = InfoHeader(width=width, height=height, size_image=size_image)
    pixels = np.zeros((height, width, 3), dtype=np.uint8)

    return RasterImage(bf_header, bi_header, pixels)


def _read_exact(stream, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise TruncatedFileError(size, len(data), what)
    return data


def decode_bitmap(stream, filename: str | None = None) -> RasterImage:
    """
    Decode a 24-bit uncompressed bitmap from a binary stream.

    Args:
        stream: Readable and seekable binary file object
        filename: Name recorded on the image (defaults to stream.name)

    Returns:
        RasterImage with rows ordered top-to-bottom

    Raises:
        FormatError: Not a bitmap, or not 24-bit uncompressed
        TruncatedFileError: Stream ends inside the headers or pixel data
    """
    if filename is None:
        filename = getattr(stream, "name", None)

    data = stream.read(FILE_HEADER_SIZE)
    if len(data) < len(BMP_SIGNATURE):
        raise TruncatedFileError(FILE_HEADER_SIZE, len(data), "file header")
    if data[:2] != BMP_SIGNATURE:
        raise FormatError("invalid file: not a bitmap")
    if len(data) < FILE_HEADER_SIZE:
        raise TruncatedFileError(FILE_HEADER_SIZE, len(data), "file header")
    bf_header = FileHeader.unpack(data)

    bi_header = InfoHeader.unpack(_read_exact(stream, INFO_HEADER_SIZE, "info header"))

    if bi_header.bit_count != BITS_PER_PIXEL or bi_header.compression != COMPRESSION_NONE:
        raise FormatError(
            "unsupported bit depth/compression: only 24-bit uncompressed is supported "
            f"(got {bi_header.bit_count}-bit, compression {bi_header.compression})"
        )
    if bi_header.size != INFO_HEADER_SIZE:
        raise FormatError(f"malformed header: info header size {bi_header.size}, expected {INFO_HEADER_SIZE}")
    if bi_header.width <= 0 or bi_header.height == 0:
        raise FormatError(f"malformed header: invalid dimensions {bi_header.width}x{bi_header.height}")
    if bf_header.off_bits < PIXEL_DATA_OFFSET:
        raise FormatError(f"malformed header: pixel data offset {bf_header.off_bits} overlaps the headers")

    width = bi_header.width
    height = bi_header.height
    top_down = height < 0
    if top_down:
        height = -height
        bi_header.height = height

    stride, padding = row_layout(width)

    # The padding after the last row is not needed to recover any pixel
    expected = stride * height

    available = stream.seek(0, io.SEEK_END) - bf_header.off_bits
    if available < expected - padding:
        raise TruncatedFileError(expected - padding, max(available, 0))

    stream.seek(bf_header.off_bits)
    raw = stream.read(expected)
    if len(raw) < expected - padding:
        raise TruncatedFileError(expected - padding, len(raw))
    raw = raw.ljust(expected, b"\x00")

    rows = np.frombuffer(raw, dtype=np.uint8).reshape(height, stride)
    bgr = rows[:, : width * BYTES_PER_PIXEL].reshape(height, width, BYTES_PER_PIXEL)
    pixels = bgr[:, :, ::-1]
    if not top_down:
        pixels = pixels[::-1]

    logger.debug(
        "Decoded %s: %dx%d, %s, stride=%d, padding=%d",
        filename, width, height, "top-down" if top_down else "bottom-up", stride, padding,
    )

    return RasterImage(bf_header, bi_header, pixels.copy(), filename=filename)


def read_bitmap(path: str | PathLike) -> RasterImage:
    """Read a bitmap file from disk."""
    with open(path, "rb") as f:
        return decode_bitmap(f, filename=str(path))


def encode_bitmap(image: RasterImage, stream) -> None:
    """
    Encode an image to a binary stream as a bottom-up 24-bit bitmap.

    Headers are written with the offset, sizes and dimensions derived from
    the pixel grid, so the output is always a plain 54-byte-header file.
    """
    image.check_grid()
    height, width = image.height, image.width
    stride, padding = row_layout(width)
    size_image = stride * height

    bf_header = replace(
        image.file_header,
        off_bits=PIXEL_DATA_OFFSET,
        size=PIXEL_DATA_OFFSET + size_image,
    )
    bi_header = replace(
        image.info_header,
        size=INFO_HEADER_SIZE,
        width=width,
        height=height,
        size_image=size_image,
    )

    # Last row first, BGR byte order
    rows = image.pixels[::-1, :, ::-1].reshape(height, width * BYTES_PER_PIXEL)
    if padding:
        rows = np.hstack([rows, np.zeros((height, padding), dtype=np.uint8)])

    stream.write(bf_header.pack())
    stream.write(bi_header.pack())
    stream.write(rows.tobytes())

    logger.debug("Encoded %dx%d bitmap, %d bytes", width, height, bf_header.size)
