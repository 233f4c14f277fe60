"""
Geometric transformations for bitmaps.
"""

import logging
from dataclasses import replace

from .bitmap import RasterImage

logger = logging.getLogger(__name__)


def crop(image: RasterImage, x: int, y: int, width: int, height: int) -> RasterImage:
    """
    Crop a region of the image. (0, 0) is the top-left pixel.

    Args:
        image: Source image (left unchanged)
        x, y: Top-left corner of the region
        width, height: Region size in pixels

    Returns:
        New RasterImage of size width x height with updated headers
    """
    if x < 0 or y < 0:
        raise ValueError("invalid bounds: x and y must be >= 0")
    if width <= 0:
        raise ValueError("width must be > 0")
    if height <= 0:
        raise ValueError("height must be > 0")
    if x + width > image.width:
        raise ValueError("invalid bounds: width out of bounds")
    if y + height > image.height:
        raise ValueError("invalid bounds: height out of bounds")

    cropped = RasterImage(
        replace(image.file_header),
        replace(image.info_header),
        image.pixels[y:y + height, x:x + width].copy(),
        filename=image.filename,
    )
    cropped.update_meta()

    logger.debug("Cropped %dx%d at (%d, %d) from %dx%d", width, height, x, y, image.width, image.height)
    return cropped
