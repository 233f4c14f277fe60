"""
Per-pixel color filters.

All filters work on the whole pixel grid in one vectorised pass and,
except get_channel, modify the image in place.
"""

import numpy as np

from .bitmap import RasterImage
from .constants import BRIGHTNESS_METHODS, LUMA_WEIGHTS


def _truncated_mean(arr: np.ndarray, axis: int) -> np.ndarray:
    """Integer mean along `axis`, truncated (sum // count)."""
    return arr.sum(axis=axis, dtype=np.int64) // arr.shape[axis]


def _to_u8(arr: np.ndarray) -> np.ndarray:
    """Clip to 0..255 and truncate to uint8."""
    return np.clip(arr, 0.0, 255.0).astype(np.uint8)


def invert(image: RasterImage) -> None:
    """Negate every channel: c' = 255 - c."""
    np.subtract(255, image.pixels, out=image.pixels)


def grayscale(image: RasterImage) -> None:
    """Black-and-white by plain averaging: (R + G + B) // 3 on all channels."""
    avg = _truncated_mean(image.pixels, axis=2)
    image.pixels[...] = avg[:, :, None]


def grayscale_luma(image: RasterImage) -> None:
    """
    Black-and-white with the ITU-R 601-2 luma transform.

    L = R*299//1000 + G*587//1000 + B*114//1000

    Each term is truncated on its own, so the result can differ by one
    from rounding the weighted sum once.
    """
    px = image.pixels.astype(np.int32)
    luma = np.zeros(px.shape[:2], dtype=np.int32)
    for c, weight in enumerate(LUMA_WEIGHTS):
        luma += px[:, :, c] * weight // 1000

    image.pixels[...] = luma.astype(np.uint8)[:, :, None]


def brightness(image: RasterImage, factor: float, method: str = "multiply") -> None:
    """
    Adjust brightness in place.

    Args:
        image: Image to modify
        factor: Value added to ("add") or multiplied with ("multiply") each channel
        method: "add" or "multiply"

    Pixel values are clipped to [0, 255].
    """
    if method not in BRIGHTNESS_METHODS:
        raise ValueError("invalid method: method must be add or multiply")

    px = image.pixels.astype(np.float64)
    if method == "add":
        px = px + factor
    else:
        px = px * factor

    image.pixels[...] = _to_u8(px)


def contrast(image: RasterImage, factor: float) -> None:
    """
    Adjust contrast in place around the per-channel mean.

    factor > 1.0 increases contrast, factor < 1.0 decreases it,
    1.0 leaves the image unchanged.
    """
    total_pixels = image.width * image.height
    if total_pixels == 0:
        return

    # Per-channel mean over the whole image, truncated like the grayscale average
    means = _truncated_mean(image.pixels.reshape(-1, 3), axis=0).astype(np.float64)

    px = image.pixels.astype(np.float64)
    px = px * factor + (1.0 - factor) * means[None, None, :]

    image.pixels[...] = _to_u8(px)


def get_channel(image: RasterImage, channel: str) -> RasterImage:
    """Return a copy of `image` keeping only `channel` ("red", "green" or "blue")."""
    return image.get_channel(channel)
