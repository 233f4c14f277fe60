# bmpkit/export.py
import numpy as np
import cv2
from PIL import Image

from .bitmap import RasterImage, create_bitmap


def from_array(arr: np.ndarray, filename: str | None = None) -> RasterImage:
    """
    arr: HxWx3, uint8, RGB (copied)
    """
    arr = np.asarray(arr)
    if arr.ndim != 3 or arr.shape[2] != 3 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError(f"expected a non-empty (H, W, 3) array, got shape {arr.shape}")

    h, w, _ = arr.shape
    image = create_bitmap(w, h)
    image.pixels[...] = arr.astype(np.uint8, copy=False)
    image.filename = filename
    return image


def to_pil(image: RasterImage) -> Image.Image:
    return Image.fromarray(image.pixels.copy())


def from_pil(pil_img: Image.Image, filename: str | None = None) -> RasterImage:
    if pil_img.mode != "RGB":
        pil_img = pil_img.convert("RGB")
    return from_array(np.array(pil_img, dtype=np.uint8), filename=filename)


def save_jpeg(image: RasterImage, path: str, quality: int = 95) -> bool:
    """
    Save the bitmap as an 8-bit JPEG. Uses OpenCV.
    """
    bgr = np.ascontiguousarray(image.pixels[..., ::-1])  # RGB->BGR for OpenCV
    try:
        ok = cv2.imwrite(str(path), bgr, [cv2.IMWRITE_JPEG_QUALITY, int(quality)])
    except cv2.error as e:
        raise OSError(f"OpenCV could not write {path}: {e}") from e
    if not ok:
        raise OSError(f"OpenCV could not write {path}")
    return True
