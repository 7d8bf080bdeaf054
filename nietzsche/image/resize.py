"""Resizing images by percentage or to a pixel size."""

from __future__ import annotations

import math

from PIL import Image

from nietzsche.image.crop import _load_image, _save_by_extension
from nietzsche.image.errors import ImageError, ImageErrorKind


def _resize(img: Image.Image, width: int, height: int) -> Image.Image:
    """Resize with bicubic filtering; a zero side keeps the aspect ratio."""
    if width < 0 or height < 0 or (width == 0 and height == 0):
        return Image.new(img.mode, (0, 0))
    if img.width == 0 or img.height == 0:
        return Image.new(img.mode, (0, 0))
    if width == 0:
        width = max(1, math.floor(height * img.width / img.height + 0.5))
    elif height == 0:
        height = max(1, math.floor(width * img.height / img.width + 0.5))
    if (width, height) == img.size:
        return img.copy()
    return img.resize((width, height), Image.Resampling.BICUBIC)


def validate_resize_parameters(
    resize_mode: str, percentage: int = 0, pixel_width: int = 0, pixel_height: int = 0
) -> str:
    """Check the parameters and return the effective mode; unknown modes become ``pixel``."""
    if resize_mode not in ("percentage", "pixel"):
        resize_mode = "pixel"
    if resize_mode == "percentage" and percentage <= 0:
        raise ImageError(ImageErrorKind.INVALID_PERCENTAGE)
    if resize_mode == "pixel" and (pixel_width <= 0 or pixel_height <= 0):
        raise ImageError(ImageErrorKind.INVALID_PIXEL)
    return resize_mode


def resize(
    in_path: str,
    out_path: str,
    resize_mode: str = "",
    pixel_width: int = 0,
    pixel_height: int = 0,
    percentage: int = 0,
    maintain_ratio: bool = False,
    no_enlarge_if_smaller: bool = False,
) -> None:
    """Resize an image and save it in the format of ``out_path``'s extension."""
    img = _load_image(in_path)
    mode = validate_resize_parameters(resize_mode, percentage, pixel_width, pixel_height)

    if mode == "percentage":
        new_width = img.width * percentage // 100
        new_height = img.height * percentage // 100
        result = _resize(img, new_width, new_height)
    else:
        result = _resize(img, pixel_width, pixel_height)

    _save_by_extension(result, out_path)