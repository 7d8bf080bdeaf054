"""Cropping images, plus shared load and save helpers."""

from __future__ import annotations

import io
import os

from PIL import Image

from nietzsche.files import read_file
from nietzsche.image.errors import ImageError, ImageErrorKind

_SAVE_FORMATS = {
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".png": "PNG",
    ".gif": "GIF",
    ".tif": "TIFF",
    ".tiff": "TIFF",
    ".bmp": "BMP",
}


def _load_image(path: str) -> Image.Image:
    """Read and decode an image, raising ImageError on failure."""
    try:
        data = read_file(path).content
    except OSError as exc:
        raise ImageError(ImageErrorKind.COULD_NOT_READ_FILE) from exc
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise ImageError(ImageErrorKind.COULD_NOT_DECODE_FILE) from exc
    return img


def _save_by_extension(img: Image.Image, path: str) -> None:
    """Save in the format implied by the path's extension."""
    fmt = _SAVE_FORMATS.get(os.path.splitext(path)[1].lower())
    if fmt is None or img.width == 0 or img.height == 0:
        raise ImageError(ImageErrorKind.COULD_NOT_SAVE_FILE)
    options = {}
    if fmt == "JPEG":
        if img.mode not in ("RGB", "L"):
            img = img.convert("RGB")
        options["quality"] = 95
    try:
        img.save(path, fmt, **options)
    except (OSError, ValueError) as exc:
        raise ImageError(ImageErrorKind.COULD_NOT_SAVE_FILE) from exc


def crop(in_path: str, out_path: str, width: int, height: int, x: int = 0, y: int = 0) -> None:
    """Cut a ``width`` x ``height`` region at (``x``, ``y``) out of an image."""
    if width <= 0 or height <= 0:
        raise ImageError(ImageErrorKind.WIDTH_OR_HEIGHT_ZERO)
    if x < 0 or y < 0:
        raise ImageError(ImageErrorKind.COORDINATES_INVALID)

    img = _load_image(in_path)
    right = min(x + width, img.width)
    bottom = min(y + height, img.height)
    if right <= x or bottom <= y:
        cropped = Image.new(img.mode, (0, 0))
    else:
        cropped = img.crop((x, y, right, bottom))
    _save_by_extension(cropped, out_path)