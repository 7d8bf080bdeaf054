"""Upscaling images by a fixed factor."""

from __future__ import annotations

from nietzsche.image.crop import _load_image, _save_by_extension
from nietzsche.image.errors import ImageError, ImageErrorKind
from nietzsche.image.resize import _resize


def upscale(in_path: str, out_path: str, multiplier: int) -> None:
    """Scale an image up by 2 or 4."""
    if multiplier not in (2, 4):
        raise ImageError(ImageErrorKind.INVALID_MULTIPLIER)

    img = _load_image(in_path)
    result = _resize(img, img.width * multiplier, img.height * multiplier)
    _save_by_extension(result, out_path)