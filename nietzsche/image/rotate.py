"""Rotating images."""

from __future__ import annotations

from nietzsche.image.crop import _load_image, _save_by_extension
from nietzsche.image.errors import ImageError, ImageErrorKind


def rotate(in_path: str, out_path: str, angle: float) -> None:
    """Rotate an image counter-clockwise by ``angle`` degrees (-360..360)."""
    if angle < -360 or angle > 360:
        raise ImageError(ImageErrorKind.INVALID_ANGLE)

    img = _load_image(in_path).convert("RGBA")
    rotated = img.rotate(angle, expand=True, fillcolor=(0, 0, 0, 0))
    _save_by_extension(rotated, out_path)