"""Re-encoding images as PNG at a chosen compression level."""

from __future__ import annotations

import enum
import io
from typing import Union

from nietzsche.image.crop import _load_image
from nietzsche.image.errors import ImageError, ImageErrorKind


class CompressionLevel(str, enum.Enum):
    """How hard the PNG encoder should work."""

    LOW = "low"
    RECOMMENDED = "recommended"
    EXTREME = "extreme"


# zlib levels: default, best speed, best compression
_ZLIB_LEVELS = {
    CompressionLevel.LOW: 6,
    CompressionLevel.RECOMMENDED: 1,
    CompressionLevel.EXTREME: 9,
}


def compress(
    in_path: str,
    out_path: str,
    compression_level: Union[CompressionLevel, str],
) -> None:
    """Decode the image at ``in_path`` and write it to ``out_path`` as PNG."""
    try:
        level = CompressionLevel(compression_level)
    except ValueError:
        raise ImageError(ImageErrorKind.INVALID_COMPRESSION_LEVEL) from None

    img = _load_image(in_path)

    buffer = io.BytesIO()
    try:
        img.save(buffer, "PNG", compress_level=_ZLIB_LEVELS[level])
    except (OSError, ValueError) as exc:
        raise ImageError(ImageErrorKind.COULD_NOT_ENCODE_FILE) from exc

    try:
        with open(out_path, "wb") as out:
            out.write(buffer.getvalue())
    except OSError as exc:
        raise ImageError(ImageErrorKind.COULD_NOT_SAVE_FILE) from exc