"""Converting images between JPEG, PNG and GIF."""

from __future__ import annotations

from nietzsche.image.crop import _load_image
from nietzsche.image.errors import ImageError, ImageErrorKind


def convert(in_path: str, out_path: str, format: str) -> None:
    """Decode ``in_path`` and write it to ``out_path`` in ``format``.

    The output file is created before the format is checked.
    """
    img = _load_image(in_path)

    try:
        out = open(out_path, "wb")
    except OSError as exc:
        raise ImageError(ImageErrorKind.COULD_NOT_CREATE_FILE) from exc

    with out:
        try:
            if format in ("jpg", "jpeg"):
                if img.mode not in ("RGB", "L"):
                    img = img.convert("RGB")
                img.save(out, "JPEG", quality=90)
            elif format == "png":
                img.save(out, "PNG")
            elif format in ("gif", "gif_animation"):
                img.save(out, "GIF")
            else:
                raise ImageError(ImageErrorKind.INVALID_FORMAT)
        except (OSError, ValueError) as exc:
            raise ImageError(ImageErrorKind.COULD_NOT_ENCODE_FILE) from exc