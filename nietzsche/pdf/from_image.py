"""Placing an image on a single PDF page."""

from __future__ import annotations

import zlib

from PIL import Image

from nietzsche.pdf.errors import PdfError, PdfErrorKind

_POINTS_PER_MM = 72.0 / 25.4

# Page sizes in points, portrait.
_PAGE_SIZES = {
    "a4": (595.28, 841.89),
    "letter": (612.0, 792.0),
}

# The image area is laid out on an A4 sheet in millimetres.
_LAYOUT_WIDTH_MM = 210.0
_LAYOUT_HEIGHT_MM = 297.0


def validate_orientation(orientation: str) -> str:
    """Return ``"P"`` for Portrait or ``"L"`` for Landscape."""
    if orientation not in ("Portrait", "Landscape"):
        raise PdfError(PdfErrorKind.INVALID_ORIENTATION)
    return "P" if orientation == "Portrait" else "L"


def validate_page_size(page_size: str) -> str:
    """Return the page size to use; ``fit`` becomes ``A4``."""
    if page_size not in ("A4", "fit", "letter"):
        raise PdfError(PdfErrorKind.INVALID_PAGE_SIZE)
    return "A4" if page_size == "fit" else page_size


def validate_margin(margin: int) -> None:
    """Reject negative margins."""
    if margin < 0:
        raise PdfError(PdfErrorKind.INVALID_MARGIN)


def _load(path: str) -> Image.Image:
    try:
        with Image.open(path) as source:
            source.load()
            if source.mode in ("1", "L"):
                return source.convert("L")
            return source.convert("RGB")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise PdfError(PdfErrorKind.FAILED_TO_READ_OR_WRITE) from exc


def _image_box(img: Image.Image, width: float, height: float) -> tuple[float, float]:
    """Resolve the drawn size in millimetres; zero or negative sides are derived."""
    if width == 0 and height == 0:
        width = height = -96.0
    if width < 0:
        width = -img.width * 72.0 / width / _POINTS_PER_MM
    if height < 0:
        height = -img.height * 72.0 / height / _POINTS_PER_MM
    if width == 0:
        width = height * img.width / img.height
    if height == 0:
        height = width * img.height / img.width
    return width, height


def _render(page: tuple[float, float], img: Image.Image, box: tuple[float, float, float, float]) -> bytes:
    page_w, page_h = page
    x, y, w, h = (value * _POINTS_PER_MM for value in box)
    colour_space = "/DeviceGray" if img.mode == "L" else "/DeviceRGB"
    pixels = zlib.compress(img.tobytes())
    content = f"q {w:.2f} 0 0 {h:.2f} {x:.2f} {page_h - y - h:.2f} cm /I1 Do Q".encode("ascii")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        (
            f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {page_w:.2f} {page_h:.2f}] "
            "/Resources << /XObject << /I1 5 0 R >> >> /Contents 4 0 R >>"
        ).encode("ascii"),
        f"<< /Length {len(content)} >>\nstream\n".encode("ascii") + content + b"\nendstream",
        (
            f"<< /Type /XObject /Subtype /Image /Width {img.width} /Height {img.height} "
            f"/ColorSpace {colour_space} /BitsPerComponent 8 /Filter /FlateDecode "
            f"/Length {len(pixels)} >>\nstream\n"
        ).encode("ascii")
        + pixels
        + b"\nendstream",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode("ascii") + body + b"\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n".encode("ascii")
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode("ascii")
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n"
    ).encode("ascii")
    return bytes(out)


def from_image(
    input_path: str,
    output_path: str,
    orientation: str,
    margin: int,
    page_size: str,
) -> None:
    """Write a one-page PDF with the image at ``input_path`` inside the margins."""
    orient = validate_orientation(orientation)
    size = validate_page_size(page_size)
    validate_margin(margin)

    page_w, page_h = _PAGE_SIZES[size.lower()]
    if orient == "L":
        page_w, page_h = page_h, page_w

    img = _load(input_path)
    offset = float(margin)
    width, height = _image_box(
        img, _LAYOUT_WIDTH_MM - offset * 2, _LAYOUT_HEIGHT_MM - offset * 2
    )
    document = _render((page_w, page_h), img, (offset, offset, width, height))

    try:
        with open(output_path, "wb") as out:
            out.write(document)
    except OSError as exc:
        raise PdfError(PdfErrorKind.FAILED_TO_READ_OR_WRITE) from exc