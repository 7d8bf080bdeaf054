"""Adding text and image watermarks to pictures."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from PIL import Image, ImageDraw, ImageEnhance, ImageFilter, ImageFont

_FONT_PATH = "aria.ttf"


@dataclass
class WatermarkElement:
    """One text or image watermark and how to place it."""

    type: str = ""
    text: str = ""
    image: str = ""
    gravity: str = ""
    vertical_adjustment_percentage: int = 0
    horizontal_adjustment_percentage: int = 0
    rotation: int = 0
    font_family: str = ""
    font_style: str = ""
    font_size: int = 0
    font_color: str = ""
    transparency: int = 0
    mosaic: bool = False


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return -((-value) // 2) if value < 0 else value // 2


def _hex_to_decimal(text: str) -> int:
    result = 0
    for char in text:
        result = (result * 16) & 0xFF
        if "0" <= char <= "9":
            result += ord(char) - ord("0")
        elif "a" <= char <= "f":
            result += ord(char) - ord("a") + 10
        elif "A" <= char <= "F":
            result += ord(char) - ord("A") + 10
        result &= 0xFF
    return result


def parse_color(hex_color: str) -> tuple[int, int, int, int]:
    """Turn ``#rrggbb`` into an opaque RGBA tuple; anything else is black."""
    if hex_color.startswith("#"):
        hex_color = hex_color[1:]
    if len(hex_color) != 6:
        return (0, 0, 0, 255)
    return (
        _hex_to_decimal(hex_color[0:2]),
        _hex_to_decimal(hex_color[2:4]),
        _hex_to_decimal(hex_color[4:6]),
        255,
    )


def calculate_position(
    img_width: int,
    img_height: int,
    element_width: int,
    element_height: int,
    gravity: str,
    vert_adj: int,
    horiz_adj: int,
) -> tuple[int, int]:
    """Return the top-left corner for an element placed by ``gravity``."""
    center_x = _half(img_width - element_width)
    center_y = _half(img_height - element_height)
    right = img_width - element_width
    bottom = img_height - element_height
    positions = {
        "northwest": (0, 0),
        "north": (center_x, 0),
        "northeast": (right, 0),
        "west": (0, center_y),
        "center": (center_x, center_y),
        "east": (right, center_y),
        "southwest": (0, bottom),
        "south": (center_x, bottom),
        "southeast": (right, bottom),
    }
    x, y = positions.get(gravity.lower(), (center_x, center_y))
    x += int(float(img_width) * (horiz_adj / 100.0))
    y += int(float(img_height) * (vert_adj / 100.0))
    return x, y


def _validate(elements: Sequence[WatermarkElement], input_path: str, output_path: str) -> None:
    if not elements:
        raise ValueError("no watermark elements provided")
    if input_path == "":
        raise ValueError("input path not provided")
    if output_path == "":
        raise ValueError("output path not provided")
    for element in elements:
        if element.type == "":
            raise ValueError("watermark element type not provided")
        if element.type == "text" and element.text == "":
            raise ValueError("text watermark element text not provided")
        if element.type == "image" and element.image == "":
            raise ValueError("image watermark element image not provided")


def _reduce_noise(img: Image.Image) -> Image.Image:
    blurred = img.convert("RGBA").filter(ImageFilter.GaussianBlur(0.3))
    return ImageEnhance.Contrast(blurred).enhance(0.95)


def _scale(img: Image.Image, width: int, height: int) -> Image.Image:
    if width == 0 and height == 0:
        return img
    if width == 0:
        width = max(1, round(height * img.width / img.height))
    elif height == 0:
        height = max(1, round(width * img.height / img.width))
    return img.resize((width, height), Image.Resampling.LANCZOS)


def _add_image_watermark(base: Image.Image, element: WatermarkElement) -> Image.Image:
    with Image.open(element.image) as overlay_file:
        overlay = _reduce_noise(overlay_file)

    mark = _scale(overlay, int(base.width * 0.2), int(base.height * 0.2))
    if element.rotation != 0:
        mark = mark.rotate(element.rotation, expand=True, fillcolor=(0, 0, 0, 0))

    x, y = calculate_position(
        base.width,
        base.height,
        mark.width,
        mark.height,
        element.gravity,
        element.vertical_adjustment_percentage,
        element.horizontal_adjustment_percentage,
    )

    factor = (100 - element.transparency) / 100.0
    alpha = mark.getchannel("A").point(lambda a: max(0, min(255, math.trunc(a * factor))))
    mark.putalpha(alpha)

    layer = Image.new("RGBA", base.size, (0, 0, 0, 0))
    layer.paste(mark, (x, y))
    return Image.alpha_composite(base, layer)


def _add_text_watermark(base: Image.Image, element: WatermarkElement) -> Image.Image:
    font = ImageFont.truetype(_FONT_PATH, element.font_size)
    color = parse_color(element.font_color)
    text_width = int(font.getlength(element.text))

    x, y = calculate_position(
        base.width,
        base.height,
        text_width,
        element.font_size,
        element.gravity,
        element.vertical_adjustment_percentage,
        element.horizontal_adjustment_percentage,
    )
    ImageDraw.Draw(base).text((x, y + element.font_size), element.text, font=font, fill=color, anchor="ls")
    return base


def add_watermark(elements: Sequence[WatermarkElement], input_path: str, output_path: str) -> None:
    """Apply each watermark element in order and save the result."""
    _validate(elements, input_path, output_path)

    with Image.open(input_path) as source:
        source.load()
        source_format = source.format
        working = source.convert("RGBA")

    for element in elements:
        kind = element.type.lower()
        if kind == "text":
            working = _add_text_watermark(working, element)
        elif kind == "image":
            working = _add_image_watermark(working, element)

    with open(output_path, "wb") as out:
        if source_format == "JPEG":
            working.convert("RGB").save(out, "JPEG", quality=75)
        else:
            working.save(out, "PNG")