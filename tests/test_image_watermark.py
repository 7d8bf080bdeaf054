import pytest
from PIL import Image

from nietzsche.image.watermark import (
    WatermarkElement,
    add_watermark,
    calculate_position,
    parse_color,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("#ff0000", (255, 0, 0, 255)),
        ("00FF80", (0, 255, 128, 255)),
        ("#abc", (0, 0, 0, 255)),
        ("", (0, 0, 0, 255)),
    ],
)
def test_parse_color(text, expected):
    assert parse_color(text) == expected


@pytest.mark.parametrize(
    "gravity,expected",
    [
        ("northwest", (0, 0)),
        ("north", (40, 0)),
        ("NorthEast", (80, 0)),
        ("west", (0, 45)),
        ("center", (40, 45)),
        ("east", (80, 45)),
        ("southwest", (0, 90)),
        ("south", (40, 90)),
        ("southeast", (80, 90)),
        ("unknown", (40, 45)),
    ],
)
def test_calculate_position(gravity, expected):
    assert calculate_position(100, 100, 20, 10, gravity, 0, 0) == expected


def test_calculate_position_adjustments():
    assert calculate_position(200, 100, 20, 10, "northwest", 10, 25) == (50, 10)


def test_calculate_position_truncates_toward_zero():
    assert calculate_position(10, 10, 15, 15, "center", 0, 0) == (-2, -2)


@pytest.mark.parametrize(
    "elements,message",
    [
        ([], "no watermark elements provided"),
        ([WatermarkElement()], "watermark element type not provided"),
        ([WatermarkElement(type="text")], "text watermark element text not provided"),
        ([WatermarkElement(type="image")], "image watermark element image not provided"),
    ],
)
def test_validation(tmp_path, elements, message):
    with pytest.raises(ValueError, match=message):
        add_watermark(elements, "in.png", str(tmp_path / "out.png"))


def test_missing_paths():
    element = [WatermarkElement(type="text", text="hi")]
    with pytest.raises(ValueError, match="input path not provided"):
        add_watermark(element, "", "out.png")
    with pytest.raises(ValueError, match="output path not provided"):
        add_watermark(element, "in.png", "")


def test_image_watermark_is_blended(tmp_path):
    base = tmp_path / "base.png"
    Image.new("RGB", (100, 100), (255, 255, 255)).save(base)
    mark = tmp_path / "mark.png"
    Image.new("RGB", (50, 50), (0, 0, 0)).save(mark)
    out = tmp_path / "out.png"

    add_watermark(
        [WatermarkElement(type="image", image=str(mark), gravity="northwest")],
        str(base),
        str(out),
    )
    with Image.open(out) as img:
        assert img.format == "PNG"
        assert img.size == (100, 100)
        rgb = img.convert("RGB")
        assert rgb.getpixel((10, 10))[0] < 50
        assert rgb.getpixel((90, 90)) == (255, 255, 255)


def test_full_transparency_leaves_image(tmp_path):
    base = tmp_path / "base.png"
    Image.new("RGB", (50, 50), (255, 255, 255)).save(base)
    mark = tmp_path / "mark.png"
    Image.new("RGB", (20, 20), (0, 0, 0)).save(mark)
    out = tmp_path / "out.png"
    add_watermark(
        [WatermarkElement(type="image", image=str(mark), transparency=100)],
        str(base),
        str(out),
    )
    with Image.open(out) as img:
        assert img.convert("RGB").getpixel((25, 25)) == (255, 255, 255)


def test_text_watermark_without_font(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    base = tmp_path / "base.png"
    Image.new("RGB", (50, 50)).save(base)
    with pytest.raises(OSError):
        add_watermark(
            [WatermarkElement(type="text", text="hello", font_size=12)],
            str(base),
            str(tmp_path / "out.png"),
        )