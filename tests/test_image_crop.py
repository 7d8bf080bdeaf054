import pytest
from PIL import Image

from nietzsche.image.crop import crop
from nietzsche.image.errors import ImageError, ImageErrorKind


@pytest.fixture
def cat(tmp_path):
    path = tmp_path / "cat.png"
    img = Image.new("RGB", (200, 150), (0, 0, 0))
    img.putpixel((120, 60), (255, 0, 0))
    img.save(path)
    return path


def test_crop_by_width_and_height(cat, tmp_path):
    out = tmp_path / "cat_cropped.jpg"
    crop(str(cat), str(out), 100, 100, 0, 0)
    with Image.open(out) as img:
        assert img.size == (100, 100)


def test_crop_offset_moves_pixels(cat, tmp_path):
    out = tmp_path / "cropped.png"
    crop(str(cat), str(out), 50, 50, 100, 50)
    with Image.open(out) as img:
        assert img.convert("RGB").getpixel((20, 10)) == (255, 0, 0)


def test_crop_clamped_to_bounds(cat, tmp_path):
    out = tmp_path / "c.png"
    crop(str(cat), str(out), 100, 100, 150, 100)
    with Image.open(out) as img:
        assert img.size == (50, 50)


def test_invalid_path():
    with pytest.raises(ImageError) as info:
        crop("", "", 100, 100, 0, 0)
    assert info.value.kind is ImageErrorKind.COULD_NOT_READ_FILE


def test_zero_size(cat, tmp_path):
    with pytest.raises(ImageError) as info:
        crop(str(cat), str(tmp_path / "o.jpg"), 0, 0, 0, 0)
    assert info.value.kind is ImageErrorKind.WIDTH_OR_HEIGHT_ZERO


def test_negative_coordinates(cat, tmp_path):
    with pytest.raises(ImageError) as info:
        crop(str(cat), str(tmp_path / "o.jpg"), 100, 100, -1, -1)
    assert info.value.kind is ImageErrorKind.COORDINATES_INVALID