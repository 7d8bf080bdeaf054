import pytest
from PIL import Image

from nietzsche.image.errors import ImageError, ImageErrorKind
from nietzsche.image.upscale import upscale


@pytest.fixture
def meow(tmp_path):
    path = tmp_path / "meow.jpg"
    Image.new("RGB", (16, 10), (1, 2, 3)).save(path, "JPEG")
    return path


@pytest.mark.parametrize("mult,size", [(2, (32, 20)), (4, (64, 40))])
def test_upscale(meow, tmp_path, mult, size):
    out = tmp_path / "meow_upscaled.jpg"
    upscale(str(meow), str(out), mult)
    with Image.open(out) as img:
        assert img.size == size


def test_invalid_multiplier(meow, tmp_path):
    with pytest.raises(ImageError) as info:
        upscale(str(meow), str(tmp_path / "o.jpg"), 3)
    assert info.value.kind is ImageErrorKind.INVALID_MULTIPLIER


def test_invalid_path():
    with pytest.raises(ImageError) as info:
        upscale("invalid/path/to/file.jpg", "invalid/path/to/file_upscaled.jpg", 2)
    assert info.value.kind is ImageErrorKind.COULD_NOT_READ_FILE