import pytest

from nietzsche.image.errors import ImageError, ImageErrorKind


def test_message_matches_kind():
    err = ImageError(ImageErrorKind.COULD_NOT_READ_FILE)
    assert str(err) == "could not read file"
    assert err.kind is ImageErrorKind.COULD_NOT_READ_FILE


@pytest.mark.parametrize("kind", list(ImageErrorKind))
def test_every_kind_round_trips(kind):
    with pytest.raises(ImageError) as info:
        raise ImageError(kind)
    assert info.value.kind is kind
    assert str(info.value) == kind.value
    assert info.value.args == (kind.value,)


def test_kind_lookup_by_message():
    assert ImageErrorKind("invalid multiplier") is ImageErrorKind.INVALID_MULTIPLIER


def test_messages_are_unique():
    messages = [str(ImageError(kind)) for kind in ImageErrorKind]
    assert len(messages) == len(set(messages))
    assert "invalid angle" in messages