import io
import os

import pytest

from nietzsche.storage import FileStorage, LocalStorage


@pytest.fixture
def store(tmp_path):
    return LocalStorage(str(tmp_path / "uploads"), "https://files.example.com")


def test_init_creates_directory(tmp_path):
    target = tmp_path / "a" / "b"
    LocalStorage(str(target), "https://files.example.com")
    assert target.is_dir()


def test_save_bytes_and_get_round_trip(store):
    path = store.save("doc.pdf", b"payload bytes")
    assert path == os.path.join(store.upload_dir, "doc.pdf")
    with store.get("doc.pdf") as handle:
        assert handle.read() == b"payload bytes"


def test_save_stream_round_trip(store):
    store.save("pic.png", io.BytesIO(b"stream data"))
    with store.get("pic.png") as handle:
        assert handle.read() == b"stream data"


def test_save_overwrites(store):
    store.save("x.gif", b"first version")
    store.save("x.gif", b"v2")
    with store.get("x.gif") as handle:
        assert handle.read() == b"v2"


def test_delete_then_get_raises(store):
    store.save("gone.jpg", b"data")
    store.delete("gone.jpg")
    with pytest.raises(FileNotFoundError):
        store.get("gone.jpg")


def test_delete_missing_raises(store):
    with pytest.raises(FileNotFoundError):
        store.delete("never.jpg")


def test_url(store):
    assert store.url("abc.pdf") == "https://files.example.com/abc.pdf"


def test_context_manager_returns_storage(tmp_path):
    with LocalStorage(str(tmp_path), "https://files.example.com") as storage:
        assert isinstance(storage, FileStorage)
        assert storage.url("k") == "https://files.example.com/k"


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        FileStorage()