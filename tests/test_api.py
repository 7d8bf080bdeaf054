import io
import os
import uuid
from unittest import mock

import pytest

from nietzsche.api import API_SERVER, DEFAULT_PORT, create_app, main
from nietzsche.service import Nietzsche
from nietzsche.storage import LocalStorage


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(str(tmp_path / "store"), "https://files.example.com")


@pytest.fixture
def client(storage):
    app = create_app(Nietzsche(storage))
    app.testing = True
    return app.test_client()


def test_start_returns_task(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.get_json()
    assert data["server"] == API_SERVER
    assert data["task"].startswith("task_")
    tail = data["task"][len("task_"):]
    assert str(uuid.UUID(tail)) == tail
    assert 0 <= data["remaning_credits"] < 100000


def test_upload_stores_file(client, storage):
    response = client.post(
        "/upload",
        data={"task": "task_123", "file": (io.BytesIO(b"%PDF-data"), "report.pdf")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 200
    name = response.get_json()["server_filename"]
    assert name.endswith(".pdf")
    with open(os.path.join(storage.upload_dir, name), "rb") as handle:
        assert handle.read() == b"%PDF-data"


def test_upload_without_file_is_bad_request(client):
    response = client.post("/upload", data={"task": "task_123"}, content_type="multipart/form-data")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Failed to get file"}


def test_upload_with_bad_type_is_bad_request(client, storage):
    response = client.post(
        "/upload",
        data={"file": (io.BytesIO(b"text"), "notes.txt")},
        content_type="multipart/form-data",
    )
    assert response.status_code == 400
    assert response.get_json() == {"error": "Failed to upload file"}
    assert os.listdir(storage.upload_dir) == []


def test_process_returns_status(client):
    response = client.post("/process")
    assert response.get_json() == {"server": API_SERVER, "task": "task_123", "status": "success"}


def test_download_returns_status(client):
    response = client.get("/download")
    assert response.get_json() == {"server": API_SERVER, "task": "task_123", "status": "success"}


def test_cors_header_on_responses(client):
    assert client.get("/").headers["Access-Control-Allow-Origin"] == "*"


def test_preflight_allows_methods(client):
    response = client.options(
        "/upload",
        headers={"Origin": "https://app.example.com", "Access-Control-Request-Method": "POST"},
    )
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in response.headers["Access-Control-Allow-Methods"].split(",")


def test_main_creates_storage_and_runs(tmp_path):
    store = tmp_path / "uploads"
    with mock.patch("flask.Flask.run") as run:
        main(["--storage", str(store), "--port", "9000"])
    assert store.is_dir()
    run.assert_called_once_with(host="0.0.0.0", port=9000)


def test_main_default_port(tmp_path):
    store = tmp_path / "s"
    with mock.patch("flask.Flask.run") as run:
        main(["--storage", str(store)])
    assert store.is_dir()
    run.assert_called_once_with(host="0.0.0.0", port=DEFAULT_PORT)