"""The document service: task creation, uploads and downloads."""

from __future__ import annotations

import random
import uuid
from dataclasses import asdict, dataclass

from nietzsche import logs
from nietzsche.files import is_valid_extension
from nietzsche.storage import FileStorage

SERVER = "https://nietzsche.example.com"
UPLOAD_EXTENSIONS = (".pdf", ".jpg", ".jpeg", ".png", ".gif")
MAX_CREDITS = 9999


def _extension(filename: str) -> str:
    """Return the suffix from the last dot of the final path element, or ''."""
    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


@dataclass(frozen=True)
class StartResponse:
    """A freshly created task."""

    server: str
    task: str
    remaining_credits: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class UploadResponse:
    """The name a file was stored under on the server."""

    server_file_name: str

    def to_dict(self) -> dict:
        return asdict(self)


class Nietzsche:
    """Creates tasks and moves files in and out of a storage backend."""

    def __init__(self, storage: FileStorage) -> None:
        self.storage = storage

    def start(self) -> StartResponse:
        """Create a new task with a random credit balance."""
        response = StartResponse(
            server=SERVER,
            task="task_" + str(uuid.uuid4()),
            remaining_credits=random.randrange(MAX_CREDITS),
        )
        logs.info(f"Start response task id: {response.task}")
        return response

    def upload(self, filename: str, content: bytes) -> UploadResponse:
        """Store a PDF or image under a new unique name that keeps its extension."""
        if not is_valid_extension(filename, UPLOAD_EXTENSIONS):
            raise ValueError("invalid file type")
        server_filename = str(uuid.uuid4()) + _extension(filename)
        self.storage.save(server_filename, content)
        logs.info(f"Uploaded file to server: {server_filename}")
        return UploadResponse(server_file_name=server_filename)

    def download(self, server_file_name: str) -> bytes:
        """Return the contents of a stored file."""
        with self.storage.get(server_file_name) as handle:
            return handle.read()