"""File storage backends."""

from __future__ import annotations

import os
import shutil
from abc import ABC, abstractmethod
from typing import BinaryIO, Union

Content = Union[bytes, bytearray, memoryview, BinaryIO]


class FileStorage(ABC):
    """Interface for storing documents by identifier."""

    @abstractmethod
    def get(self, document_id: str) -> BinaryIO:
        """Open a stored document for reading."""

    @abstractmethod
    def delete(self, document_id: str) -> None:
        """Remove a stored document."""

    @abstractmethod
    def url(self, document_id: str) -> str:
        """Return the public URL of a document."""

    @abstractmethod
    def save(self, document_id: str, content: Content) -> str:
        """Store a document and return where it was stored."""

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the storage."""

    def __enter__(self) -> "FileStorage":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class LocalStorage(FileStorage):
    """Stores documents as files in a local directory."""

    def __init__(self, upload_dir: str, base_url: str) -> None:
        os.makedirs(upload_dir, mode=0o755, exist_ok=True)
        self.upload_dir = upload_dir
        self.base_url = base_url
        self.closed = False

    def _path(self, document_id: str) -> str:
        return os.path.join(self.upload_dir, document_id)

    def save(self, document_id: str, content: Content) -> str:
        path = self._path(document_id)
        with open(path, "wb") as out:
            if isinstance(content, (bytes, bytearray, memoryview)):
                out.write(content)
            else:
                shutil.copyfileobj(content, out)
        return path

    def delete(self, document_id: str) -> None:
        os.remove(self._path(document_id))

    def get(self, document_id: str) -> BinaryIO:
        return open(self._path(document_id), "rb")

    def url(self, document_id: str) -> str:
        return f"{self.base_url}/{document_id}"

    def close(self) -> None:
        """Mark the storage as closed; local files need no other release."""
        self.closed = True