"""Small filesystem helpers and remote file retrieval."""

from __future__ import annotations

import os
import shutil
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Iterable

_REMOTE_EXTENSIONS = (".pdf", ".jpg", ".jpeg", ".png", ".gif")


def _is_separator(char: str) -> bool:
    return char == "/" or char == os.sep


def _extension(path: str) -> str:
    """Return the suffix from the last dot of the final path element, or ''."""
    for index in range(len(path) - 1, -1, -1):
        char = path[index]
        if _is_separator(char):
            break
        if char == ".":
            return path[index:]
    return ""


def _base(path: str) -> str:
    """Return the last element of a path, ignoring trailing separators."""
    if not path:
        return "."
    stripped = path.rstrip("/" + os.sep)
    if not stripped:
        return os.sep
    cut = max(stripped.rfind("/"), stripped.rfind(os.sep))
    return stripped[cut + 1:]


@dataclass(frozen=True)
class FileData:
    """A file read from disk together with its size and extension."""

    path: str
    content: bytes
    size: int
    extension: str


@dataclass(frozen=True)
class FileResponse:
    """A file fetched from a URL."""

    name: str
    content: bytes
    size: int
    extension: str


def file_exists(path: str) -> bool:
    """Return True unless the path is known not to exist."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True


def folder_exists(path: str) -> bool:
    """Return True if the path exists and is a directory."""
    return os.path.isdir(path)


def create_dir(path: str) -> None:
    """Create a directory and any missing parents; existing ones are fine."""
    os.makedirs(path, mode=0o755, exist_ok=True)


def create_file(path: str) -> None:
    """Create an empty file, truncating any existing one."""
    with open(path, "wb"):
        pass


def write_file(path: str, content: bytes) -> None:
    """Write bytes to a file, replacing its contents."""
    with open(path, "wb") as handle:
        handle.write(content)


def delete_file(path: str) -> None:
    """Remove a single file."""
    os.remove(path)


def delete_dir(path: str) -> None:
    """Remove a path and everything below it; a missing path is not an error."""
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
        return
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def list_dir(path: str) -> list[str]:
    """Return the names of the entries in a directory, sorted."""
    return sorted(os.listdir(path))


def read_file(path: str) -> FileData:
    """Read a whole file."""
    with open(path, "rb") as handle:
        content = handle.read()
    return FileData(
        path=path,
        content=content,
        size=len(content),
        extension=path[path.rfind(".") + 1:],
    )


def is_valid_extension(filename: str, extensions: Iterable[str]) -> bool:
    """Return True if the file's extension (with its dot) is one of ``extensions``."""
    return _extension(filename) in set(extensions)


def get_file_from_url(url: str) -> FileResponse:
    """Download a PDF or image file from an HTTP(S) URL."""
    if not url.startswith("http"):
        raise ValueError("invalid url")

    try:
        with urllib.request.urlopen(url) as response:
            content = response.read()
    except urllib.error.HTTPError as exc:
        content = exc.read()

    name = _base(url)
    if not is_valid_extension(name, _REMOTE_EXTENSIONS):
        raise ValueError("invalid file type")

    return FileResponse(
        name=name,
        content=content,
        size=len(content),
        extension=_extension(url),
    )