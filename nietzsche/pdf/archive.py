"""Packing a directory tree into a ZIP archive."""

from __future__ import annotations

import os
import zipfile
from typing import Iterator


def _walk(root: str) -> Iterator[str]:
    """Yield every path below ``root`` depth-first, in lexical order."""
    for name in sorted(os.listdir(root)):
        path = os.path.join(root, name)
        yield path
        if os.path.isdir(path) and not os.path.islink(path):
            yield from _walk(path)


def zip_folder(source_folder: str, zip_file_name: str) -> None:
    """Write every file and directory under ``source_folder`` into ``zip_file_name``.

    Entry names are relative to ``source_folder``; files are deflated and
    directories stored.
    """
    with zipfile.ZipFile(zip_file_name, "w") as archive:
        if not os.path.isdir(source_folder):
            os.stat(source_folder)
            raise NotADirectoryError(source_folder)
        for path in _walk(source_folder):
            arcname = os.path.relpath(path, source_folder).replace(os.sep, "/")
            if os.path.isdir(path):
                info = zipfile.ZipInfo.from_file(path, arcname)
                info.compress_type = zipfile.ZIP_STORED
                archive.writestr(info, b"")
            else:
                archive.write(path, arcname, compress_type=zipfile.ZIP_DEFLATED)