"""Errors raised by PDF operations."""

from __future__ import annotations

import enum
from typing import Optional


@enum.unique
class PdfErrorKind(enum.Enum):
    """The kinds of failure a PDF operation can report."""

    PARAMS_NIL = "params are nil"
    INPUT_FILE_PATH_EMPTY = "input file path is empty"
    OUTPUT_FILE_PATH_EMPTY = "output file path is empty"
    PASSWORD_REQUIRED = "password"
    FAILED_TO_PROTECT_FILE = "failed to protect file"
    FAILED_TO_UNLOCK_FILE = "failed to unlock file"
    FAILED_TO_CONVERT = "failed to convert"
    URL_REQUIRED = "url is required"
    FAILED_TO_CONVERT_FROM_URL = "failed to convert from url"
    FAILED_TO_WRITE_FILE = "failed to write file"
    FAILED_TO_READ_FILE = "failed to read file"
    FAILED_TO_READ_OR_WRITE = "failed to read or write"
    INVALID_ORIENTATION = "invalid orientation"
    INVALID_PAGE_SIZE = "invalid page size"
    INVALID_MARGIN = "invalid margin"
    INVALID_MARKDOWN = "invalid markdown file"
    INVALID_OFFICE = "invalid office file"
    FAILED_TO_CREATE_FILE = "failed to create file"
    FAILED_TO_RUN_COMMAND = "failed to run command"
    OUTPUT_DIR_EMPTY = "output directory is empty"
    FILE_NOT_FOUND = "file not found"
    INPUT_FILE_IS_NOT_PDF = "input file is not a PDF"
    OUTPUT_FILE_IS_NOT_PDF = "output file is not a PDF"
    PDFA_PARAMS_NIL = "PDF/A parameters cannot be nil"
    PDFA_INPUT_PATH_EMPTY = "PDF/A input file path cannot be empty"
    PDFA_OUTPUT_PATH_EMPTY = "PDF/A output file path cannot be empty"
    INVALID_PDFA_FORMAT = "invalid PDF/A format"
    FAILED_TO_PDFA_CONVERT = "failed to convert to PDF/A"
    ANGLE_ZERO = "angle cannot be zero"
    INVALID_ANGLE = "invalid angle"
    FAILED_TO_ROTATE = "failed to rotate"
    FAILED_TO_MERGE = "failed to merge"
    INVALID_FILE_EXTENSION = "invalid file extension"
    FAILED_TO_OPEN_PDF = "failed to open PDF"
    FAILED_TO_CREATE_ZIP_FILE = "failed to create zip file"
    FAILED_TO_WRITE_IMAGE_DATA = "failed to write image data"
    FAILED_TO_ENCODE_IMAGE = "failed to encode image"
    FAILED_TO_EXTRACT_IMAGE = "failed to extract image"
    FAILED_TO_CREATE_FILE_IN_ZIP = "failed to create file in zip"
    OCRMYPDF_IS_NOT_INSTALLED = "ocrmypdf is not installed"
    GHOSTSCRIPT_IS_NOT_INSTALLED = "ghostscript is not installed"
    SOFFICE_IS_NOT_INSTALLED = "soffice is not installed"
    FAILED_TO_COMPRESS = "failed to compress"
    INVALID_SPLIT_PAGES = "invalid split pages"
    REMOVE_PAGES_EMPTY = "remove pages is empty"
    FAILED_TO_REMOVE_PAGES = "failed to remove pages"
    FAILED_TO_SPLIT_PDF = "failed to split PDF"
    FAILED_TO_CREATE_ZIP = "failed to create zip"
    FAILED_TO_CREATE_TEMP_DIR = "failed to create temp dir"
    FAILED_TO_READ_DIR = "failed to read directory"
    TEXT_EMPTY = "text is empty"


class PdfError(Exception):
    """A PDF operation failed; ``kind`` says how and ``detail`` may say more."""

    def __init__(self, kind: PdfErrorKind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self._message())

    def _message(self) -> str:
        if self.detail:
            return f"{self.kind.value}: {self.detail}"
        return self.kind.value

    def __str__(self) -> str:
        return self._message()