"""Adding a text layer to scanned PDFs with ocrmypdf."""

from __future__ import annotations

import shutil
import subprocess

from nietzsche.files import file_exists, is_valid_extension
from nietzsche.pdf.errors import PdfError, PdfErrorKind


def ocr_scan(input_path: str, output_path: str) -> None:
    """Run OCR over ``input_path`` and write a searchable PDF to ``output_path``."""
    if input_path == "":
        raise PdfError(PdfErrorKind.INPUT_FILE_PATH_EMPTY)
    if output_path == "":
        raise PdfError(PdfErrorKind.OUTPUT_FILE_PATH_EMPTY)
    if not is_valid_extension(input_path, [".pdf"]):
        raise PdfError(PdfErrorKind.INVALID_FILE_EXTENSION)
    if not is_valid_extension(output_path, [".pdf"]):
        raise PdfError(PdfErrorKind.INVALID_FILE_EXTENSION)
    if not file_exists(input_path):
        raise PdfError(PdfErrorKind.FILE_NOT_FOUND)
    if shutil.which("ocrmypdf") is None:
        raise PdfError(PdfErrorKind.OCRMYPDF_IS_NOT_INSTALLED)

    try:
        completed = subprocess.run(
            ["ocrmypdf", input_path, output_path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        raise PdfError(PdfErrorKind.FAILED_TO_RUN_COMMAND, f"ocrmypdf: {exc}") from exc
    if completed.returncode != 0:
        raise PdfError(
            PdfErrorKind.FAILED_TO_RUN_COMMAND,
            f"ocrmypdf exited with status {completed.returncode}",
        )