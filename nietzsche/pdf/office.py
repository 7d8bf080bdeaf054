"""Converting office documents to PDF with LibreOffice."""

from __future__ import annotations

import shutil
import subprocess

from nietzsche.files import file_exists, is_valid_extension
from nietzsche.pdf.errors import PdfError, PdfErrorKind

OFFICE_FILE_EXTENSIONS = (".docx", ".doc", ".pptx", ".ppt", ".xlsx", ".xls")


def from_office(input_path: str, output_dir: str) -> None:
    """Convert an office document to PDF, writing it into ``output_dir``."""
    if input_path == "":
        raise PdfError(PdfErrorKind.INPUT_FILE_PATH_EMPTY)
    if output_dir == "":
        raise PdfError(PdfErrorKind.OUTPUT_DIR_EMPTY)
    if not is_valid_extension(input_path, OFFICE_FILE_EXTENSIONS):
        raise PdfError(PdfErrorKind.INVALID_OFFICE)
    if not file_exists(input_path):
        raise PdfError(PdfErrorKind.FILE_NOT_FOUND)
    if shutil.which("soffice") is None:
        raise PdfError(PdfErrorKind.SOFFICE_IS_NOT_INSTALLED)

    command = ["soffice", "--convert-to", "pdf", "--outdir", output_dir, input_path]
    try:
        completed = subprocess.run(
            command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False
        )
    except OSError as exc:
        raise PdfError(PdfErrorKind.FAILED_TO_RUN_COMMAND) from exc
    if completed.returncode != 0:
        raise PdfError(PdfErrorKind.FAILED_TO_RUN_COMMAND)