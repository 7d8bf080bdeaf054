"""Converting PDFs to PDF/A with Ghostscript."""

from __future__ import annotations

import shutil
import subprocess

from nietzsche.files import file_exists, is_valid_extension
from nietzsche.pdf.errors import PdfError, PdfErrorKind

SUPPORTED_PDFA_FORMATS: dict[str, tuple[str, ...]] = {
    "pdfa-1b": ("-dPDFA=1", "-dPDFACompatibilityPolicy=1"),
    "pdfa-1a": ("-dPDFA=1", "-dPDFACompatibilityPolicy=1", "-dPDFALevel=1", "-dPDFAType=1"),
    "pdfa-2b": ("-dPDFA=2", "-dPDFACompatibilityPolicy=1"),
    "pdfa-2u": ("-dPDFA=2", "-dPDFACompatibilityPolicy=1", "-dPDFALevel=2", "-dPDFAType=2"),
    "pdfa-2a": ("-dPDFA=2", "-dPDFACompatibilityPolicy=1", "-dPDFALevel=2", "-dPDFAType=1"),
    "pdfa-3b": ("-dPDFA=3", "-dPDFACompatibilityPolicy=1"),
    "pdfa-3u": ("-dPDFA=3", "-dPDFACompatibilityPolicy=1", "-dPDFALevel=3", "-dPDFAType=2"),
    "pdfa-3a": ("-dPDFA=3", "-dPDFACompatibilityPolicy=1", "-dPDFALevel=3", "-dPDFAType=1"),
}

VALID_PDFA_CONFORMANCE_LEVELS = (
    "pdfa-1b", "pdfa-1a",
    "pdfa-2b", "pdfa-2u", "pdfa-2a",
    "pdfa-3b", "pdfa-3u", "pdfa-3a",
)


def build_ghostscript_args(input_path: str, output_path: str, format: str) -> list[str]:
    """Return the Ghostscript arguments (without the program name) for a conversion."""
    try:
        format_args = SUPPORTED_PDFA_FORMATS[format]
    except KeyError:
        raise PdfError(PdfErrorKind.INVALID_PDFA_FORMAT) from None
    return [
        "-dBATCH",
        "-dNOPAUSE",
        "-sDEVICE=pdfwrite",
        "-sColorConversionStrategy=UseDeviceIndependentColor",
        "-sOutputFile=" + output_path,
        *format_args,
        input_path,
    ]


def from_pdf_to_pdfa(input_path: str, output_path: str, format: str) -> None:
    """Convert a PDF to the given PDF/A conformance level."""
    if input_path == "":
        raise PdfError(PdfErrorKind.PDFA_INPUT_PATH_EMPTY)
    if output_path == "":
        raise PdfError(PdfErrorKind.PDFA_OUTPUT_PATH_EMPTY)
    if not is_valid_extension(input_path, [".pdf"]):
        raise PdfError(PdfErrorKind.INPUT_FILE_IS_NOT_PDF)
    if not file_exists(input_path):
        raise PdfError(PdfErrorKind.FILE_NOT_FOUND)
    args = build_ghostscript_args(input_path, output_path, format)
    if shutil.which("gs") is None:
        raise PdfError(PdfErrorKind.GHOSTSCRIPT_IS_NOT_INSTALLED)

    try:
        completed = subprocess.run(
            ["gs", *args], stdout=subprocess.DEVNULL, stderr=subprocess.PIPE, check=False
        )
    except OSError as exc:
        raise PdfError(PdfErrorKind.FAILED_TO_PDFA_CONVERT, str(exc)) from exc
    if completed.returncode != 0:
        stderr = completed.stderr or b""
        raise PdfError(
            PdfErrorKind.FAILED_TO_PDFA_CONVERT, stderr.decode("utf-8", errors="replace")
        )