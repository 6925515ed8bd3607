"""Recognize a document file and reconstruct its table."""

import logging
from pathlib import Path
from typing import Optional, Tuple

from .._types import TableResult
from ..tables import ParserSettings, parse_table_from_text
from .ocr import recognize_image
from .pdf import extract_pdf_text

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = {".txt", ".csv", ".tsv"}
IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp", ".webp"}
PDF_SUFFIXES = {".pdf"}


def read_document_text(
    file_path: str,
    language: str = "eng",
    tesseract_path: Optional[str] = None,
) -> Tuple[str, str]:
    """Return ``(text, recognizer)`` for a text, PDF or image file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file type is not supported.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        return path.read_text(encoding="utf-8", errors="replace"), "text"
    if suffix in PDF_SUFFIXES:
        result = extract_pdf_text(str(path))
        return "\n".join(page["text"] for page in result["content"]), "pypdf"
    if suffix in IMAGE_SUFFIXES:
        result = recognize_image(str(path), language=language, tesseract_path=tesseract_path)
        return result["text"], "tesseract"

    raise ValueError(
        f"Unsupported file type '{suffix}'. "
        f"Supported: {', '.join(sorted(TEXT_SUFFIXES | PDF_SUFFIXES | IMAGE_SUFFIXES))}"
    )


def extract_table_from_file(
    file_path: str,
    settings: Optional[ParserSettings] = None,
    language: str = "eng",
    tesseract_path: Optional[str] = None,
) -> TableResult:
    """Recognize *file_path* and reconstruct a table from its text.

    Args:
        file_path: Text, PDF or image file of a ledger page.
        settings: Parser settings; defaults when omitted.
        language: Tesseract language code(s) for images.
        tesseract_path: Optional path to tesseract executable.

    Returns:
        The :class:`TableResult`, with ``source`` and ``recognizer`` added to
        its diagnostics.
    """
    text, recognizer = read_document_text(file_path, language, tesseract_path)
    logger.info("Recognized %d characters from %s via %s", len(text), file_path, recognizer)

    result = parse_table_from_text(text, settings)
    diagnostics = dict(result.diagnostics, source=str(file_path), recognizer=recognizer)
    return result.model_copy(update={"diagnostics": diagnostics})
