"""LedgerScan Ingestion -- text, PDF, and image recognition for ledger pages."""

from .document import extract_table_from_file, read_document_text
from .ocr import recognize_image
from .pdf import extract_pdf_text

__all__ = [
    "recognize_image",
    "extract_pdf_text",
    "read_document_text",
    "extract_table_from_file",
]
