"""PDF text extraction."""

from typing import Any, Dict, List

from .._types import PdfExtractResult


def select_pages(pages: str, total_pages: int) -> List[int]:
    """Turn a 1-based selection ('all', '2', '1,3', '2-4', '1,3-5') into indexes.

    Pages past the end of the document are ignored; the result is sorted
    and free of repeats.

    Raises:
        ValueError: If the selection is malformed.
    """
    selection = pages.strip().lower()
    if selection == "all":
        return list(range(total_pages))

    chosen = set()
    for part in selection.split(","):
        part = part.strip()
        try:
            if "-" in part:
                first, last = (int(p) for p in part.split("-", 1))
            else:
                first = last = int(part)
        except ValueError:
            raise ValueError(f"Invalid page selection '{pages}'")
        if first < 1 or last < first:
            raise ValueError(f"Invalid page range '{part}' in '{pages}'")
        chosen.update(range(first - 1, min(last, total_pages)))
    return sorted(chosen)


def extract_pdf_text(
    file_path: str,
    pages: str = "all",
) -> Dict[str, Any]:
    """Extract the text layer of a scanned or exported PDF register.

    Args:
        file_path: Path to the PDF file.
        pages: Page selection, see :func:`select_pages`.

    Returns:
        Dict shaped like :class:`~ledgerscan_core._types.PdfExtractResult`.

    Raises:
        ImportError: If pypdf is not installed.
        ValueError: If the page selection is malformed.
    """
    try:
        from pypdf import PdfReader
    except ImportError:
        raise ImportError(
            "pypdf not installed. Run: pip install 'ledgerscan-core[pdf]'"
        )

    reader = PdfReader(file_path)
    total_pages = len(reader.pages)

    content = [
        {"page": index + 1, "text": reader.pages[index].extract_text() or ""}
        for index in select_pages(pages, total_pages)
    ]

    result = PdfExtractResult(
        file=str(file_path),
        total_pages=total_pages,
        pages_extracted=len(content),
        content=content,
    )
    return result.model_dump()
