"""Image text recognition (Tesseract)."""

from typing import Any, Dict, Optional

from .._types import RecognizedText

# "Single uniform block of text": keeps one output line per ledger row
DEFAULT_PAGE_SEGMENTATION = 6


def recognize_image(
    file_path: str,
    language: str = "eng",
    tesseract_path: Optional[str] = None,
    page_segmentation: int = DEFAULT_PAGE_SEGMENTATION,
) -> Dict[str, Any]:
    """Recognize the text on a photographed ledger page.

    The page is converted to grayscale first; pen strokes on ruled paper
    recognize better without the colour channels.

    Args:
        file_path: Path to the image file (PNG, JPG, etc.).
        language: Tesseract language code(s), e.g. 'eng' or 'eng+hin'.
        tesseract_path: Optional path to tesseract executable.
        page_segmentation: Tesseract ``--psm`` mode.

    Returns:
        Dict shaped like :class:`~ledgerscan_core._types.RecognizedText`.

    Raises:
        ImportError: If pytesseract or Pillow is not installed.
    """
    try:
        import pytesseract
        from PIL import Image, ImageOps
    except ImportError:
        raise ImportError(
            "pytesseract/Pillow not installed. Run: pip install 'ledgerscan-core[ocr]'"
        )

    if tesseract_path:
        pytesseract.pytesseract.tesseract_cmd = tesseract_path

    with Image.open(file_path) as image:
        page = ImageOps.grayscale(ImageOps.exif_transpose(image))
        text = pytesseract.image_to_string(
            page, lang=language, config=f"--psm {page_segmentation}"
        )

    recognized = RecognizedText(
        file=str(file_path),
        language=language,
        text=text,
        character_count=len(text.strip()),
    )
    return recognized.model_dump()
