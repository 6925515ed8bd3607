"""Tunable thresholds and the keyword lexicon for table reconstruction."""
from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "LEDGERSCAN_SETTINGS"
DEFAULT_LEXICON_PATH = Path(__file__).resolve().parent.parent / "data" / "keywords.json"


def load_keyword_lexicon(path: Optional[str] = None) -> List[str]:
    """Load header keywords from a JSON file.

    The file holds either a plain list of terms or an object with a
    ``keywords`` list. Terms are lower-cased; blanks and repeats are dropped.

    Args:
        path: JSON file to read. Defaults to the packaged lexicon.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file holds no keyword list.
    """
    lexicon_path = Path(path) if path else DEFAULT_LEXICON_PATH
    if not lexicon_path.exists():
        raise FileNotFoundError(f"Keyword lexicon not found: {lexicon_path}")

    raw = json.loads(lexicon_path.read_text(encoding="utf-8"))
    terms = raw.get("keywords") if isinstance(raw, dict) else raw
    if not isinstance(terms, list):
        raise ValueError(f"No keyword list in {lexicon_path}")

    keywords: List[str] = []
    for term in terms:
        word = str(term).strip().lower()
        if word and word not in keywords:
            keywords.append(word)
    return keywords


@lru_cache(maxsize=1)
def _packaged_lexicon() -> Tuple[str, ...]:
    return tuple(load_keyword_lexicon())


class ParserSettings(BaseModel):
    """Thresholds shared by the three reconstruction strategies."""

    # Delimiter detection / line parsing
    delimiter_sample_lines: int = Field(default=5, ge=1)
    min_row_fill_ratio: float = Field(default=0.8, gt=0.0, le=1.0)

    # Row-number anchoring
    row_number_min: int = Field(default=1, ge=0)
    row_number_max: int = Field(default=20, ge=1)

    # Keyword fallback
    keyword_scan_window: int = Field(default=10, ge=1)
    max_keyword_headers: int = Field(default=8, ge=1)
    min_header_length: int = Field(default=3, ge=1)  # "longer than 2 characters"
    keywords: List[str] = Field(default_factory=lambda: list(_packaged_lexicon()))

    # Fixed per-strategy confidences (0-100)
    row_number_confidence: float = Field(default=95.0, ge=0, le=100)
    delimited_confidence: float = Field(default=85.0, ge=0, le=100)
    keyword_confidence: float = Field(default=75.0, ge=0, le=100)

    @field_validator("keywords")
    @classmethod
    def _lowercase_keywords(cls, value: List[str]) -> List[str]:
        return [k.strip().lower() for k in value if k.strip()]

    @model_validator(mode="after")
    def _check_ordering(self) -> "ParserSettings":
        if self.row_number_min > self.row_number_max:
            raise ValueError("row_number_min must not exceed row_number_max")
        if not (
            self.row_number_confidence > self.delimited_confidence > self.keyword_confidence
        ):
            raise ValueError(
                "Confidences must satisfy row_number > delimited > keyword"
            )
        return self


def load_settings(path: Optional[str] = None) -> ParserSettings:
    """Build :class:`ParserSettings` from a JSON file.

    Resolution order: *path*, then the ``LEDGERSCAN_SETTINGS`` environment
    variable, then built-in defaults. A ``keywords_file`` key in the JSON
    replaces the lexicon with the terms from that file.

    Raises:
        FileNotFoundError: If the settings file doesn't exist.
        pydantic.ValidationError: If a value is out of range.
    """
    settings_path = path or os.getenv(SETTINGS_ENV_VAR, "")
    if not settings_path:
        return ParserSettings()

    fp = Path(settings_path)
    if not fp.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    raw = json.loads(fp.read_text(encoding="utf-8"))
    keywords_file = raw.pop("keywords_file", None)
    if keywords_file:
        kw_path = Path(keywords_file)
        if not kw_path.is_absolute():
            kw_path = fp.parent / kw_path
        raw["keywords"] = load_keyword_lexicon(str(kw_path))

    logger.debug("Loaded parser settings from %s", fp)
    return ParserSettings(**raw)
