"""Shared result types for the ledgerscan-core library.

Parsing functions return :class:`TableResult` models; helpers that describe
a table (profiling, file extraction metadata) return plain dicts shaped like
the models below.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Strategy(str, Enum):
    """Which reconstruction strategy produced a table."""

    DELIMITED = "delimited"
    ROW_NUMBERS = "row_numbers"
    KEYWORDS = "keywords"
    LLM = "llm"
    NONE = "none"


# -- Table types --

class TableResult(BaseModel):
    """Headers, rows and a 0-100 confidence for one reconstructed table.

    Every row carries exactly the header keys. A result without rows is a
    "no match"; see :attr:`found`.
    """

    model_config = ConfigDict(frozen=True)

    headers: List[str] = Field(default_factory=list)
    rows: List[Dict[str, str]] = Field(default_factory=list)
    confidence: float = 0.0
    strategy: Strategy = Strategy.NONE
    diagnostics: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def empty(cls, strategy: Strategy = Strategy.NONE, **diagnostics: Any) -> "TableResult":
        """The no-table result: no headers, no rows, confidence 0."""
        return cls(strategy=strategy, diagnostics=diagnostics)

    @property
    def found(self) -> bool:
        return bool(self.rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def to_delimited_text(self, delimiter: str = "\t") -> str:
        """Flatten headers and rows back into line-oriented text."""
        lines = [delimiter.join(self.headers)]
        for row in self.rows:
            lines.append(delimiter.join(row.get(h, "") for h in self.headers))
        return "\n".join(lines)


# -- Profiler types --

class ColumnProfile(BaseModel):
    """Statistics for a single column of a reconstructed table."""
    column: str
    unique_values: int
    empty_count: int
    is_numeric: bool
    sample_values: List[str]
    summary: Optional[Dict[str, float]] = None


class TableProfile(BaseModel):
    """Result of profiling a reconstructed table."""
    total_rows: int
    total_columns: int
    completeness_percent: float
    quality: str
    columns: List[ColumnProfile]
    numeric_columns: List[str]
    most_diverse_column: Optional[str] = None


# -- Ingestion types --

class RecognizedText(BaseModel):
    """Result of OCR text recognition on one image."""
    file: str
    language: str
    text: str
    character_count: int


class PdfExtractResult(BaseModel):
    """Result of PDF text extraction."""
    file: str
    total_pages: int
    pages_extracted: int
    content: List[Dict[str, Any]]
