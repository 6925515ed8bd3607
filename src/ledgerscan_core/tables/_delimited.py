"""Line-oriented parsing: one text line per row, cells split by a delimiter."""
from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional, Sequence

from .._types import Strategy, TableResult
from ._config import ParserSettings
from ._tokens import build_row, normalize_headers


class Delimiter(Enum):
    """Cell splitting rules, in detection priority order.

    ``WHITESPACE`` is never detected; it is the default when no other rule
    splits the sampled lines consistently.
    """

    TAB = r"\t"
    MULTI_SPACE = r"\s{2,}"
    PIPE = r"\s*\|\s*"
    COMMA = r","
    WHITESPACE = r"\s+"

    def split_cells(self, line: str) -> List[str]:
        """Split *line* into trimmed cells."""
        # Leading tabs mark empty leading cells
        line = line.strip(" \r") if self is Delimiter.TAB else line.strip()
        if self is Delimiter.PIPE and line.startswith("|"):
            # Bordered row ("| a | b |"); a trailing pipe without a leading
            # one separates an empty last cell
            line = line[1:]
            if line.endswith("|"):
                line = line[:-1]
        return [cell.strip() for cell in re.split(self.value, line)]

    @property
    def joiner(self) -> str:
        """A literal separator that this delimiter splits on."""
        return {
            Delimiter.TAB: "\t",
            Delimiter.MULTI_SPACE: "  ",
            Delimiter.PIPE: " | ",
            Delimiter.COMMA: ",",
            Delimiter.WHITESPACE: " ",
        }[self]


_CANDIDATES = (Delimiter.TAB, Delimiter.MULTI_SPACE, Delimiter.PIPE, Delimiter.COMMA)


def split_lines(text: str) -> List[str]:
    """Split on line breaks and drop blank lines, preserving order."""
    if not text:
        return []
    return [line.rstrip("\r") for line in text.split("\n") if line.strip()]


def detect_delimiter(lines: Sequence[str], sample_size: int = 5) -> Delimiter:
    """Pick the first delimiter that splits every sampled line the same way.

    A delimiter qualifies when each of the first *sample_size* lines splits
    into the same number of cells and that number is greater than one.

    Args:
        lines: Non-blank lines of text.
        sample_size: How many leading lines to sample.

    Returns:
        The winning :class:`Delimiter`, or ``Delimiter.WHITESPACE``.
    """
    sample = list(lines[:sample_size])
    if not sample:
        return Delimiter.WHITESPACE

    for delimiter in _CANDIDATES:
        counts = [len(delimiter.split_cells(line)) for line in sample]
        if counts[0] > 1 and all(c == counts[0] for c in counts):
            return delimiter
    return Delimiter.WHITESPACE


def parse_delimited_lines(
    text: str,
    settings: Optional[ParserSettings] = None,
    delimiter: Optional[Delimiter] = None,
) -> TableResult:
    """Reconstruct a table from line-oriented text.

    Line 0 is the header. Later lines become rows when they carry at least
    ``min_row_fill_ratio`` of the header's cell count; shorter lines are
    dropped, missing trailing cells are filled with "".

    Args:
        text: Raw recognized text with ``\\n`` between visual rows.
        settings: Thresholds and confidence; defaults when omitted.
        delimiter: Force a delimiter instead of detecting one.

    Returns:
        A :class:`TableResult` at the delimited confidence, or the empty
        result when fewer than two lines or no rows survive.
    """
    settings = settings or ParserSettings()
    lines = split_lines(text)
    if len(lines) < 2:
        return TableResult.empty(Strategy.DELIMITED, reason="fewer than 2 lines", line_count=len(lines))

    chosen = delimiter or detect_delimiter(lines, settings.delimiter_sample_lines)
    raw_headers = [cell for cell in chosen.split_cells(lines[0]) if cell]
    if not raw_headers:
        return TableResult.empty(Strategy.DELIMITED, reason="blank header line", delimiter=chosen.name)
    headers = normalize_headers(raw_headers)

    min_cells = len(headers) * settings.min_row_fill_ratio
    rows = []
    dropped = 0
    for line in lines[1:]:
        cells = chosen.split_cells(line)
        if len(cells) >= min_cells:
            rows.append(build_row(headers, cells))
        else:
            dropped += 1

    diagnostics = {
        "delimiter": chosen.name,
        "line_count": len(lines),
        "dropped_lines": dropped,
    }
    if not rows:
        return TableResult.empty(Strategy.DELIMITED, reason="no line matched the header width", **diagnostics)

    return TableResult(
        headers=headers,
        rows=rows,
        confidence=settings.delimited_confidence,
        strategy=Strategy.DELIMITED,
        diagnostics=diagnostics,
    )
