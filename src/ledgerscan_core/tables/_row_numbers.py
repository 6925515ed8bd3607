"""Token-stream parsing anchored on explicit row numbers (1, 2, 3, ...).

Handwritten registers usually number their rows. When the recognizer loses
the line structure, those numbers are the strongest structural evidence
left: the tokens before the first "1" are the header, and each later number
opens a new row.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .._types import Strategy, TableResult
from ._config import ParserSettings
from ._tokens import build_row, has_content, is_numeric, normalize_headers


def find_row_numbers(tokens: Sequence[str], low: int = 1, high: int = 20) -> List[int]:
    """Distinct integer tokens within ``[low, high]``, sorted ascending."""
    found = set()
    for token in tokens:
        text = token.strip()
        if is_numeric(text):
            value = int(text)
            if low <= value <= high:
                found.add(value)
    return sorted(found)


def is_contiguous(numbers: Sequence[int]) -> bool:
    """True when sorted, distinct *numbers* have no gaps."""
    return bool(numbers) and numbers[-1] - numbers[0] + 1 == len(numbers)


def estimate_column_count(data_tokens: Sequence[str], row_count: int) -> int:
    """Statistical column estimate: non-numeric data tokens per row."""
    if row_count <= 0:
        return 0
    textual = sum(1 for t in data_tokens if not is_numeric(t))
    return int(round(textual / row_count))


def parse_row_numbered_tokens(
    tokens: Sequence[str],
    settings: Optional[ParserSettings] = None,
) -> TableResult:
    """Reconstruct a table from a token stream using row-number markers.

    Args:
        tokens: Whitespace tokens of the recognized text, in reading order.
        settings: Row-number window and confidence; defaults when omitted.

    Returns:
        A :class:`TableResult` at the row-number confidence, or the empty
        result (fall through) when the markers are missing, not contiguous,
        or no row carries any value.
    """
    settings = settings or ParserSettings()
    tokens = [t.strip() for t in tokens if t.strip()]

    numbers = find_row_numbers(tokens, settings.row_number_min, settings.row_number_max)
    if len(numbers) < 2:
        return TableResult.empty(Strategy.ROW_NUMBERS, reason="fewer than 2 row numbers", row_numbers=numbers)
    if not is_contiguous(numbers):
        return TableResult.empty(Strategy.ROW_NUMBERS, reason="row numbers not contiguous", row_numbers=numbers)

    try:
        boundary = tokens.index("1")
    except ValueError:
        return TableResult.empty(Strategy.ROW_NUMBERS, reason="no row 1 marker", row_numbers=numbers)

    raw_headers = tokens[:boundary]
    if not raw_headers:
        return TableResult.empty(Strategy.ROW_NUMBERS, reason="no header before row 1", row_numbers=numbers)
    headers = normalize_headers(raw_headers)

    # Header position beats the statistical estimate; both are reported.
    column_count = len(headers)
    max_rows = numbers[-1] - numbers[0] + 1
    estimated = estimate_column_count(tokens[boundary:], len(numbers))

    rows: List[Dict[str, str]] = []
    pos = boundary
    row_number = 1
    while pos < len(tokens) and row_number <= numbers[-1] and len(rows) < max_rows:
        if tokens[pos] == str(row_number):
            pos += 1

        next_marker = str(row_number + 1)
        values: List[str] = []
        while pos < len(tokens) and len(values) < column_count:
            if tokens[pos] == next_marker:
                break
            values.append(tokens[pos])
            pos += 1

        row = build_row(headers, values)
        if has_content(row):
            rows.append(row)
        row_number += 1

    diagnostics = {
        "row_numbers": numbers,
        "header_count": column_count,
        "estimated_column_count": estimated,
        "column_count_mismatch": estimated != column_count,
        "unconsumed_tokens": len(tokens) - pos,
    }
    if not rows:
        return TableResult.empty(Strategy.ROW_NUMBERS, reason="no rows recovered", **diagnostics)

    return TableResult(
        headers=headers,
        rows=rows,
        confidence=settings.row_number_confidence,
        strategy=Strategy.ROW_NUMBERS,
        diagnostics=diagnostics,
    )
