"""Last-resort parsing: guess headers from the leading words, then chunk."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .._types import Strategy, TableResult
from ._config import ParserSettings
from ._tokens import build_row, has_content, is_numeric, normalize_headers


def is_header_candidate(token: str, keywords: Sequence[str], min_length: int = 3) -> bool:
    """True if *token* contains a lexicon term or is a long non-numeric word."""
    lowered = token.lower()
    if any(term in lowered for term in keywords):
        return True
    return len(token) >= min_length and not is_numeric(token)


def split_header_window(
    tokens: Sequence[str],
    settings: ParserSettings,
) -> Tuple[List[str], int]:
    """Find the header candidates at the start of the stream.

    The window is the leading run of header candidates within the first
    ``keyword_scan_window`` tokens. Rejected tokens before the first
    candidate are skipped as noise; the first rejection after it (or the
    header cap) closes the window.

    Returns:
        ``(headers, data_start)`` where *data_start* indexes the first data
        token.
    """
    headers: List[str] = []
    data_start = 0
    limit = min(len(tokens), settings.keyword_scan_window)
    for index in range(limit):
        token = tokens[index]
        if is_header_candidate(token, settings.keywords, settings.min_header_length):
            headers.append(token)
            data_start = index + 1
            if len(headers) >= settings.max_keyword_headers:
                break
        elif headers:
            break
        else:
            data_start = index + 1
    return headers, data_start


def parse_keyword_tokens(
    tokens: Sequence[str],
    settings: Optional[ParserSettings] = None,
) -> TableResult:
    """Best-effort table from a token stream with no reliable structure.

    The data pool is chunked into rows of header width in order. A short
    final chunk is padded, empty chunks are dropped. Column alignment is not
    guaranteed.

    Returns:
        A :class:`TableResult` at the keyword confidence (possibly with no
        rows), or the zero-confidence empty result when no header is found.
    """
    settings = settings or ParserSettings()
    tokens = [t.strip() for t in tokens if t.strip()]

    raw_headers, data_start = split_header_window(tokens, settings)
    if not raw_headers:
        return TableResult.empty(Strategy.KEYWORDS, reason="no header candidates")
    headers = normalize_headers(raw_headers)

    width = len(headers)
    pool = tokens[data_start:]
    rows = []
    for start in range(0, len(pool), width):
        row = build_row(headers, pool[start:start + width])
        if has_content(row):
            rows.append(row)

    return TableResult(
        headers=headers,
        rows=rows,
        confidence=settings.keyword_confidence,
        strategy=Strategy.KEYWORDS,
        diagnostics={"data_tokens": len(pool), "header_window": data_start},
    )
