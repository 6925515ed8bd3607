"""Strategy chain: delimiter lines, then row numbers, then keywords."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from .._types import Strategy, TableResult
from ._config import ParserSettings
from ._delimited import parse_delimited_lines
from ._keywords import parse_keyword_tokens
from ._row_numbers import parse_row_numbered_tokens
from ._tokens import tokenize

logger = logging.getLogger(__name__)

TraceHook = Callable[[Strategy, TableResult], None]


def _report(strategy: Strategy, result: TableResult, trace: Optional[TraceHook]) -> None:
    logger.debug(
        "%s: %d headers, %d rows, confidence %.0f %s",
        strategy.value,
        len(result.headers),
        result.row_count,
        result.confidence,
        result.diagnostics,
    )
    if result.diagnostics.get("column_count_mismatch"):
        logger.info(
            "Row-number parse: header count %d differs from estimated column count %d; using header count",
            result.diagnostics["header_count"],
            result.diagnostics["estimated_column_count"],
        )
    if trace is not None:
        trace(strategy, result)


def parse_table_from_text(
    text: str,
    settings: Optional[ParserSettings] = None,
    trace: Optional[TraceHook] = None,
) -> TableResult:
    """Reconstruct a table from raw recognized text.

    Strategies run in order of decreasing structural assumptions and the
    first one that yields rows wins:

    1. delimiter-separated lines (confidence 85)
    2. row-number anchored tokens (confidence 95)
    3. keyword header guess (confidence 75)

    When all three fail the terminal "no table detected" result (no
    headers, no rows, confidence 0) is returned. Malformed text never
    raises.

    Args:
        text: Recognized text, ``\\n`` between visual rows.
        settings: Thresholds, lexicon and confidences; defaults when omitted.
        trace: Optional callback receiving each strategy and its result.

    Returns:
        The winning :class:`TableResult`.
    """
    settings = settings or ParserSettings()
    text = text or ""

    result = parse_delimited_lines(text, settings)
    _report(Strategy.DELIMITED, result, trace)
    if result.found:
        return result

    tokens = tokenize(text)

    result = parse_row_numbered_tokens(tokens, settings)
    _report(Strategy.ROW_NUMBERS, result, trace)
    if result.found:
        return result

    result = parse_keyword_tokens(tokens, settings)
    _report(Strategy.KEYWORDS, result, trace)
    if result.headers:
        return result

    logger.debug("No table detected in %d characters of text", len(text))
    return TableResult.empty(reason="no table detected")
