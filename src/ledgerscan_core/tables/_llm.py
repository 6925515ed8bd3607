"""Normalize structured guesses from a vision LLM and pick between results."""
from __future__ import annotations

import json
import re
from typing import Any, Dict, List

from .._types import Strategy, TableResult
from ._tokens import has_content, normalize_headers

LLM_CONFIDENCE = 95.0

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def table_from_llm_response(content: str, confidence: float = LLM_CONFIDENCE) -> TableResult:
    """Build a :class:`TableResult` from an LLM reply holding table JSON.

    The reply is expected to contain an object like
    ``{"headers": [...], "rows": [{header: value, ...}, ...]}``, possibly
    wrapped in prose or a code fence. Values are coerced to strings and every
    row gets every header. When the reply names no headers they are taken
    from the row keys in first-seen order.

    Returns:
        The normalized table, or the empty result when no usable JSON is
        found.
    """
    match = _JSON_OBJECT_RE.search(content or "")
    if not match:
        return TableResult.empty(Strategy.LLM, reason="no JSON object in reply")
    try:
        payload = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        return TableResult.empty(Strategy.LLM, reason=f"invalid JSON: {exc.msg}")
    if not isinstance(payload, dict):
        return TableResult.empty(Strategy.LLM, reason="JSON is not an object")

    rows_value = payload.get("rows")
    headers_value = payload.get("headers")
    if rows_value is not None and not isinstance(rows_value, list):
        return TableResult.empty(Strategy.LLM, reason="rows is not a list")
    if headers_value is not None and not isinstance(headers_value, list):
        return TableResult.empty(Strategy.LLM, reason="headers is not a list")

    raw_rows = [r for r in rows_value or [] if isinstance(r, dict)]
    # Row keys are matched against the header text as sent
    keys = [h if isinstance(h, str) else _cell_text(h) for h in headers_value or []]
    if not keys:
        for row in raw_rows:
            for key in row:
                if key not in keys:
                    keys.append(key)
    if not keys:
        return TableResult.empty(Strategy.LLM, reason="no headers in reply")

    headers = normalize_headers([_cell_text(k) for k in keys])
    rows: List[Dict[str, str]] = []
    for raw in raw_rows:
        row = {new: _cell_text(raw.get(key)) for key, new in zip(keys, headers)}
        if has_content(row):
            rows.append(row)

    return TableResult(
        headers=headers,
        rows=rows,
        confidence=confidence if rows else 0.0,
        strategy=Strategy.LLM,
        diagnostics={"reply_rows": len(raw_rows)},
    )


def choose_result(*candidates: TableResult) -> TableResult:
    """Pick the highest-confidence candidate that found rows.

    Ties keep the earliest candidate. With no such candidate the
    no-table result is returned.
    """
    best = None
    for candidate in candidates:
        if candidate is None or not candidate.found:
            continue
        if best is None or candidate.confidence > best.confidence:
            best = candidate
    return best if best is not None else TableResult.empty(reason="no table detected")
