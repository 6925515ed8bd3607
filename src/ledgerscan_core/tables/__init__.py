"""Table reconstruction from recognized ledger text.

Public API
----------
- ``parse_table_from_text(text)`` - run the full strategy chain
- ``parse_delimited_lines(text)`` - line/delimiter strategy
- ``parse_row_numbered_tokens(tokens)`` - row-number anchored strategy
- ``parse_keyword_tokens(tokens)`` - keyword fallback strategy
- ``table_from_llm_response(content)`` - normalize an LLM's table JSON
- ``choose_result(*results)`` - pick the best candidate result
"""
from __future__ import annotations

from .._types import Strategy, TableResult
from ._config import ParserSettings, load_keyword_lexicon, load_settings
from ._delimited import Delimiter, detect_delimiter, parse_delimited_lines, split_lines
from ._engine import parse_table_from_text
from ._keywords import is_header_candidate, parse_keyword_tokens
from ._llm import choose_result, table_from_llm_response
from ._row_numbers import find_row_numbers, is_contiguous, parse_row_numbered_tokens
from ._tokens import is_numeric, normalize_headers, parse_number, tokenize

__all__ = [
    # Entry points
    "parse_table_from_text",
    "parse_delimited_lines",
    "parse_row_numbered_tokens",
    "parse_keyword_tokens",
    "table_from_llm_response",
    "choose_result",
    # Helpers
    "detect_delimiter",
    "split_lines",
    "find_row_numbers",
    "is_contiguous",
    "is_header_candidate",
    "is_numeric",
    "parse_number",
    "normalize_headers",
    "tokenize",
    # Configuration
    "ParserSettings",
    "load_settings",
    "load_keyword_lexicon",
    # Types (re-exported for convenience)
    "Delimiter",
    "Strategy",
    "TableResult",
]
