"""Tokenization, numeric detection and header/row normalization."""
from __future__ import annotations

import math
import re
from typing import Dict, List, Optional, Sequence

_INTEGER_RE = re.compile(r"^[0-9]+$")

# Thousands separators, spaces and currency marks stripped before a
# lenient numeric check ("1,200", "₹ 450", "$12.50").
_NUMERIC_NOISE_RE = re.compile(r"[,\s₹$€£]")


def tokenize(text: str) -> List[str]:
    """Split recognized text into whitespace-delimited tokens."""
    return text.split() if text else []


def is_numeric(value: str, strict: bool = True) -> bool:
    """Return True if *value* reads as a number.

    Args:
        value: Token or cell value.
        strict: When True only plain digit runs count (row-number markers,
            "purely numeric" tokens). When False, signed decimals with
            thousands separators or a currency mark also count.
    """
    text = value.strip()
    if strict:
        return bool(_INTEGER_RE.match(text))

    return parse_number(text) is not None


def parse_number(value: str) -> Optional[float]:
    """Read a lenient number ("1,200", "₹ 450", "-3.5"); None if not one."""
    cleaned = _NUMERIC_NOISE_RE.sub("", value)
    if not cleaned:
        return None
    try:
        number = float(cleaned)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def normalize_headers(headers: Sequence[str]) -> List[str]:
    """Trim headers and replace blank or repeated ones with ``Column_N``.

    N is the 1-based column position, so the result is always unique.
    """
    normalized: List[str] = []
    seen = set()
    for index, header in enumerate(headers):
        name = header.strip()
        if not name or name in seen:
            name = f"Column_{index + 1}"
            suffix = 1
            while name in seen:
                suffix += 1
                name = f"Column_{index + 1}_{suffix}"
        seen.add(name)
        normalized.append(name)
    return normalized


def build_row(headers: Sequence[str], values: Sequence[str]) -> Dict[str, str]:
    """Map *values* onto *headers* positionally, padding with empty strings."""
    return {
        header: (values[i].strip() if i < len(values) else "")
        for i, header in enumerate(headers)
    }


def has_content(row: Dict[str, str]) -> bool:
    return any(v.strip() for v in row.values())
