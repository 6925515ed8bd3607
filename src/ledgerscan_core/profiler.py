"""Column profiling for reconstructed tables."""

from typing import Any, Dict, List

import pandas as pd

from ._types import ColumnProfile, TableProfile, TableResult
from .export import to_dataframe
from .tables import is_numeric, parse_number

NUMERIC_SHARE = 0.7


def _quality_label(completeness: float) -> str:
    if completeness > 90:
        return "Excellent"
    if completeness > 70:
        return "Good"
    return "Needs improvement"


def profile_table(result: TableResult) -> Dict[str, Any]:
    """Summarize completeness and column types of a reconstructed table.

    A column is numeric when more than 70% of its non-empty values read as
    numbers (thousands separators and currency marks allowed). Numeric
    columns also get sum/mean/min/max/count.

    Args:
        result: Table to profile.

    Returns:
        Dict shaped like :class:`~ledgerscan_core._types.TableProfile`.
    """
    df = to_dataframe(result).fillna("")
    total_rows = len(df)
    total_cells = total_rows * len(df.columns)

    columns: List[ColumnProfile] = []
    filled = 0
    for col in df.columns:
        values = [v.strip() for v in df[col] if v.strip()]
        filled += len(values)
        numeric_values = [v for v in values if is_numeric(v, strict=False)]
        numeric = bool(values) and len(numeric_values) > len(values) * NUMERIC_SHARE

        summary = None
        if numeric:
            series = pd.Series([parse_number(v) for v in numeric_values])
            summary = {
                "sum": float(series.sum()),
                "mean": round(float(series.mean()), 2),
                "min": float(series.min()),
                "max": float(series.max()),
                "count": int(series.count()),
            }

        columns.append(ColumnProfile(
            column=col,
            unique_values=len(set(values)),
            empty_count=total_rows - len(values),
            is_numeric=numeric,
            sample_values=values[:3],
            summary=summary,
        ))

    completeness = round(filled / total_cells * 100, 1) if total_cells else 0.0
    most_diverse = max(columns, key=lambda c: c.unique_values).column if columns else None

    profile = TableProfile(
        total_rows=total_rows,
        total_columns=len(df.columns),
        completeness_percent=completeness,
        quality=_quality_label(completeness),
        columns=columns,
        numeric_columns=[c.column for c in columns if c.is_numeric],
        most_diverse_column=most_diverse,
    )
    return profile.model_dump()
