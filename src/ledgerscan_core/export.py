"""Spreadsheet export for reconstructed tables.

Public API:
    to_dataframe     - TableResult -> pandas DataFrame
    export_csv       - write one table as CSV
    export_excel     - write one table as an .xlsx sheet
    combine_results  - merge several documents into one table
    export_workbook  - one .xlsx sheet per document
"""

__all__ = [
    "to_dataframe",
    "export_csv",
    "export_excel",
    "combine_results",
    "export_workbook",
]

import re
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from ._types import Strategy, TableResult

SOURCE_COLUMN = "Source File"
MIN_COLUMN_WIDTH = 10
MAX_COLUMN_WIDTH = 50
MAX_SHEET_NAME = 31

_INVALID_SHEET_CHARS = re.compile(r"[\[\]:*?/\\]")


def to_dataframe(result: TableResult) -> pd.DataFrame:
    """Return the table as a string-typed DataFrame in header order."""
    return pd.DataFrame(result.rows, columns=result.headers, dtype=str)


def _require_rows(result: TableResult) -> None:
    if not result.found:
        raise ValueError("No data to export")


def column_widths(df: pd.DataFrame) -> List[int]:
    """Display width per column: longest value + 2, clamped to [10, 50]."""
    widths = []
    for col in df.columns:
        longest = max([len(str(col))] + [len(str(v)) for v in df[col].fillna("")])
        widths.append(min(max(longest + 2, MIN_COLUMN_WIDTH), MAX_COLUMN_WIDTH))
    return widths


def _write_sheet(writer: pd.ExcelWriter, df: pd.DataFrame, sheet_name: str) -> None:
    from openpyxl.utils import get_column_letter

    df.to_excel(writer, sheet_name=sheet_name, index=False)
    worksheet = writer.sheets[sheet_name]
    for idx, width in enumerate(column_widths(df), start=1):
        worksheet.column_dimensions[get_column_letter(idx)].width = width


def _excel_writer(output_path: str) -> pd.ExcelWriter:
    try:
        import openpyxl  # noqa: F401
    except ImportError:
        raise ImportError(
            "openpyxl not installed. Run: pip install 'ledgerscan-core[excel]'"
        )
    return pd.ExcelWriter(output_path, engine="openpyxl")


def export_csv(result: TableResult, output_path: str) -> Dict[str, object]:
    """Write *result* as CSV with a header row.

    Raises:
        ValueError: If the result has no rows.
    """
    _require_rows(result)
    df = to_dataframe(result)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    return {"file": output_path, "rows": len(df), "columns": list(df.columns)}


def export_excel(
    result: TableResult,
    output_path: str,
    sheet_name: str = "Sheet1",
) -> Dict[str, object]:
    """Write *result* as a single-sheet .xlsx with fitted column widths.

    Raises:
        ValueError: If the result has no rows.
        ImportError: If openpyxl is not installed.
    """
    _require_rows(result)
    df = to_dataframe(result)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with _excel_writer(output_path) as writer:
        _write_sheet(writer, df, sheet_name)
    return {"file": output_path, "rows": len(df), "sheets": [sheet_name]}


def combine_results(named_results: Sequence[Tuple[str, TableResult]]) -> TableResult:
    """Merge tables from several documents into one.

    Rows keep their document order and gain a leading ``Source File``
    column. Headers are the union in first-seen order. Confidence is the
    lowest among the merged tables.

    Raises:
        ValueError: If no input table has rows.
    """
    found = [(name, r) for name, r in named_results if r.found]
    if not found:
        raise ValueError("No data to export")

    headers = [SOURCE_COLUMN]
    for _, result in found:
        for header in result.headers:
            if header not in headers:
                headers.append(header)

    rows = []
    for name, result in found:
        for row in result.rows:
            merged = {h: "" for h in headers}
            merged.update(row)
            merged[SOURCE_COLUMN] = name
            rows.append(merged)

    return TableResult(
        headers=headers,
        rows=rows,
        confidence=min(r.confidence for _, r in found),
        strategy=Strategy.NONE,
        diagnostics={"sources": [name for name, _ in found]},
    )


def sheet_name_for(file_name: str, index: int) -> str:
    """Sheet title from a file name: stem, Excel-safe, at most 31 chars."""
    stem = _INVALID_SHEET_CHARS.sub("_", Path(file_name).stem).strip()
    return stem[:MAX_SHEET_NAME] or f"Sheet{index + 1}"


def export_workbook(
    named_results: Sequence[Tuple[str, TableResult]],
    output_path: str,
) -> Dict[str, object]:
    """Write one sheet per document; documents without rows are skipped.

    Raises:
        ValueError: If no document has rows.
        ImportError: If openpyxl is not installed.
    """
    sheets = []
    for index, (name, result) in enumerate(named_results):
        if result.found:
            title = sheet_name_for(name, index)
            base, n = title, 1
            while title in [s for s, _ in sheets]:
                n += 1
                suffix = f"_{n}"
                title = base[:MAX_SHEET_NAME - len(suffix)] + suffix
            sheets.append((title, to_dataframe(result)))

    if not sheets:
        raise ValueError("No valid data found in any document")

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with _excel_writer(output_path) as writer:
        for title, df in sheets:
            _write_sheet(writer, df, title)

    return {
        "file": output_path,
        "sheets": [title for title, _ in sheets],
        "rows": sum(len(df) for _, df in sheets),
    }
