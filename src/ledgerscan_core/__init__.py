"""LedgerScan Core -- Turn recognized ledger pages into spreadsheet tables.

Photograph a handwritten register, run it through OCR, get headers and rows
back. No delimiters required.

Quick start::

    from ledgerscan_core import parse_table_from_text

    result = parse_table_from_text("Name Age City 1 Sam 23 Delhi 2 Anne 30 Mumbai")
    print(result.headers, result.confidence)
    for row in result.rows:
        print(row)
"""

__version__ = "1.0.0"

# Types
from ._types import Strategy, TableResult

# Table reconstruction
from .tables import (
    ParserSettings,
    choose_result,
    load_keyword_lexicon,
    load_settings,
    parse_delimited_lines,
    parse_keyword_tokens,
    parse_row_numbered_tokens,
    parse_table_from_text,
    table_from_llm_response,
    tokenize,
)

# Ingestion
from .ingestion import extract_pdf_text, extract_table_from_file, recognize_image

# Export (requires pandas; .xlsx requires openpyxl)
from .export import combine_results, export_csv, export_excel, export_workbook, to_dataframe

# Profiling
from .profiler import profile_table

__all__ = [
    "__version__",
    # Types
    "Strategy",
    "TableResult",
    # Table reconstruction
    "parse_table_from_text",
    "parse_delimited_lines",
    "parse_row_numbered_tokens",
    "parse_keyword_tokens",
    "table_from_llm_response",
    "choose_result",
    "tokenize",
    "ParserSettings",
    "load_settings",
    "load_keyword_lexicon",
    # Ingestion
    "recognize_image",
    "extract_pdf_text",
    "extract_table_from_file",
    # Export
    "to_dataframe",
    "export_csv",
    "export_excel",
    "combine_results",
    "export_workbook",
    # Profiling
    "profile_table",
]
