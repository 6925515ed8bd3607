"""Shared test fixtures for ledgerscan-core."""

import json

import pytest

from ledgerscan_core import ParserSettings, Strategy, TableResult


# Line-oriented register, whitespace between cells
SCENARIO_A = "Date Item Qty\n01-01-2024 Rice 25\n02-01-2024 Oil 10"

# Line structure lost, explicit row numbers kept
SCENARIO_B = "Name Age City 1 Sam 23 Delhi 2 Anne 30 Mumbai"

# Row numbers broken (no row 2), headers still recognizable
SCENARIO_C = "CustomerID CustomerName Country 1 Shubham India 3 Aman Australia"


@pytest.fixture
def settings():
    """Default parser settings."""
    return ParserSettings()


@pytest.fixture
def scenario_b_tokens():
    return ["Name", "Age", "City", "1", "Sam", "23", "Delhi", "2", "Anne", "30", "Mumbai"]


@pytest.fixture
def register_table():
    """A small reconstructed register with one empty cell."""
    return TableResult(
        headers=["Item", "Qty", "Amount"],
        rows=[
            {"Item": "Rice", "Qty": "25", "Amount": "₹1,200"},
            {"Item": "Oil", "Qty": "10", "Amount": "450"},
            {"Item": "Salt", "Qty": "", "Amount": "30"},
        ],
        confidence=85,
        strategy=Strategy.DELIMITED,
    )


@pytest.fixture
def ledger_file(tmp_path):
    """Write Scenario A to a .txt file."""
    path = tmp_path / "ledger_page.txt"
    path.write_text(SCENARIO_A, encoding="utf-8")
    return str(path)


@pytest.fixture
def settings_file(tmp_path):
    """A settings JSON that points at its own keyword file."""
    (tmp_path / "terms.json").write_text(json.dumps(["Qty", "Rate", "qty"]), encoding="utf-8")
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"keyword_scan_window": 6, "keywords_file": "terms.json"}),
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def scenario_a():
    return SCENARIO_A


@pytest.fixture
def scenario_b():
    return SCENARIO_B


@pytest.fixture
def scenario_c():
    return SCENARIO_C
