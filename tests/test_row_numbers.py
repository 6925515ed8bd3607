"""Tests for the row-number anchored token parser."""

import pytest

from ledgerscan_core.tables import (
    Strategy,
    find_row_numbers,
    is_contiguous,
    parse_row_numbered_tokens,
    tokenize,
)


class TestFindRowNumbers:
    def test_window_and_dedupe(self):
        assert find_row_numbers(["1", "2", "2", "21", "0", "abc", "7a"]) == [1, 2]

    def test_custom_window(self):
        assert find_row_numbers(["1", "2", "30"], low=1, high=50) == [1, 2, 30]

    def test_contiguous(self):
        assert is_contiguous([1, 2, 3])
        assert not is_contiguous([1, 3])
        assert not is_contiguous([])


class TestParseRowNumberedTokens:
    def test_named_register(self, scenario_b_tokens):
        result = parse_row_numbered_tokens(scenario_b_tokens)
        assert result.headers == ["Name", "Age", "City"]
        assert result.rows == [
            {"Name": "Sam", "Age": "23", "City": "Delhi"},
            {"Name": "Anne", "Age": "30", "City": "Mumbai"},
        ]
        assert result.confidence == 95
        assert result.strategy is Strategy.ROW_NUMBERS

    def test_short_row_stops_at_next_marker(self):
        tokens = ["Item", "Qty", "Rate", "1", "Rice", "2", "Oil", "30", "55"]
        result = parse_row_numbered_tokens(tokens)
        assert result.rows == [
            {"Item": "Rice", "Qty": "", "Rate": ""},
            {"Item": "Oil", "Qty": "30", "Rate": "55"},
        ]

    def test_missing_marker_is_tolerated(self):
        tokens = ["Item", "Qty", "1", "Rice", "25", "Oil", "40", "2", "Salt", "60"]
        result = parse_row_numbered_tokens(tokens)
        assert result.rows[:2] == [
            {"Item": "Rice", "Qty": "25"},
            {"Item": "Oil", "Qty": "40"},
        ]

    def test_rows_never_exceed_number_range(self):
        tokens = tokenize("Item Qty 1 Rice 25 2 Oil 40 Salt 60 Sugar 45 Tea 70")
        result = parse_row_numbered_tokens(tokens)
        numbers = result.diagnostics["row_numbers"]
        assert result.row_count <= numbers[-1] - numbers[0] + 1
        assert result.row_count == 2
        assert result.diagnostics["unconsumed_tokens"] == 6

    def test_non_contiguous_falls_through(self):
        result = parse_row_numbered_tokens(["Name", "Qty", "1", "Rice", "3", "Oil"])
        assert not result.found
        assert result.confidence == 0
        assert result.diagnostics["reason"] == "row numbers not contiguous"

    def test_single_row_number_falls_through(self):
        result = parse_row_numbered_tokens(["Name", "1", "Sam"])
        assert not result.found
        assert result.diagnostics["reason"] == "fewer than 2 row numbers"

    def test_missing_row_one_falls_through(self):
        result = parse_row_numbered_tokens(["Name", "Age", "2", "Sam", "3", "Anne"])
        assert not result.found
        assert result.diagnostics["reason"] == "no row 1 marker"

    def test_no_header_falls_through(self):
        result = parse_row_numbered_tokens(["1", "Sam", "2", "Anne"])
        assert not result.found
        assert result.headers == []

    def test_zero_rows_is_not_high_confidence(self):
        result = parse_row_numbered_tokens(["Name", "1", "2"])
        assert result.rows == []
        assert result.confidence == 0
        assert result.diagnostics["reason"] == "no rows recovered"

    def test_blank_tokens_ignored(self, scenario_b_tokens):
        padded = [" "] + [f" {t} " for t in scenario_b_tokens] + [""]
        assert parse_row_numbered_tokens(padded).rows == parse_row_numbered_tokens(scenario_b_tokens).rows

    def test_every_row_has_exactly_the_headers(self):
        tokens = tokenize("Date Item Qty 1 01/02 Rice 2 02/02 Oil 30 3 03/02")
        result = parse_row_numbered_tokens(tokens)
        assert result.found
        for row in result.rows:
            assert list(row.keys()) == result.headers


class TestHeaderCountVersusEstimate:
    """The header-derived column count is trusted over the token estimate."""

    def test_mismatch_is_reported(self, scenario_b_tokens):
        diagnostics = parse_row_numbered_tokens(scenario_b_tokens).diagnostics
        assert diagnostics["header_count"] == 3
        assert diagnostics["estimated_column_count"] == 2
        assert diagnostics["column_count_mismatch"] is True

    def test_agreement(self):
        tokens = ["Name", "City", "1", "Sam", "Delhi", "2", "Anne", "Mumbai"]
        diagnostics = parse_row_numbered_tokens(tokens).diagnostics
        assert diagnostics["estimated_column_count"] == 2
        assert diagnostics["column_count_mismatch"] is False

    def test_header_count_wins_when_rows_are_wider(self):
        tokens = ["Name", "City", "1", "Sam", "Delhi", "India", "2", "Anne", "Mumbai", "India"]
        result = parse_row_numbered_tokens(tokens)
        assert result.headers == ["Name", "City"]
        assert result.diagnostics["estimated_column_count"] == 3
        assert result.rows[0] == {"Name": "Sam", "City": "Delhi"}
        assert all(len(row) == 2 for row in result.rows)

    @pytest.mark.parametrize("text, expected", [
        ("Name 1 Sam 2 Anne", 1),
        ("Name Qty 1 Rice 25 2 Oil 30", 2),
    ])
    def test_column_count_is_header_count(self, text, expected):
        result = parse_row_numbered_tokens(tokenize(text))
        assert len(result.headers) == expected
