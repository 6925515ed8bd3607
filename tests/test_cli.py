"""Tests for the CLI module."""

import json

from click.testing import CliRunner

from ledgerscan_core.cli import cli


class TestCli:
    def setup_method(self):
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_help(self):
        result = self.runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse" in result.output
        assert "extract" in result.output
        assert "profile" in result.output

    def test_parse(self, scenario_a):
        result = self.runner.invoke(cli, ["parse", scenario_a])
        assert result.exit_code == 0
        assert "Parsed 2 rows" in result.output
        assert "delimited" in result.output

    def test_parse_json(self, scenario_b):
        result = self.runner.invoke(cli, ["parse", scenario_b, "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["headers"] == ["Name", "Age", "City"]
        assert data["confidence"] == 95
        assert data["strategy"] == "row_numbers"

    def test_parse_single_strategy(self, scenario_b):
        result = self.runner.invoke(cli, ["parse", scenario_b, "--strategy", "keywords", "--json"])
        assert json.loads(result.output)["strategy"] == "keywords"

    def test_parse_stdin(self, scenario_a):
        result = self.runner.invoke(cli, ["parse"], input=scenario_a)
        assert result.exit_code == 0
        assert "Parsed 2 rows" in result.output

    def test_parse_no_input(self):
        result = self.runner.invoke(cli, ["parse"], input="")
        assert result.exit_code == 1
        assert "No input text" in result.output

    def test_parse_no_table(self):
        result = self.runner.invoke(cli, ["parse", "1 2 3"])
        assert result.exit_code == 0
        assert "No table detected" in result.output

    def test_parse_with_settings(self, settings_file):
        result = self.runner.invoke(cli, ["parse", "Qty 1 2 3", "--settings", settings_file, "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["headers"] == ["Qty"]

    def test_parse_rejects_out_of_order_confidences(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"row_number_confidence": 10}), encoding="utf-8")
        result = self.runner.invoke(cli, ["parse", "a b\n1 2", "--settings", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid settings" in result.output

    def test_parse_rejects_malformed_settings_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        result = self.runner.invoke(cli, ["parse", "a b\n1 2", "--settings", str(path)])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_extract_rejects_invalid_settings(self, ledger_file, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"row_number_min": 9, "row_number_max": 2}), encoding="utf-8")
        result = self.runner.invoke(cli, ["extract", ledger_file, "--settings", str(path)])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output

    def test_extract_to_csv(self, ledger_file, tmp_path):
        output = tmp_path / "ledger.csv"
        result = self.runner.invoke(cli, ["extract", ledger_file, "--output", str(output)])
        assert result.exit_code == 0
        assert "Saved to" in result.output
        assert output.read_text(encoding="utf-8").startswith("Date,Item,Qty")

    def test_extract_unsupported(self, tmp_path):
        path = tmp_path / "page.docx"
        path.write_bytes(b"PK")
        result = self.runner.invoke(cli, ["extract", str(path)])
        assert result.exit_code == 1
        assert "Unsupported file type" in result.output

    def test_profile(self, scenario_a):
        result = self.runner.invoke(cli, ["profile", scenario_a])
        assert result.exit_code == 0
        assert "Table Profile" in result.output
        assert "Qty" in result.output
