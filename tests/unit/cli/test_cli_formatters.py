"""Unit tests for CLI output formatting."""
import json

import yaml

from pattern_catalogue.cli.formatters import format_output

RESULTS = {
    "results": [
        {"pattern": "facade", "category": "structural", "lines": ["Monitor turned on and Computer started"], "duration_ms": 0.1},
        {"pattern": "decorator", "category": "structural", "lines": ["5", "7", "8"], "duration_ms": 0.2},
    ]
}

PATTERNS = {
    "patterns": [
        {"name": "chain", "category": "behavioral", "description": "Sequential delegation until handled"},
        {"name": "facade", "category": "structural", "description": "Simplified entry point"},
    ]
}


class TestFormatOutput:
    def test_text_results_are_raw_lines(self):
        assert format_output(RESULTS, "text") == "Monitor turned on and Computer started\n5\n7\n8"

    def test_text_patterns_aligned(self):
        lines = format_output(PATTERNS, "text").splitlines()

        assert lines == [
            "chain   behavioral  Sequential delegation until handled",
            "facade  structural  Simplified entry point",
        ]

    def test_text_empty_patterns(self):
        assert format_output({"patterns": []}, "text") == "No patterns registered."

    def test_json(self):
        assert json.loads(format_output(RESULTS, "json")) == RESULTS

    def test_yaml(self):
        assert yaml.safe_load(format_output(PATTERNS, "yaml")) == PATTERNS

    def test_results_table(self):
        table = format_output(RESULTS, "table")

        assert "Pattern" in table
        assert "decorator" in table
        assert "Monitor turned on" in table

    def test_empty_results_table(self):
        assert format_output({"results": []}, "table") == "No demos run."

    def test_unknown_structure_table_falls_back_to_json(self):
        assert json.loads(format_output({"version": "1.0.0"}, "table")) == {"version": "1.0.0"}
