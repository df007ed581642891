"""Tests for CLI formatter functions."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from rich.panel import Panel
from rich.table import Table

from fastfuzzy.cli import formatters
from fastfuzzy.cli.context import CLIContext
from fastfuzzy.cli.formatters import (
    format_score,
    print_config,
    print_info,
    print_results_json,
    print_results_table,
)
from fastfuzzy.infrastructure.config import GlobalConfig
from fastfuzzy.modules.matching.search import SearchResult


class TestExports:
    """Tests for the public surface of the formatters module."""

    def test_exports_only_used_helpers(self) -> None:
        """Every exported helper exists and unused ones are not exported."""
        assert set(formatters.__all__) == {
            "console",
            "error_console",
            "format_score",
            "print_config",
            "print_error",
            "print_info",
            "print_results_json",
            "print_results_table",
            "print_success",
        }
        assert all(hasattr(formatters, name) for name in formatters.__all__)
        assert not hasattr(formatters, "print_warning")


class TestPrintInfo:
    """Tests for print_info function."""

    def test_prints_message_normally(self) -> None:
        """Should print message when not in quiet mode."""
        with patch("fastfuzzy.cli.formatters.console") as mock_console:
            print_info("Test message")
            mock_console.print.assert_called_once()
            call_args = mock_console.print.call_args[0][0]
            assert "Test message" in call_args

    def test_suppressed_when_quiet(self) -> None:
        """Should not print when quiet mode is enabled."""
        CLIContext.get().quiet = True

        with patch("fastfuzzy.cli.formatters.console") as mock_console:
            print_info("Test message")
            mock_console.print.assert_not_called()


class TestFormatScore:
    """Tests for format_score function."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [(1.0, "1.0000"), (0.0, "0.0000"), (1 - 3 / 7, "0.5714")],
    )
    def test_four_decimals(self, score: float, expected: str) -> None:
        """Scores are shown with four decimals."""
        assert format_score(score) == expected


class TestPrintResultsTable:
    """Tests for print_results_table function."""

    def test_prints_table_with_rows(self) -> None:
        """Prints a single table with one row per result."""
        results = [
            SearchResult(item="apple", score=1.0, index=0),
            SearchResult(item="applle", score=0.8333, index=1),
        ]

        with patch("fastfuzzy.cli.formatters.console") as mock_console:
            print_results_table(results, "apple")

        table = mock_console.print.call_args[0][0]
        assert isinstance(table, Table)
        assert table.row_count == 2
        assert "apple" in str(table.title)

    def test_empty_results_print_info(self) -> None:
        """No results prints an informational message instead of a table."""
        with patch("fastfuzzy.cli.formatters.console") as mock_console:
            print_results_table([], "xyz")

        message = mock_console.print.call_args[0][0]
        assert "No matches" in message
        assert "xyz" in message


class TestPrintResultsJson:
    """Tests for print_results_json function."""

    def test_prints_json_array(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Output is a JSON array of result dicts, unicode kept as-is."""
        print_results_json([SearchResult(item="café", score=1.0, index=3)])

        out = capsys.readouterr().out
        assert "café" in out
        assert json.loads(out) == [{"item": "café", "score": 1.0, "index": 3}]

    def test_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No results prints an empty array."""
        print_results_json([])

        assert json.loads(capsys.readouterr().out) == []


class TestPrintConfig:
    """Tests for print_config function."""

    def test_marks_stored_and_default_values(self) -> None:
        """Stored values are marked as stored, the rest as defaults."""
        config = GlobalConfig(limit=3)

        with patch("fastfuzzy.cli.formatters.console") as mock_console:
            print_config(config, config.to_search_options().resolve())

        panel = mock_console.print.call_args[0][0]
        assert isinstance(panel, Panel)
        body = str(panel.renderable)
        limit_line = next(line for line in body.splitlines() if "limit" in line)
        assert "3" in limit_line
        assert "(stored)" in limit_line
        threshold_line = next(
            line for line in body.splitlines() if "threshold" in line
        )
        assert "0.0" in threshold_line
        assert "(default)" in threshold_line
