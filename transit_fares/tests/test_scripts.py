"""
Tests for the batch calculation CLI

Run with: pytest transit_fares/tests/test_scripts.py -v
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import json
import pytest
import polars as pl

import io
import logging

from transit_fares.logging_config import setup_logging
from transit_fares.scripts import calculator
from transit_fares.scripts.calculate_batch import main_cli


@pytest.fixture
def batch_file(tmp_path):
    path = tmp_path / "journeys.json"
    path.write_text(json.dumps([
        {"dateTime": "2025-07-29T16:50:00", "from": 1, "to": 2},
        {"dateTime": "2025-07-29T17:00:00", "from": 1, "to": 2},
    ]))
    return path


class TestCalculateBatch:

    def test_prints_fares(self, batch_file, capsys):
        assert main_cli([str(batch_file)]) == 0
        out = capsys.readouterr().out
        assert "Tue Jul 29 2025 16:50:00" in out
        assert "Total:    65" in out

    def test_writes_output_csv(self, batch_file, tmp_path):
        output = tmp_path / "fares.csv"
        assert main_cli([str(batch_file), "--output", str(output)]) == 0
        df = pl.read_csv(output)
        assert df["fare"].to_list() == [30, 35]

    def test_invalid_batch_exit_code(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"dateTime": "yesterday", "from": 1, "to": 2}]))
        assert main_cli([str(path)]) == 1

    def test_missing_file_exit_code(self, tmp_path):
        assert main_cli([str(tmp_path / "missing.json")]) == 1


class TestCalculator:
    """Tests for the interactive calculator."""

    def test_two_journeys(self, monkeypatch, capsys):
        lines = iter(["2025-07-29 16:50:00 1 2", "2025-07-29 17:00:00 1 2", ""])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
        calculator.main()
        out = capsys.readouterr().out
        assert "CALCULATION RESULTS" in out
        assert "Tue Jul 29 2025 17:00:00" in out
        assert f"Total charged:      {65:>6}" in out

    def test_malformed_line_skipped(self, monkeypatch, capsys):
        lines = iter(["2025-07-29 16:50:00 1", "2025-07-29 16:50:00 1 1", ""])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
        calculator.main()
        out = capsys.readouterr().out
        assert "Expected 4 values" in out
        assert f"Total charged:      {25:>6}" in out

    def test_invalid_zone_reported(self, monkeypatch, capsys):
        lines = iter(["2025-07-29 16:50:00 one 2", ""])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
        calculator.main()
        assert "Error: Invalid inputs" in capsys.readouterr().out

    def test_no_journeys(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt="": "")
        calculator.main()
        assert "No journeys entered." in capsys.readouterr().out


class TestSetupLogging:
    """Tests for console logging setup."""

    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        root = logging.getLogger()
        package = logging.getLogger("transit_fares")
        handlers, level, package_level = root.handlers[:], root.level, package.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)
        package.setLevel(package_level)

    def test_writes_to_given_stream(self):
        stream = io.StringIO()
        setup_logging("debug", stream=stream)
        logging.getLogger("transit_fares.calculate_fares").debug("week loaded")
        assert "[DEBUG]" in stream.getvalue()
        assert "week loaded" in stream.getvalue()

    def test_defaults_to_stderr(self):
        handler = setup_logging()
        assert handler.stream is sys.stderr

    def test_quiet_loggers(self):
        setup_logging(logging.DEBUG, stream=io.StringIO())
        assert logging.getLogger("polars").level == logging.WARNING


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
