"""Tests for saving profiling logs."""

import logging
from datetime import datetime

import pytest

from speedo import (
    Checkpoint,
    Config,
    HomeDirectoryError,
    LogWriteError,
    MultiMeasurement,
    Reporter,
    log_file_name,
    save_log,
)

NOW = datetime(2024, 3, 5, 7, 8, 9)


def make_reporter() -> Reporter:
    reporter = Reporter()
    reporter.add(
        MultiMeasurement(
            start=Checkpoint(file="src/a.cc", line=1),
            end=Checkpoint(file="src/a.cc", line=9),
            count=3,
            average_duration=2000,
            overall_duration=6000,
        )
    )
    return reporter


class TestLogFileName:
    """Tests for log_file_name()."""

    def test_format(self) -> None:
        """Test the name is the zero-padded timestamp with a .log suffix."""
        assert log_file_name(NOW) == "20240305-070809.log"

    def test_defaults_to_now(self) -> None:
        """Test the name has the expected shape without a timestamp."""
        name = log_file_name()
        assert name.endswith(".log")
        assert len(name) == len("YYYYMMDD-HHMMSS.log")


class TestSaveLog:
    """Tests for save_log()."""

    def test_writes_report(self, tmp_path) -> None:
        """Test the report is written to <home>/.speedo/log."""
        reporter = make_reporter()
        path = save_log(reporter, Config(home=str(tmp_path)), now=NOW)

        assert path == tmp_path / ".speedo" / "log" / "20240305-070809.log"
        assert path.read_text(encoding="utf-8") == reporter.format()

    def test_logs_path(self, tmp_path, caplog) -> None:
        """Test the written path is logged."""
        with caplog.at_level(logging.INFO, logger="speedo.persistence"):
            path = save_log(make_reporter(), Config(home=str(tmp_path)), now=NOW)
        assert str(path) in caplog.text

    def test_missing_home(self) -> None:
        """Test a missing home directory fails before touching the filesystem."""
        with pytest.raises(HomeDirectoryError):
            save_log(make_reporter(), Config(), now=NOW)

    def test_unwritable_folder(self, tmp_path) -> None:
        """Test filesystem errors are wrapped in LogWriteError."""
        blocker = tmp_path / "file"
        blocker.write_text("")

        with pytest.raises(LogWriteError) as exc_info:
            save_log(make_reporter(), Config(home=str(blocker)), now=NOW)
        assert exc_info.value.path.endswith("20240305-070809.log")

    def test_print_does_not_save(self, tmp_path, monkeypatch, capsys) -> None:
        """Test printing a report never writes a log."""
        monkeypatch.setenv("HOME", str(tmp_path))
        make_reporter().print()
        assert not (tmp_path / ".speedo").exists()
