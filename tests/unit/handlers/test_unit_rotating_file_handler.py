# tests/unit/handlers/test_unit_rotating_file_handler.py — v1
"""Tests for handlers/rotating_file_handler.py — rotation engine."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from rotolog.core.errors import BackupNamingError, LogIOError
from rotolog.core.levels import Level
from rotolog.formatting.line_formatter import LineFormatter
from rotolog.handlers.rotating_file_handler import RotatingFileHandler


def _handler(log_dir, **kwargs) -> RotatingFileHandler:
    kwargs.setdefault("formatter", LineFormatter("%m"))
    kwargs.setdefault("buffer_size", 32)
    return RotatingFileHandler(log_dir, "test.log", **kwargs)


class TestLogging:
    def test_logged(self, log_dir):
        handler = _handler(log_dir)
        handler.log(Level.INFO, "This is an info message")
        handler.flush()
        assert (log_dir / "test.log").read_text() == "This is an info message\n"
        handler.close()

    def test_not_logged_creates_nothing(self, log_dir):
        handler = _handler(log_dir)
        handler.log(Level.DEBUG, "This is a debug message")
        assert not (log_dir / "test.log").exists()
        assert not log_dir.exists()

    def test_level_given_by_name(self, log_dir):
        handler = _handler(log_dir)
        handler.log("ERROR", "hello")
        handler.log("debug", "filtered")
        handler.close()
        assert (log_dir / "test.log").read_text() == "hello\n"

    def test_full_file_name_used(self, log_dir):
        assert _handler(log_dir).path == log_dir / "test.log"


class TestRotation:
    def test_no_rotation_at_threshold(self, log_dir):
        handler = _handler(log_dir, max_file_size=10)
        handler.log(Level.INFO, "123456789")  # 10 bytes with newline
        handler.log(Level.INFO, "next")
        handler.close()
        assert handler.backups() == []
        assert (log_dir / "test.log").read_text() == "123456789\nnext\n"

    def test_record_finding_file_over_threshold_goes_to_new_file(self, log_dir):
        handler = _handler(log_dir, max_file_size=10)
        handler.log(Level.INFO, "1234567890")  # 11 bytes
        handler.log(Level.INFO, "trigger")
        handler.close()
        assert (log_dir / "test.log.1").read_text() == "1234567890\n"
        assert (log_dir / "test.log").read_text() == "trigger\n"

    def test_manual_rotate(self, log_dir):
        handler = _handler(log_dir)
        handler.log(Level.INFO, "before")
        backup = handler.rotate()
        handler.log(Level.INFO, "after")
        handler.close()
        assert backup == log_dir / "test.log.1"
        assert backup.read_text() == "before\n"
        assert (log_dir / "test.log").read_text() == "after\n"

    def test_back_to_back_rotations_never_overwrite(self, log_dir):
        handler = _handler(log_dir, backup_name_format="%s.%n.%d", max_backup_count=10)
        handler.log(Level.INFO, "one")
        first = handler.rotate()
        handler.log(Level.INFO, "two")
        second = handler.rotate()
        handler.close()
        assert first != second
        assert first.read_text() == "one\n"
        assert second.read_text() == "two\n"

    def test_rotation_reported(self, log_dir, caplog):
        handler = _handler(log_dir, max_file_size=1)
        with caplog.at_level(logging.INFO, logger="rotolog"):
            handler.log(Level.INFO, "aa")
            handler.log(Level.INFO, "bb")
        handler.close()
        assert "Rotating" in caplog.text

    def test_externally_truncated_file_not_rotated(self, log_dir):
        handler = _handler(log_dir, max_file_size=10)
        handler.log(Level.INFO, "1234567890")
        (log_dir / "test.log").write_text("")
        handler.log(Level.INFO, "fits")
        handler.close()
        assert handler.backups() == []

    def test_rename_failure_propagates_and_leaves_sink_closed(self, log_dir):
        handler = _handler(log_dir, max_file_size=1)
        handler.log(Level.INFO, "aa")
        with patch("rotolog.handlers.rotating_file_handler.os.rename", side_effect=OSError("EXDEV")):
            with pytest.raises(LogIOError, match="Failed to rename"):
                handler.log(Level.INFO, "bb")
        assert not handler.is_open
        handler.log(Level.INFO, "cc")
        handler.close()
        assert (log_dir / "test.log").read_text() == "cc\n"
        assert (log_dir / "test.log.1").read_text() == "aa\n"

    def test_missing_file_after_open_propagates(self, log_dir):
        handler = _handler(log_dir)
        handler.flush()
        (log_dir / "test.log").unlink()
        with pytest.raises(LogIOError, match="Failed to stat"):
            handler.log(Level.INFO, "x")
        handler.close()


class TestRetention:
    def test_oldest_backups_deleted(self, log_dir):
        handler = _handler(log_dir, max_file_size=1, max_backup_count=2)
        for i in range(6):
            handler.log(Level.INFO, f"record {i}")
        handler.close()
        names = [p.name for p in handler.backups()]
        assert names == ["test.log.4", "test.log.5"]
        assert (log_dir / "test.log.5").read_text() == "record 4\n"
        assert (log_dir / "test.log").read_text() == "record 5\n"

    def test_zero_backups_keeps_none(self, log_dir):
        handler = _handler(log_dir, max_file_size=1, max_backup_count=0)
        for i in range(3):
            handler.log(Level.INFO, f"r{i}")
        handler.close()
        assert handler.backups() == []
        assert (log_dir / "test.log").read_text() == "r2\n"

    def test_pre_existing_backups_pruned(self, log_dir):
        log_dir.mkdir()
        for i in range(1, 6):
            (log_dir / f"test.log.{i}").write_text(f"old {i}\n")
        handler = _handler(log_dir, max_backup_count=3)
        handler.log(Level.INFO, "x")
        handler.close()
        assert [p.name for p in handler.backups()] == ["test.log.3", "test.log.4", "test.log.5"]

    def test_foreign_file_raises_naming_error(self, log_dir):
        log_dir.mkdir()
        (log_dir / "test.log.1").write_text("")
        (log_dir / "test.log.bak").write_text("")
        handler = _handler(log_dir, max_backup_count=1)
        with pytest.raises(BackupNamingError, match="test.log.bak"):
            handler.log(Level.INFO, "x")
        handler.close()

    def test_foreign_file_under_limit_does_not_block_rotation(self, log_dir):
        log_dir.mkdir()
        (log_dir / "test.log.bak").write_text("")
        handler = _handler(log_dir, max_file_size=10, max_backup_count=5)
        handler.log(Level.INFO, "first record is long")
        handler.log(Level.INFO, "second")
        handler.close()
        assert (log_dir / "test.log.1").read_text() == "first record is long\n"
        assert (log_dir / "test.log").read_text() == "second\n"
        assert (log_dir / "test.log.bak").exists()

    def test_backups_when_directory_missing(self, log_dir):
        assert _handler(log_dir).backups() == []
