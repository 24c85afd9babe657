# src/handlers/rotating_file_handler.py — v1
"""Size-triggered rotating file handler.

Each accepted record runs, under the handler lock:

1. open the sink if needed;
2. rotate when the on-disk size is strictly above ``max_file_size``
   (close, rename to the next free backup name, reopen a fresh file);
3. delete the oldest backups beyond ``max_backup_count``;
4. format and write the record.

The size is re-read from disk on every call, so files truncated or moved
by someone else are picked up on the next record. Failures in steps 1-3
propagate as LogIOError / BackupNamingError; a record that fails to format
or write in step 4 is reported on the ``rotolog`` logger and dropped.
"""

from __future__ import annotations

import logging
import os
import threading
from contextlib import nullcontext
from pathlib import Path
from typing import ContextManager

from rotolog.core.errors import LogIOError
from rotolog.core.levels import Level, parse_level
from rotolog.core.models import (
    DEFAULT_BACKUP_NAME_FORMAT,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_FILE_PERMISSION,
    DEFAULT_MAX_BACKUP_COUNT,
    DEFAULT_MAX_FILE_SIZE,
    RotationPolicy,
    SinkConfig,
)
from rotolog.formatting.base_formatter import BaseFormatter
from rotolog.handlers.backups import list_backups, next_backup_name, sort_backups
from rotolog.handlers.base_handler import BaseHandler
from rotolog.handlers.file_sink import BufferedFileSink

logger = logging.getLogger(__name__)


class RotatingFileHandler(BaseHandler):
    """Write records to ``<directory>/<file_name>`` and rotate it by size.

    ``file_name`` is used as given, extension included.
    """

    def __init__(
        self,
        directory: str | Path = "logs",
        file_name: str = "app.log",
        level: Level | int | str = Level.INFO,
        formatter: BaseFormatter | None = None,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        max_backup_count: int = DEFAULT_MAX_BACKUP_COUNT,
        backup_name_format: str = DEFAULT_BACKUP_NAME_FORMAT,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        file_permission: int = DEFAULT_FILE_PERMISSION,
        use_lock: bool = True,
        auto_flush: bool = True,
    ) -> None:
        super().__init__(level=level, formatter=formatter)
        self.config = SinkConfig(
            directory=Path(directory),
            file_name=file_name,
            extension="",
            buffer_size=buffer_size,
            file_permission=file_permission,
            use_lock=use_lock,
            auto_flush=auto_flush,
        )
        self.policy = RotationPolicy(
            max_file_size=max_file_size,
            max_backup_count=max_backup_count,
            backup_name_format=backup_name_format,
        )
        self._sink = BufferedFileSink(self.config)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._sink.path

    @property
    def is_open(self) -> bool:
        return self._sink.is_open

    def log(self, level: Level | int | str, message: str) -> None:
        level = parse_level(level)
        if not self.is_enabled_for(level):
            return
        with self._guard():
            self._sink.open()
            self._rotate_if_needed()
            self._prune_backups()
            self._write_record(level, message)

    def rotate(self) -> Path:
        """Rotate now, regardless of size. Returns the backup path."""
        with self._guard():
            self._sink.open()
            return self._rotate()

    def backups(self) -> list[Path]:
        """Existing backups, oldest first."""
        directory = self.config.directory
        if not directory.is_dir():
            return []
        names = sort_backups(list_backups(directory, self.config.full_name))
        return [directory / name for name in names]

    def flush(self) -> None:
        """Open the file if needed and flush buffered records."""
        with self._guard():
            self._sink.flush()

    def close(self) -> None:
        with self._guard():
            self._sink.close()

    # --- Rotation steps (caller holds the lock) ---

    def _rotate_if_needed(self) -> None:
        size = self._sink.current_size()
        if size > self.policy.max_file_size:
            logger.info("Rotating %s (size=%d > %d)", self._sink.path, size, self.policy.max_file_size)
            self._rotate()

    def _rotate(self) -> Path:
        current = self._sink.path
        directory = current.parent
        self._sink.close()

        backup = directory / next_backup_name(
            directory, current.name, self.policy.backup_name_format
        )
        try:
            os.rename(current, backup)
        except OSError as exc:
            raise LogIOError("rename", current, exc) from exc

        self._sink.open()
        logger.debug("Rotated %s to %s", current, backup.name)
        return backup

    def _prune_backups(self) -> None:
        directory = self._sink.path.parent
        file_name = self._sink.path.name
        names = list_backups(directory, file_name)
        excess = len(names) - self.policy.max_backup_count
        if excess <= 0:
            return

        for name in sort_backups(names)[:excess]:
            path = directory / name
            try:
                os.remove(path)
            except OSError as exc:
                raise LogIOError("delete", path, exc) from exc
            logger.info("Deleted old backup %s", path)

    def _write_record(self, level: Level, message: str) -> None:
        line = self._render(level, message)
        if line is None:
            return
        try:
            self._sink.write(line)
            if self.config.auto_flush:
                self._sink.flush()
        except LogIOError as exc:
            logger.error("%s dropped a %s record: %s", self.name, level, exc)

    def _guard(self) -> ContextManager[object]:
        return self._lock if self.config.use_lock else nullcontext()
