# src/handlers/file_sink.py — v1
"""Buffered append-only file sink.

Owns one open file handle wrapped in a BufferedWriter of the configured
size. The sink does not lock; the owning handler serialises access.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path

from rotolog.core.errors import LogIOError
from rotolog.core.models import DIRECTORY_PERMISSION, SinkConfig

logger = logging.getLogger(__name__)

_OPEN_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_APPEND


class BufferedFileSink:
    """Lazily opened, buffered writer for a single log file."""

    def __init__(self, config: SinkConfig | None = None) -> None:
        self.config = config or SinkConfig()
        self._writer: io.BufferedWriter | None = None
        self._path: Path | None = None

    @property
    def path(self) -> Path:
        """Path of the open file, or the configured path when closed."""
        return self._path if self._path is not None else self.config.file_path

    @property
    def is_open(self) -> bool:
        return self._writer is not None

    def open(self) -> None:
        """Create the directory if needed and open the file for appending.

        A newly created file gets exactly ``config.file_permission``; the
        process umask does not apply. On failure the sink stays closed.

        Raises:
            LogIOError: If the directory or the file cannot be created.
        """
        if self._writer is not None:
            return

        directory = self.config.directory
        path = self.config.file_path
        try:
            os.makedirs(directory, mode=DIRECTORY_PERMISSION, exist_ok=True)
        except OSError as exc:
            raise LogIOError("create directory", directory, exc) from exc

        created = not path.exists()
        try:
            fd = os.open(path, _OPEN_FLAGS, self.config.file_permission)
        except OSError as exc:
            raise LogIOError("open", path, exc) from exc

        try:
            if created:
                os.chmod(path, self.config.file_permission)
            writer = open(fd, "ab", buffering=self.config.buffer_size)
        except OSError as exc:
            os.close(fd)
            raise LogIOError("open", path, exc) from exc

        self._writer = writer
        self._path = path
        logger.debug("Opened log file %s", path)

    def write(self, line: str) -> None:
        """Append one line (newline-terminated) through the buffer.

        Raises:
            LogIOError: If the sink is closed, the line cannot be encoded
                as UTF-8, or the write fails.
        """
        if self._writer is None:
            raise LogIOError("write", self.path, "sink is not open")
        if not line.endswith("\n"):
            line += "\n"
        try:
            self._writer.write(line.encode("utf-8"))
        except (OSError, UnicodeEncodeError) as exc:
            raise LogIOError("write", self.path, exc) from exc

    def flush(self) -> None:
        """Open the sink if needed, then push buffered bytes to the file.

        Raises:
            LogIOError: If opening or flushing fails.
        """
        self.open()
        assert self._writer is not None
        try:
            self._writer.flush()
        except OSError as exc:
            raise LogIOError("flush", self.path, exc) from exc

    def close(self) -> None:
        """Flush and release the handle. No-op when already closed.

        The handle is released even if the final flush fails.

        Raises:
            LogIOError: If the final flush or the close fails.
        """
        writer, path = self._writer, self.path
        if writer is None:
            return
        self._writer = None
        self._path = None
        try:
            writer.close()
        except OSError as exc:
            raise LogIOError("close", path, exc) from exc
        logger.debug("Closed log file %s", path)

    def current_size(self) -> int:
        """Size of the file on disk, re-read on every call.

        Buffered bytes not yet flushed are not counted.

        Raises:
            LogIOError: If the file is missing or cannot be stat'ed.
        """
        path = self.path
        try:
            return os.stat(path).st_size
        except OSError as exc:
            raise LogIOError("stat", path, exc) from exc
