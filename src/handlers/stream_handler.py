# src/handlers/stream_handler.py — v1
"""Non-rotating file handler: ``<directory>/<file_name>.log``."""

from __future__ import annotations

import logging
import threading
from contextlib import nullcontext
from pathlib import Path
from typing import ContextManager

from rotolog.core.errors import LogIOError
from rotolog.core.levels import Level, parse_level
from rotolog.core.models import DEFAULT_BUFFER_SIZE, DEFAULT_FILE_PERMISSION, SinkConfig
from rotolog.formatting.base_formatter import BaseFormatter
from rotolog.handlers.base_handler import BaseHandler
from rotolog.handlers.file_sink import BufferedFileSink

logger = logging.getLogger(__name__)


class StreamHandler(BaseHandler):
    """Append records to a single log file through a buffered sink.

    The ``.log`` extension is added to ``file_name`` automatically.
    """

    def __init__(
        self,
        directory: str | Path = "logs",
        file_name: str = "log",
        level: Level | int | str = Level.INFO,
        formatter: BaseFormatter | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        file_permission: int = DEFAULT_FILE_PERMISSION,
        use_lock: bool = True,
        auto_flush: bool = True,
    ) -> None:
        super().__init__(level=level, formatter=formatter)
        self.config = SinkConfig(
            directory=Path(directory),
            file_name=file_name,
            extension=".log",
            buffer_size=buffer_size,
            file_permission=file_permission,
            use_lock=use_lock,
            auto_flush=auto_flush,
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
        """Write the record; open failures propagate as LogIOError."""
        level = parse_level(level)
        if not self.is_enabled_for(level):
            return
        with self._guard():
            self._sink.open()
            self._write_record(level, message)

    def flush(self) -> None:
        """Open the file if needed and flush buffered records."""
        with self._guard():
            self._sink.flush()

    def close(self) -> None:
        with self._guard():
            self._sink.close()

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
