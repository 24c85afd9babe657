# src/handlers/console_handler.py — v1
"""Handler writing rendered lines to a text stream (stderr by default)."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rotolog.core.levels import Level, parse_level
from rotolog.formatting.base_formatter import BaseFormatter
from rotolog.handlers.base_handler import BaseHandler

logger = logging.getLogger(__name__)


class ConsoleHandler(BaseHandler):
    """Write each accepted record as one line on a stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        level: Level | int | str = Level.INFO,
        formatter: BaseFormatter | None = None,
    ) -> None:
        super().__init__(level=level, formatter=formatter)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so pytest's capsys and redirected stderr are honoured.
        return self._stream if self._stream is not None else sys.stderr

    @stream.setter
    def stream(self, value: TextIO | None) -> None:
        self._stream = value

    def log(self, level: Level | int | str, message: str) -> None:
        level = parse_level(level)
        if not self.is_enabled_for(level):
            return
        line = self._render(level, message)
        if line is None:
            return
        if not line.endswith("\n"):
            line += "\n"
        try:
            self.stream.write(line)
            self.stream.flush()
        except (OSError, ValueError) as exc:
            logger.error("ConsoleHandler dropped a %s record: %s", level, exc)

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            logger.error("ConsoleHandler failed to flush: %s", exc)
