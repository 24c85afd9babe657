# src/handlers/base_handler.py — v1
"""Abstract handler interface.

A handler is an independent output destination with its own minimum level
and formatter. Concrete handlers implement log(); level filtering must
happen before any I/O.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from rotolog.core.errors import FormatError
from rotolog.core.levels import Level, parse_level
from rotolog.formatting.base_formatter import BaseFormatter
from rotolog.formatting.line_formatter import LineFormatter

logger = logging.getLogger(__name__)


class BaseHandler(ABC):
    """Unified interface for log output destinations."""

    def __init__(
        self,
        level: Level | int | str = Level.INFO,
        formatter: BaseFormatter | None = None,
    ) -> None:
        self._level = parse_level(level)
        self.formatter: BaseFormatter = formatter or LineFormatter()

    @property
    def level(self) -> Level:
        """Minimum level this handler writes."""
        return self._level

    @level.setter
    def level(self, value: Level | int | str) -> None:
        self._level = parse_level(value)

    @property
    def name(self) -> str:
        return type(self).__name__

    def is_enabled_for(self, level: Level | int | str) -> bool:
        """True if a record at ``level`` passes this handler's filter."""
        return parse_level(level) >= self._level

    @abstractmethod
    def log(self, level: Level | int | str, message: str) -> None:
        """Write ``message`` if ``level`` passes the handler's filter.

        ``level`` may be a Level, its value or its name; implementations
        coerce it with parse_level() before filtering.
        """

    def flush(self) -> None:
        """Push buffered output to its destination."""

    def close(self) -> None:
        """Release resources held by the handler."""

    def _render(self, level: Level, message: str) -> str | None:
        """Format a record, or report and return None if the formatter fails."""
        try:
            return self.formatter.format(level, message)
        except FormatError as exc:
            logger.error("%s dropped a %s record: %s", self.name, level, exc)
            return None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.name}(level={self._level.display_name})"
