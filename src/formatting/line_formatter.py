# src/formatting/line_formatter.py — v1
"""Template-driven line formatter.

Placeholders, replaced in this order:
    %d  current local date and time, ``YYYY-MM-DD HH:MM:SS``
    %l  level display name
    %m  the message

Anything else in the template is copied verbatim.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from rotolog.core.errors import ConfigError, FormatError
from rotolog.core.levels import Level, parse_level
from rotolog.formatting.base_formatter import BaseFormatter

DEFAULT_LINE_FORMAT = "%d %l %m"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LineFormatter(BaseFormatter):
    """Plain text formatter. The template is read at every call."""

    def __init__(
        self,
        template: str = DEFAULT_LINE_FORMAT,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.template = template
        self._clock = clock

    def format(self, level: Level | int | str, message: str) -> str:
        template = self.template
        if not isinstance(template, str):
            raise FormatError(f"Line template must be a string, got {type(template).__name__}")
        try:
            level_name = parse_level(level).display_name
        except ConfigError as exc:
            raise FormatError(f"Unknown level: {level!r}") from exc
        line = template.replace("%d", self._clock().strftime(DATE_FORMAT))
        line = line.replace("%l", level_name)
        return line.replace("%m", str(message))

    def __repr__(self) -> str:
        return f"LineFormatter(template={self.template!r})"
