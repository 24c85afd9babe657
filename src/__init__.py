# src/__init__.py — v1
"""rotolog: leveled logging to pluggable handlers with size-based file rotation."""

from rotolog.core.errors import (
    BackupNamingError,
    ConfigError,
    DispatchError,
    FormatError,
    LogIOError,
    RotologError,
)
from rotolog.core.levels import Level, parse_level
from rotolog.formatting.base_formatter import BaseFormatter
from rotolog.formatting.line_formatter import LineFormatter
from rotolog.handlers.base_handler import BaseHandler
from rotolog.handlers.console_handler import ConsoleHandler
from rotolog.handlers.rotating_file_handler import RotatingFileHandler
from rotolog.handlers.stream_handler import StreamHandler
from rotolog.logger.dispatcher import Logger
from rotolog.version import __version__

__all__ = [
    "BackupNamingError",
    "BaseFormatter",
    "BaseHandler",
    "ConfigError",
    "ConsoleHandler",
    "DispatchError",
    "FormatError",
    "Level",
    "LineFormatter",
    "LogIOError",
    "Logger",
    "RotatingFileHandler",
    "RotologError",
    "StreamHandler",
    "__version__",
    "parse_level",
]
