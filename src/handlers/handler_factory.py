# src/handlers/handler_factory.py — v1
"""Factory: build handlers from Settings."""

from __future__ import annotations

from typing import TextIO

from rotolog.config.settings import Settings
from rotolog.formatting.line_formatter import LineFormatter
from rotolog.handlers.base_handler import BaseHandler
from rotolog.handlers.console_handler import ConsoleHandler


def create_file_handler(settings: Settings) -> BaseHandler:
    """Create the file handler described by ``settings``.

    With rotation enabled this is a RotatingFileHandler writing
    ``log_file_name`` as given; otherwise a StreamHandler, which appends
    ``.log`` to ``log_file_name`` (a trailing ``.log`` is stripped first).
    """
    formatter = LineFormatter(settings.log_format)

    if settings.rotation_enabled:
        from rotolog.handlers.rotating_file_handler import RotatingFileHandler
        return RotatingFileHandler(
            directory=settings.log_directory,
            file_name=settings.log_file_name,
            level=settings.file_level,
            formatter=formatter,
            max_file_size=settings.max_file_size_bytes,
            max_backup_count=settings.max_backup_count,
            backup_name_format=settings.backup_name_format,
            buffer_size=settings.buffer_size,
            file_permission=settings.file_permission,
            use_lock=settings.use_lock,
            auto_flush=settings.auto_flush,
        )

    from rotolog.handlers.stream_handler import StreamHandler
    return StreamHandler(
        directory=settings.log_directory,
        file_name=settings.log_file_name.removesuffix(".log"),
        level=settings.file_level,
        formatter=formatter,
        buffer_size=settings.buffer_size,
        file_permission=settings.file_permission,
        use_lock=settings.use_lock,
        auto_flush=settings.auto_flush,
    )


def create_handlers(settings: Settings, stream: TextIO | None = None) -> list[BaseHandler]:
    """Create all handlers enabled in ``settings``: console first, then file.

    Args:
        settings: Application settings.
        stream: Console destination (defaults to stderr).
    """
    handlers: list[BaseHandler] = []
    if settings.console_enabled:
        handlers.append(
            ConsoleHandler(
                stream=stream,
                level=settings.console_level_value,
                formatter=LineFormatter(settings.console_format),
            )
        )
    handlers.append(create_file_handler(settings))
    return handlers
