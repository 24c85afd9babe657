# src/logger/logger_factory.py — v1
"""Factory: build a ready-to-use Logger from Settings."""

from __future__ import annotations

from typing import TextIO

from rotolog.config.settings import Settings, load_settings
from rotolog.handlers.handler_factory import create_handlers
from rotolog.logger.dispatcher import Logger


def create_logger(
    settings: Settings | None = None,
    stream: TextIO | None = None,
    raise_errors: bool = False,
) -> Logger:
    """Create a Logger with the handlers enabled in ``settings``.

    Args:
        settings: Settings to use. Loaded from the environment if None.
        stream: Console destination (defaults to stderr).
        raise_errors: Forwarded to Logger.
    """
    settings = settings or load_settings()
    return Logger(create_handlers(settings, stream=stream), raise_errors=raise_errors)
