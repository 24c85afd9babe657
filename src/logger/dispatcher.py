# src/logger/dispatcher.py — v1
"""Logger: fans each record out to an ordered list of handlers.

Every handler receives every record and filters on its own level. A handler
that raises does not stop the others: the failure is reported on the
``rotolog`` logger and returned to the caller (or raised as DispatchError
once all handlers ran, with ``raise_errors=True``).
"""

from __future__ import annotations

import logging

from rotolog.core.errors import DispatchError
from rotolog.core.levels import Level, parse_level
from rotolog.core.models import HandlerFailure
from rotolog.handlers.base_handler import BaseHandler

logger = logging.getLogger(__name__)


class Logger:
    """Dispatch leveled messages to handlers."""

    def __init__(
        self,
        handlers: list[BaseHandler] | None = None,
        raise_errors: bool = False,
    ) -> None:
        self._handlers: list[BaseHandler] = list(handlers or [])
        self.raise_errors = raise_errors

    @property
    def handlers(self) -> list[BaseHandler]:
        """Registered handlers, in dispatch order."""
        return list(self._handlers)

    def add_handler(self, handler: BaseHandler) -> None:
        self._handlers.append(handler)

    def remove_handler(self, handler: BaseHandler) -> None:
        """Remove ``handler`` (matched by identity). Absent handlers are ignored."""
        self._handlers = [h for h in self._handlers if h is not handler]

    def log(self, level: Level | int | str, message: str) -> list[HandlerFailure]:
        """Send a record to every handler.

        Returns:
            Failures of handlers that raised, in dispatch order.

        Raises:
            ConfigError: If ``level`` is not a valid level.
            DispatchError: If ``raise_errors`` is set and any handler failed.
        """
        level = parse_level(level)
        failures: list[HandlerFailure] = []
        for handler in list(self._handlers):
            try:
                handler.log(level, message)
            except Exception as exc:
                logger.error("Handler %s failed on a %s record: %s", handler.name, level, exc)
                failures.append(
                    HandlerFailure(
                        handler_name=handler.name, level=level, message=message, error=exc,
                    )
                )
        if failures and self.raise_errors:
            raise DispatchError(failures)
        return failures

    def debug(self, message: str) -> list[HandlerFailure]:
        return self.log(Level.DEBUG, message)

    def info(self, message: str) -> list[HandlerFailure]:
        return self.log(Level.INFO, message)

    def warning(self, message: str) -> list[HandlerFailure]:
        return self.log(Level.WARN, message)

    def error(self, message: str) -> list[HandlerFailure]:
        return self.log(Level.ERROR, message)

    def critical(self, message: str) -> list[HandlerFailure]:
        return self.log(Level.CRITICAL, message)

    def flush(self) -> None:
        """Flush every handler; failures are reported, not raised."""
        for handler in self._handlers:
            try:
                handler.flush()
            except Exception as exc:
                logger.error("Handler %s failed to flush: %s", handler.name, exc)

    def close(self) -> None:
        """Close every handler; failures are reported, not raised."""
        for handler in self._handlers:
            try:
                handler.close()
            except Exception as exc:
                logger.error("Handler %s failed to close: %s", handler.name, exc)

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
