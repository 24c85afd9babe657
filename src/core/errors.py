# src/core/errors.py — v1
"""Exception hierarchy for rotolog.

Every error raised by the library derives from RotologError so callers can
catch the whole family at a single boundary (the Logger dispatcher does).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rotolog.core.models import HandlerFailure


class RotologError(Exception):
    """Base class for all rotolog errors."""


class ConfigError(RotologError):
    """Invalid level value or internally inconsistent configuration."""


class LogIOError(RotologError):
    """Filesystem operation failed while managing a log file.

    Wraps the underlying OSError (available as ``__cause__``) with the
    operation name and the path involved.
    """

    def __init__(self, operation: str, path: str | Path, reason: object = None):
        self.operation = operation
        self.path = str(path)
        self.reason = reason
        detail = f": {reason}" if reason is not None else ""
        super().__init__(f"Failed to {operation} '{self.path}'{detail}")


class FormatError(RotologError):
    """A formatter could not render a record."""


class BackupNamingError(RotologError):
    """Backup files in the log directory do not follow the naming convention."""

    def __init__(self, file_name: str, message: str):
        self.file_name = file_name
        super().__init__(f"{message}: {file_name!r}")


class DispatchError(RotologError):
    """One or more handlers failed during a Logger dispatch."""

    def __init__(self, failures: list[HandlerFailure]):
        self.failures = failures
        names = ", ".join(f.handler_name for f in failures)
        super().__init__(f"{len(failures)} handler(s) failed: {names}")
