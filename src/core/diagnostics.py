# src/core/diagnostics.py — v1
"""Library-internal diagnostics on the stdlib ``logging`` tree.

rotolog reports its own events (rotations, pruned backups, dropped records,
isolated handler failures) on loggers under the ``rotolog`` namespace.
Nothing is configured implicitly; applications opt in with
setup_diagnostics().
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from typing import TextIO

ROOT_LOGGER_NAME = "rotolog"


class DiagnosticFormatter(logging.Formatter):
    """Plain text formatter for rotolog's own diagnostics."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S"),
            f"[{record.levelname:8s}]",
            record.name,
            f"- {record.getMessage()}",
        ]
        line = " ".join(parts)
        if record.exc_info and record.exc_info[1] is not None:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_diagnostics(level: str = "WARNING", stream: TextIO | None = None) -> logging.Handler:
    """Route rotolog diagnostics to a stream.

    Args:
        level: stdlib level name (DEBUG, INFO, WARNING, ERROR).
        stream: Destination, defaults to stderr.

    Returns:
        The installed handler (already attached to the rotolog logger).
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Re-init replaces the previous handler instead of stacking a duplicate.
    for existing in list(root.handlers):
        if isinstance(existing.formatter, DiagnosticFormatter):
            root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(DiagnosticFormatter())
    root.addHandler(handler)
    return handler
