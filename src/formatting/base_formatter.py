# src/formatting/base_formatter.py — v1
"""Abstract formatter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rotolog.core.levels import Level


class BaseFormatter(ABC):
    """Renders a (level, message) pair into a single log line."""

    @abstractmethod
    def format(self, level: Level, message: str) -> str:
        """Render the line.

        Raises:
            FormatError: If the record cannot be rendered.
        """
