# src/core/levels.py — v1
"""Severity levels, ordered lowest to highest."""

from __future__ import annotations

from enum import IntEnum

from rotolog.core.errors import ConfigError


class Level(IntEnum):
    """Log severity. Comparison follows severity order."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    CRITICAL = 4

    @property
    def display_name(self) -> str:
        """Canonical name used in rendered lines."""
        return self.name

    def __str__(self) -> str:
        return self.name


_ALIASES: dict[str, Level] = {"WARNING": Level.WARN}


def parse_level(value: Level | int | str) -> Level:
    """Coerce a level given as enum, int or name.

    Names are case-insensitive; ``WARNING`` is accepted for ``WARN``.

    Raises:
        ConfigError: If the value is not one of the five levels.
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, bool):
        raise ConfigError(f"Invalid level: {value!r}")
    if isinstance(value, int):
        try:
            return Level(value)
        except ValueError:
            raise ConfigError(f"Invalid level: {value!r}") from None
    if isinstance(value, str):
        name = value.strip().upper()
        if name in _ALIASES:
            return _ALIASES[name]
        try:
            return Level[name]
        except KeyError:
            raise ConfigError(f"Invalid level: {value!r}") from None
    raise ConfigError(f"Invalid level: {value!r}")
