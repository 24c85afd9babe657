# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides temp log directories, deterministic formatters and a clean
rotolog diagnostics logger. All file I/O happens under tmp_path.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pytest

from rotolog.formatting.line_formatter import LineFormatter

FIXED_NOW = datetime(2026, 2, 7, 14, 30, 5)


# === FIXTURES: Filesystem ===


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """Log directory that does not exist yet."""
    return tmp_path / "logs"


# === FIXTURES: Formatters ===


@pytest.fixture
def message_formatter() -> LineFormatter:
    """Formatter that renders the bare message."""
    return LineFormatter("%m")


@pytest.fixture
def fixed_clock():
    """Clock returning a constant timestamp."""
    return lambda: FIXED_NOW


@pytest.fixture
def fixed_formatter(fixed_clock) -> LineFormatter:
    """Default template with a frozen clock."""
    return LineFormatter(clock=fixed_clock)


# === FIXTURES: Diagnostics ===


@pytest.fixture(autouse=True)
def _propagate_rotolog_logs():
    """Keep the rotolog logger propagating so caplog sees its records."""
    root = logging.getLogger("rotolog")
    handlers = list(root.handlers)
    level = root.level
    root.propagate = True
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
