# src/config/sizes.py — v1
"""Human-readable byte sizes ("512KB", "10MB") for rotation thresholds."""

from __future__ import annotations

import re

_SIZE_RE = re.compile(r"^(\d+)\s*(B|KB|MB|GB)?$", re.IGNORECASE)
_MULTIPLIERS = {"B": 1, "KB": 1024, "MB": 1024**2, "GB": 1024**3}


def parse_size(size: str | int) -> int:
    """Parse a size like '10MB' into bytes.

    Supported suffixes: B, KB, MB, GB (case-insensitive). A bare number or
    an int is taken as bytes.

    Raises:
        ValueError: If the value is not a positive size.
    """
    if isinstance(size, int) and not isinstance(size, bool):
        value = size
    else:
        match = _SIZE_RE.match(str(size).strip())
        if not match:
            raise ValueError(f"Invalid size format: {size!r}. Use e.g. '10MB'.")
        unit = (match.group(2) or "B").upper()
        value = int(match.group(1)) * _MULTIPLIERS[unit]
    if value <= 0:
        raise ValueError(f"Size must be positive, got {size!r}")
    return value
