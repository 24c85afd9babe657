# src/handlers/backups.py — v1
"""Backup file naming, enumeration and ordering for rotated log files.

A backup of ``app.log`` is any regular file in the log directory whose name
starts with ``app.log.``. Backups are ordered by the integer ordinal in the
name's last dot-separated segment.

Backup name templates are rendered by literal sequential replacement:

    %s  original file name
    %d  backup ordinal (1-based)
    %t  date and time, ``YYYY-MM-DDTHH:MM:SS``
    %n  compact timestamp, ``YYYYMMDDHHMMSS``
    %d  date, ``YYYY-MM-DD``
    %t  time, ``HH:MM:SS``

The last two substitutions only match placeholder text introduced by an
earlier one (e.g. a file name containing ``%t``).

Templates must start with ``%s.`` so every backup keeps the
``<file_name>.`` prefix that enumeration and retention rely on.
"""

from __future__ import annotations

import os
import re
from datetime import datetime
from pathlib import Path

from rotolog.core.errors import BackupNamingError, LogIOError

ORDINAL_PLACEHOLDER = "%d"

_ORDINAL_RE = re.compile(r"[0-9]+")


def render_backup_name(
    template: str, file_name: str, ordinal: int, now: datetime | None = None
) -> str:
    """Render a backup file name from ``template``."""
    now = now or datetime.now()
    name = template.replace("%s", file_name)
    name = name.replace("%d", str(ordinal))
    name = name.replace("%t", now.strftime("%Y-%m-%dT%H:%M:%S"))
    name = name.replace("%n", now.strftime("%Y%m%d%H%M%S"))
    name = name.replace("%d", now.strftime("%Y-%m-%d"))
    return name.replace("%t", now.strftime("%H:%M:%S"))


def parse_backup_ordinal(backup_name: str) -> int:
    """Extract the ordinal from the last dot-separated segment.

    Raises:
        BackupNamingError: If the segment is missing or not a number.
    """
    _, dot, segment = backup_name.rpartition(".")
    if not dot or not _ORDINAL_RE.fullmatch(segment):
        raise BackupNamingError(backup_name, "Backup file has no numeric ordinal")
    return int(segment)


def list_backups(directory: Path, file_name: str) -> list[str]:
    """Names of the backups of ``file_name`` in ``directory`` (unordered).

    Raises:
        LogIOError: If the directory cannot be listed.
    """
    prefix = f"{file_name}."
    try:
        with os.scandir(directory) as entries:
            return [
                entry.name
                for entry in entries
                if entry.name.startswith(prefix) and entry.is_file()
            ]
    except OSError as exc:
        raise LogIOError("list directory", directory, exc) from exc


def sort_backups(backup_names: list[str]) -> list[str]:
    """Order backups oldest first (ascending ordinal).

    Raises:
        BackupNamingError: If any name has no numeric ordinal.
    """
    return sorted(backup_names, key=parse_backup_ordinal)


def first_probe_ordinal(directory: Path, file_name: str, template: str) -> int:
    """Ordinal at which collision probing starts.

    When the template ends with the ordinal, the ordinal is the retention
    sort key, so numbering continues above the highest existing backup and
    is never reused. Otherwise probing starts at 1. Names without a numeric
    ordinal are skipped here; retention still rejects them.
    """
    if not template.endswith(ORDINAL_PLACEHOLDER):
        return 1
    ordinals = [
        int(segment)
        for segment in (
            name.rpartition(".")[2] for name in list_backups(directory, file_name)
        )
        if _ORDINAL_RE.fullmatch(segment)
    ]
    return max(ordinals, default=0) + 1


def next_backup_name(
    directory: Path, file_name: str, template: str, now: datetime | None = None
) -> str:
    """First unused backup name, probing ordinals upward.

    Raises:
        BackupNamingError: If the template ignores the ordinal and its
            rendered name is already taken.
    """
    now = now or datetime.now()
    ordinal = first_probe_ordinal(directory, file_name, template)
    candidate = render_backup_name(template, file_name, ordinal, now)
    while (directory / candidate).exists():
        ordinal += 1
        following = render_backup_name(template, file_name, ordinal, now)
        if following == candidate:
            raise BackupNamingError(
                candidate, "Backup name template has no ordinal and the name is taken"
            )
        candidate = following
    return candidate
