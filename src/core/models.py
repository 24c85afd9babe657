# src/core/models.py — v1
"""Domain models: SinkConfig, RotationPolicy, HandlerFailure."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from rotolog.core.levels import Level

DIRECTORY_PERMISSION = 0o755
DEFAULT_FILE_PERMISSION = 0o644
DEFAULT_BUFFER_SIZE = 4096
DEFAULT_MAX_FILE_SIZE = 1_000_000
DEFAULT_MAX_BACKUP_COUNT = 5
DEFAULT_BACKUP_NAME_FORMAT = "%s.%d"
BACKUP_NAME_PREFIX = "%s."


class SinkConfig(BaseModel):
    """Where and how a buffered file sink writes.

    Changes made while the sink is open apply on the next open.
    """

    model_config = ConfigDict(validate_assignment=True)

    directory: Path = Path("logs")
    file_name: str = Field(default="log", min_length=1)
    extension: str = ".log"
    buffer_size: int = Field(default=DEFAULT_BUFFER_SIZE, gt=0)
    file_permission: int = Field(default=DEFAULT_FILE_PERMISSION, ge=0, le=0o777)
    use_lock: bool = True
    auto_flush: bool = True

    @property
    def full_name(self) -> str:
        """File name including the extension."""
        return f"{self.file_name}{self.extension}"

    @property
    def file_path(self) -> Path:
        """Path of the active log file."""
        return self.directory / self.full_name


class RotationPolicy(BaseModel):
    """Size threshold, retention and backup naming for rotation."""

    model_config = ConfigDict(validate_assignment=True)

    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, gt=0)
    max_backup_count: int = Field(default=DEFAULT_MAX_BACKUP_COUNT, ge=0)
    # Backups are found by the "<file_name>." prefix, so the template must keep it.
    backup_name_format: str = Field(default=DEFAULT_BACKUP_NAME_FORMAT, pattern=r"^%s\.")


class HandlerFailure(BaseModel):
    """A handler that raised while the Logger dispatched a record."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    handler_name: str
    level: Level
    message: str
    error: Exception
