# src/config/settings.py — v1
"""Typed configuration loaded from the environment via pydantic-settings.

Variables use the ``ROTOLOG_`` prefix (``ROTOLOG_LOG_DIRECTORY``,
``ROTOLOG_MAX_FILE_SIZE=10MB`` ...) and may also come from a ``.env`` file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rotolog.config.sizes import parse_size
from rotolog.core.errors import ConfigError
from rotolog.core.levels import Level, parse_level
from rotolog.core.models import (
    BACKUP_NAME_PREFIX,
    DEFAULT_BACKUP_NAME_FORMAT,
    DEFAULT_BUFFER_SIZE,
    DEFAULT_FILE_PERMISSION,
    DEFAULT_MAX_BACKUP_COUNT,
)


class Settings(BaseSettings):
    """Handler and logger settings."""

    model_config = SettingsConfigDict(
        env_prefix="ROTOLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === File output ===
    log_directory: Path = Path("logs")
    log_file_name: str = "app.log"
    log_level: str = "INFO"
    log_format: str = "%d %l %m"

    # === Console output ===
    console_enabled: bool = True
    console_level: str = "INFO"
    console_format: str = "%d - %l - %m"

    # === Rotation ===
    rotation_enabled: bool = True
    max_file_size: str = "1MB"
    max_backup_count: int = DEFAULT_MAX_BACKUP_COUNT
    backup_name_format: str = DEFAULT_BACKUP_NAME_FORMAT

    # === Sink ===
    buffer_size: int = DEFAULT_BUFFER_SIZE
    file_permission: int = DEFAULT_FILE_PERMISSION
    use_lock: bool = True
    auto_flush: bool = True

    # --- Validators ---

    @field_validator("log_level", "console_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Level names must be known; ConfigError otherwise."""
        return parse_level(v).display_name

    @field_validator("max_file_size", mode="before")
    @classmethod
    def validate_max_file_size(cls, v: object) -> str:
        """Accept '10MB' style strings or a byte count."""
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        parse_size(v)  # type: ignore[arg-type]
        return v  # type: ignore[return-value]

    @field_validator("file_permission", mode="before")
    @classmethod
    def validate_file_permission(cls, v: object) -> object:
        """Strings are read as octal ("0644", "0o600")."""
        if isinstance(v, str):
            text = v.strip().lower().removeprefix("0o")
            try:
                return int(text, 8)
            except ValueError:
                raise ValueError(f"Invalid octal file permission: {v!r}") from None
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Reject values no handler could work with."""
        errors: list[str] = []

        if not self.log_file_name.strip():
            errors.append("LOG_FILE_NAME must not be empty")
        if self.buffer_size <= 0:
            errors.append("BUFFER_SIZE must be > 0")
        if self.max_backup_count < 0:
            errors.append("MAX_BACKUP_COUNT must be >= 0")
        if not 0 <= self.file_permission <= 0o777:
            errors.append("FILE_PERMISSION must be between 0 and 0o777")
        if self.rotation_enabled and not self.backup_name_format.startswith(BACKUP_NAME_PREFIX):
            errors.append(f"BACKUP_NAME_FORMAT must start with '{BACKUP_NAME_PREFIX}'")

        if errors:
            raise ConfigError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def max_file_size_bytes(self) -> int:
        return parse_size(self.max_file_size)

    @property
    def file_level(self) -> Level:
        return parse_level(self.log_level)

    @property
    def console_level_value(self) -> Level:
        return parse_level(self.console_level)


def load_settings(**overrides: object) -> Settings:
    """Load settings from the environment with optional overrides.

    Raises:
        ConfigError: If a level is unknown or the configuration is inconsistent.
        pydantic.ValidationError: If a value has the wrong type or format.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
