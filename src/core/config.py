"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets every tool (ascii/errno/signal) read the same defaults consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "posix-lookup"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "posix-lookup"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "posix-lookup"
    return Path.home() / ".config" / "posix-lookup"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Command-line flags can only switch these behaviours on; a setting that is
    enabled here cannot be disabled from the command line.
    """

    model_config = SettingsConfigDict(
        env_prefix="POSIX_LOOKUP_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    description_width: int = Field(
        default=80,
        ge=10,
        le=400,
        description="Maximum width of the description column in table mode.",
    )
    prefer_libc: bool = Field(
        default=False,
        description="Use strerror(3)/strsignal(3) descriptions by default.",
    )
    simple: bool = Field(
        default=False,
        description="Print plain lines instead of a table by default.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Log level used when --verbose is not given.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level
