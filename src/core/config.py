"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- The per-user `.env` lets `hello-d2 config set` persist defaults without
  editing files inside the project.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import dotenv_values, set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language
from core.domain.models import name_problem

APP_DIR_NAME = "hello-d2"
ENV_PREFIX = "HELLO_D2_"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars() -> dict[str, str]:
    """Read the user `.env`; a missing file is just an empty mapping."""

    env_path = get_user_env_file()
    if not env_path.exists():
        return {}
    values = dotenv_values(env_path, encoding="utf-8")
    return {k: v for k, v in values.items() if v is not None}


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Write/update variables in the user's global `.env`. `None` values are skipped.

    Values are always quoted so characters like `#` survive the round-trip
    through the dotenv parser pydantic-settings reads with.
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text("# hello-d2 user config (.env)\n", encoding="utf-8")

    for key in sorted(values):
        value = values[key]
        if value is None:
            continue
        set_key(env_path, key, value, quote_mode="always", encoding="utf-8")
    return env_path


def settings_env_files() -> tuple[Path, Path]:
    """Env files in increasing priority: project `.env`, then user `.env`."""

    return Path(".env"), get_user_env_file()


class AppSettings(BaseSettings):
    """Application settings.

    Priority, highest first: process environment, the user `.env` written by
    `config set`, the project `.env` (dev). Build it with `load_settings()`
    so the user `.env` path is resolved at call time.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    default_name: str = Field(
        default="World",
        description="Name greeted when none is given (1..256 chars once stripped).",
    )
    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Default greeting language (en/es).",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the Rich banner before the greeting.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level for the hello_d2 logger.",
    )

    @field_validator("default_name")
    @classmethod
    def _check_default_name(cls, value: str) -> str:
        problem = name_problem(value)
        if problem:
            raise ValueError(problem)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value!r}")
        return level


def load_settings() -> AppSettings:
    """Build `AppSettings` from the environment and both `.env` files."""

    return AppSettings(_env_file=settings_env_files())
