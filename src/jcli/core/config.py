"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP, terminal) read config consistently.

Configuration is read-only: nothing in jcli writes it back.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jcli.core.domain.errors import ConfigError

DEFAULT_CITY = "Berlin"
DEFAULT_WEATHER_URL_TEMPLATE = "https://wttr.in/{city}"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def get_user_config_dir() -> Path:
    """Directory holding the user-wide `.env` read after the project one.

    Lets a token or city be set once per machine instead of per checkout.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "jcli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "jcli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "jcli"
    return Path.home() / ".config" / "jcli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typed values validated at the edge (env vars, `.env`) without leaking
      parsing logic into the actions.
    - One configuration contract shared by the CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="J_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    bearer: str = Field(
        default="",
        description="Bearer token for the API fetch action (J_BEARER). Empty means prompt.",
    )
    default_city: str = Field(
        default=DEFAULT_CITY,
        min_length=1,
        description="City used by the weather action when --city is not given.",
    )
    weather_url_template: str = Field(
        default=DEFAULT_WEATHER_URL_TEMPLATE,
        min_length=8,
        description="Weather service URL; `{city}` is replaced by the quoted city name.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout (seconds). None disables the timeout.",
    )
    user_agent: str = Field(
        default="jcli/0.1",
        min_length=1,
        description="User-Agent sent on every request.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level when --verbose is not given.",
    )

    @field_validator("weather_url_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        if "{city}" not in value:
            raise ValueError("must contain the {city} placeholder")
        try:
            value.format(city="x")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"only {{city}} may be used as a placeholder ({exc!r})") from exc
        return value

    @field_validator("user_agent")
    @classmethod
    def _check_user_agent(cls, value: str) -> str:
        if not value.isascii() or not value.isprintable():
            raise ValueError("must be printable ASCII")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(**overrides) -> AppSettings:
    """Build `AppSettings`, turning validation failures into `ConfigError`."""

    try:
        return AppSettings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            f"J_{'.'.join(str(part) for part in error['loc']).upper()}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from exc
