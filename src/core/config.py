"""Configuración del Core.

Por qué aquí:
- Centraliza las variables `DEVSTATS_*` (pydantic-settings) fuera de la CLI.
- El cliente HTTP y los defaults de `--project/--range/--metric` leen del mismo contrato.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVSTATS_API_URL = "https://devstats.cncf.io/api/v1"
APP_VERSION = "0.1.0"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario para `devstats-cli` (Windows, macOS, XDG)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "devstats-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "devstats-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "devstats-cli"
    return Path.home() / ".config" / "devstats-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Values come from `DEVSTATS_*` environment variables, a project `.env`
    and the per-user `.env`, in that order of precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEVSTATS_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str = Field(
        default=DEVSTATS_API_URL,
        min_length=8,
        description="DevStats API endpoint that receives the POSTed query.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default=f"devstats-cli/{APP_VERSION}",
        min_length=1,
        description="User-Agent sent with the query.",
    )

    default_project: str = Field(
        default="All CNCF",
        min_length=1,
        description="Project scope used when --project is not given.",
    )
    default_range: str = Field(
        default="Last quarter",
        min_length=1,
        description="Time window used when --range is not given.",
    )
    default_metric: str = Field(
        default="Contributions",
        min_length=1,
        description="Metric used when --metric is not given.",
    )
