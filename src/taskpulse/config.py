# src/taskpulse/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every variable has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKPULSE"

TRANSPORTS = ("stdio", "sse", "streamable-http")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Front ends ----
    console_enabled: bool
    transport: str
    host: str
    port: int

    # ---- Tools ----
    widget_base_url: str
    search_limit: int

    # ---- Store ----
    seed_sample_data: bool

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(override=False)

        return Settings(
            app_name=_env(_k("APP_NAME"), "taskpulse") or "taskpulse",
            log_level=_env(_k("LOG_LEVEL"), "INFO"),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskpulse")),
            console_enabled=_env_bool(_k("CONSOLE_ENABLED"), False),
            transport=_env_choice(_k("TRANSPORT"), TRANSPORTS, "stdio"),
            host=_env(_k("HOST"), "127.0.0.1"),
            port=_env_int(_k("PORT"), 8000),
            widget_base_url=_env(_k("WIDGET_BASE_URL"), "http://localhost:8000/widgets").rstrip("/"),
            search_limit=max(1, _env_int(_k("SEARCH_LIMIT"), 50)),
            seed_sample_data=_env_bool(_k("SEED_SAMPLE_DATA"), True),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
