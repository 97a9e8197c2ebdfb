# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time: every variable has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

DEFAULT_SOURCE_URL = "https://jsonplaceholder.typicode.com/todos"

load_dotenv(override=False)


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


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Initial load ----
    source_enabled: bool
    source_url: str
    load_timeout_seconds: float
    load_retries: int
    load_retry_delay_seconds: float

    # ---- View ----
    page_size: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))

        source_enabled = _env_bool(_k("SOURCE_ENABLED"), True)
        source_url = _env(_k("SOURCE_URL"), DEFAULT_SOURCE_URL).strip() or DEFAULT_SOURCE_URL
        load_timeout_seconds = max(0.1, _env_float(_k("LOAD_TIMEOUT_SECONDS"), 10.0))
        load_retries = max(0, _env_int(_k("LOAD_RETRIES"), 0))
        load_retry_delay_seconds = max(0.0, _env_float(_k("LOAD_RETRY_DELAY_SECONDS"), 0.5))

        page_size = max(1, _env_int(_k("PAGE_SIZE"), 10))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            source_enabled=source_enabled,
            source_url=source_url,
            load_timeout_seconds=load_timeout_seconds,
            load_retries=load_retries,
            load_retry_delay_seconds=load_retry_delay_seconds,
            page_size=page_size,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
