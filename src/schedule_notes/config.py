# src/schedule_notes/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "SCHEDNOTES"

STORAGE_BACKENDS = ("sqlite", "memory")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
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


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    data_dir: Path
    storage_backend: str
    db_path: Path

    # ---- Notes ----
    autosave_delay_ms: int

    # ---- Console ----
    show_tips: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "schedule-notes").strip() or "schedule-notes"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/schedule_notes"))
        storage_backend = _env(_k("STORAGE"), "sqlite").strip().lower() or "sqlite"
        db_path = _env_path(_k("DB_PATH"), data_dir / "schedule_notes.sqlite3")

        autosave_delay_ms = max(0, _env_int(_k("AUTOSAVE_DELAY_MS"), 1000))
        show_tips = _env_bool(_k("SHOW_TIPS"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            db_path=db_path,
            autosave_delay_ms=autosave_delay_ms,
            show_tips=show_tips,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
