# src/quadono/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every path is derived from the data dir unless overridden explicitly.
- Malformed values fall back to defaults instead of failing at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "QUADONO"

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
    log_dir: Path

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    alarms_path: Path
    history_path: Path

    # ---- Focus timer ----
    work_minutes: int
    break_minutes: int
    tick_seconds: float

    # ---- Alarm monitor ----
    alarm_poll_seconds: float
    bell_enabled: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "quadono")
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        # The original tool kept its files in the working directory.
        data_dir = _env_path(_k("DATA_DIR"), Path("."))
        log_dir = _env_path(_k("LOG_DIR"), data_dir / ".quadono")
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / "quadono.json")
        alarms_path = _env_path(_k("ALARMS_PATH"), data_dir / "alarms.txt")
        history_path = _env_path(_k("HISTORY_PATH"), data_dir / "history.log")

        work_minutes = max(0, _env_int(_k("WORK_MINUTES"), 25))
        break_minutes = max(0, _env_int(_k("BREAK_MINUTES"), 5))
        tick_seconds = max(0.05, _env_float(_k("TICK_SECONDS"), 1.0))

        alarm_poll_seconds = max(0.05, _env_float(_k("ALARM_POLL_SECONDS"), 1.0))
        bell_enabled = _env_bool(_k("BELL_ENABLED"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            data_dir=data_dir,
            tasks_path=tasks_path,
            alarms_path=alarms_path,
            history_path=history_path,
            work_minutes=work_minutes,
            break_minutes=break_minutes,
            tick_seconds=tick_seconds,
            alarm_poll_seconds=alarm_poll_seconds,
            bell_enabled=bell_enabled,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
