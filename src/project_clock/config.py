# src/project_clock/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
- Timesheets without their own time parameters fall back to the configured preset.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .duration import TIME_PRESETS, WORK_TIME_PARAMS, TimeParams

ENV_PREFIX = "PCLOCK"

logger = logging.getLogger(__name__)

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

    # ---- Time accounting / display ----
    time_preset: str
    include_seconds: bool

    @property
    def default_time_params(self) -> TimeParams:
        """TimeParams of the configured preset ("work" if the name is unknown)."""
        params = TIME_PRESETS.get(self.time_preset)
        if params is None:
            logger.warning("Unknown time preset %r; using 'work'.", self.time_preset)
            return WORK_TIME_PARAMS
        return params

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "pclock").strip() or "pclock"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/pclock"))

        time_preset = _env(_k("TIME_PRESET"), "work").strip().lower() or "work"
        include_seconds = _env_bool(_k("INCLUDE_SECONDS"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            time_preset=time_preset,
            include_seconds=include_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
