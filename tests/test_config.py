# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from project_clock.config import Settings, get_settings
from project_clock.duration import CALENDAR_TIME_PARAMS, WORK_TIME_PARAMS

_VARS = ("PCLOCK_APP_NAME", "PCLOCK_LOG_LEVEL", "PCLOCK_LOG_DIR", "PCLOCK_TIME_PRESET", "PCLOCK_INCLUDE_SECONDS")


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "pclock"
    assert s.log_level == "INFO"
    assert s.log_dir == Path(".local/pclock")
    assert s.time_preset == "work"
    assert s.include_seconds is False
    assert s.default_time_params is WORK_TIME_PARAMS


def test_from_env(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("PCLOCK_APP_NAME", "billing")
    clean_env.setenv("PCLOCK_LOG_LEVEL", "debug")
    clean_env.setenv("PCLOCK_LOG_DIR", str(tmp_path))
    clean_env.setenv("PCLOCK_TIME_PRESET", "Calendar")
    clean_env.setenv("PCLOCK_INCLUDE_SECONDS", "yes")

    s = Settings.from_env()
    assert s.app_name == "billing"
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.include_seconds is True
    assert s.default_time_params is CALENDAR_TIME_PARAMS


def test_unknown_preset_falls_back_to_work(clean_env, caplog) -> None:
    clean_env.setenv("PCLOCK_TIME_PRESET", "lunar")
    s = Settings.from_env()
    with caplog.at_level(logging.WARNING, logger="project_clock.config"):
        assert s.default_time_params is WORK_TIME_PARAMS
    assert "Unknown time preset 'lunar'" in caplog.text


def test_get_settings_is_a_singleton() -> None:
    assert get_settings() is get_settings()
