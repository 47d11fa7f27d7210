# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from project_clock.duration import WORK_TIME_PARAMS
from project_clock.tasks.task_models import TaskRecord

from .fakes import FixedClock, ts

TASK_SUBJECT = "Test task"


@pytest.fixture()
def now() -> datetime:
    """A fixed "current instant", a day after the test histories start."""
    return ts("2024-01-02T00:00:00.000Z")


@pytest.fixture()
def clock(now: datetime) -> FixedClock:
    return FixedClock(now)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with config.Settings.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="pclock-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        time_preset="work",
        include_seconds=False,
        default_time_params=WORK_TIME_PARAMS,
    )


@pytest.fixture()
def make_task() -> Callable[..., TaskRecord]:
    """
    Build a TaskRecord from ISO strings:

        make_task(begin="2024-01-01T00:00:00Z", suspend=["..."], resume=["..."])
    """

    def _make(
        subject: str = TASK_SUBJECT,
        *,
        begin: str | None = None,
        suspend: list[str] | None = None,
        resume: list[str] | None = None,
        end: str | None = None,
    ) -> TaskRecord:
        return TaskRecord(
            subject=subject,
            begin=ts(begin) if begin else None,
            suspend=[ts(s) for s in suspend or []],
            resume=[ts(r) for r in resume or []],
            end=ts(end) if end else None,
        )

    return _make
