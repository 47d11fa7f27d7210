# src/project_clock/bootstrap.py

"""
Composition root for command front ends.

- loads settings once,
- configures logging from them,
- wires a Clock into the task API,
- renders durations with the configured preset and seconds display.

Front ends (argument parsing, prompts, JSON files) stay outside the package;
they build one ClockSession per command and call it with a parsed Timesheet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import get_settings
from .core.ports import Clock, SystemClock
from .duration import TimeParams, TimePeriod, decompose
from .logging_setup import setup_logging_from_settings
from .tasks.task_api import StatusReport, advance_task, build_status_report
from .tasks.task_models import TaskRecord
from .tasks.transitions import Action
from .timesheet import Timesheet, resolve_time_params

logger = logging.getLogger(__name__)

DURATION_STYLES = {
    "narrow": TimePeriod.narrow_str,
    "short": TimePeriod.short_str,
    "long": TimePeriod.long_str,
    "digital": TimePeriod.digital_str,
    "hours": TimePeriod.hours_and_minutes,
}


@dataclass(slots=True)
class ClockSession:
    settings: object
    clock: Clock
    log_file: Path | None = None

    def time_params(self, timesheet: Timesheet) -> TimeParams:
        return resolve_time_params(timesheet, self.settings)

    def status(self, timesheet: Timesheet) -> StatusReport:
        return build_status_report(timesheet, self.clock.now())

    def advance(self, timesheet: Timesheet, action: Action | str, subject: str) -> TaskRecord:
        return advance_task(timesheet, action, subject, self.clock)

    def format_duration(self, timesheet: Timesheet, milliseconds: int, style: str = "hours") -> str:
        """Render a duration under the timesheet's rates; seconds shown per settings.include_seconds."""
        try:
            render = DURATION_STYLES[style]
        except KeyError:
            raise ValueError(f"unknown duration style {style!r}; expected one of {sorted(DURATION_STYLES)}") from None
        period = decompose(milliseconds, self.time_params(timesheet))
        return render(period, include_seconds=bool(getattr(self.settings, "include_seconds", False)))


def create_session(*, settings=None, clock: Clock | None = None, configure_logging: bool = True) -> ClockSession:
    """
    Build a ClockSession.

    settings defaults to get_settings(), clock to the system clock. With
    configure_logging the root logger is set up from settings (see logging_setup).
    """
    if settings is None:
        settings = get_settings()
    log_file = setup_logging_from_settings(settings) if configure_logging else None

    logger.info(
        "Session started app=%s preset=%s include_seconds=%s",
        getattr(settings, "app_name", "pclock"),
        getattr(settings, "time_preset", "work"),
        getattr(settings, "include_seconds", False),
    )
    return ClockSession(settings=settings, clock=clock if clock is not None else SystemClock(), log_file=log_file)
