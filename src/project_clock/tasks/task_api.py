# src/project_clock/tasks/task_api.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from ..core.errors import TaskNotFoundError
from ..core.ports import Clock
from ..timesheet import Timesheet
from .accounting import compute_all, total_time_spent
from .lifecycle import CAPABILITY_STATES, Capability, filter_by_capability
from .task_models import TaskRecord, TaskStatusInfo
from .transitions import Action, advance

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StatusReport:
    """Statuses of a timesheet grouped the way the status command shows them."""

    project_name: str
    now: datetime
    active: list[TaskStatusInfo] = field(default_factory=list)
    incomplete: list[TaskStatusInfo] = field(default_factory=list)
    complete: list[TaskStatusInfo] = field(default_factory=list)

    @property
    def active_time(self) -> int:
        return total_time_spent(self.active)

    @property
    def incomplete_time(self) -> int:
        return total_time_spent(self.incomplete)

    @property
    def complete_time(self) -> int:
        return total_time_spent(self.complete)

    @property
    def total_time(self) -> int:
        return self.incomplete_time + self.complete_time


def build_status_report(timesheet: Timesheet, now: datetime) -> StatusReport:
    """
    Compute every task's status and group them (active / incomplete / complete).

    Any malformed task aborts the report (InvalidTaskError propagates).
    """
    report = StatusReport(project_name=timesheet.project_name, now=now)
    active = CAPABILITY_STATES[Capability.ACTIVE]
    complete = CAPABILITY_STATES[Capability.COMPLETE]

    for info in compute_all(timesheet.tasks, now):
        if info.status in active:
            report.active.append(info)
        if info.status in complete:
            report.complete.append(info)
        else:
            report.incomplete.append(info)

    logger.debug(
        "Status report project=%r active=%d incomplete=%d complete=%d",
        timesheet.project_name,
        len(report.active),
        len(report.incomplete),
        len(report.complete),
    )
    return report


def select_tasks(
    timesheet: Timesheet,
    capability: Capability,
    pattern: str | None = None,
) -> tuple[list[TaskRecord], str]:
    """Candidates for an action (see filter_by_capability)."""
    return filter_by_capability(timesheet.tasks, capability, pattern)


def find_task(timesheet: Timesheet, subject: str) -> TaskRecord:
    """
    First task whose subject equals `subject`.

    Subjects are not guaranteed unique; with duplicates the earliest task wins.
    """
    for task in timesheet.tasks:
        if task.subject == subject:
            return task
    raise TaskNotFoundError(subject)


def advance_task(timesheet: Timesheet, action: Action | str, subject: str, clock: Clock) -> TaskRecord:
    """
    Apply start/suspend/resume/stop to the task named `subject`, at clock.now().

    The timesheet is changed in place; persisting it is up to the caller.
    Raises TaskNotFoundError, TransitionRejectedError or InvalidTaskError.
    """
    task = find_task(timesheet, subject)
    return advance(task, action, clock.now())
