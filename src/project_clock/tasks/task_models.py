# src/project_clock/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class TaskState(StrEnum):
    """
    Derived lifecycle state of a task (never stored).

    Notes:
    - STOPPED is reported as "completed" in status listings.
    """

    UNSTARTED = "unstarted"
    STARTED = "started"
    SUSPENDED = "suspended"
    RESUMED = "resumed"
    STOPPED = "completed"


@dataclass(slots=True)
class TaskRecord:
    """
    One unit of work, as stored in a timesheet.

    Empty suspend/resume lists mean "absent". The subject is a display string and is
    not guaranteed to be unique within a timesheet.
    """

    subject: str
    description: str | None = None
    notes: str | None = None

    begin: datetime | None = None
    suspend: list[datetime] = field(default_factory=list)
    resume: list[datetime] = field(default_factory=list)
    end: datetime | None = None


@dataclass(frozen=True, slots=True)
class Cycle:
    """One completed pause: work stopped at suspended_at and restarted at resumed_at."""

    suspended_at: datetime
    resumed_at: datetime


# ---- lifecycle variants ----


@dataclass(frozen=True, slots=True)
class Unstarted:
    @property
    def state(self) -> TaskState:
        return TaskState.UNSTARTED


@dataclass(frozen=True, slots=True)
class Started:
    begin: datetime

    @property
    def state(self) -> TaskState:
        return TaskState.STARTED


@dataclass(frozen=True, slots=True)
class Suspended:
    begin: datetime
    cycles: tuple[Cycle, ...]
    suspended_at: datetime

    @property
    def state(self) -> TaskState:
        return TaskState.SUSPENDED


@dataclass(frozen=True, slots=True)
class Resumed:
    begin: datetime
    cycles: tuple[Cycle, ...]

    @property
    def state(self) -> TaskState:
        return TaskState.RESUMED


@dataclass(frozen=True, slots=True)
class Stopped:
    begin: datetime
    cycles: tuple[Cycle, ...]
    end: datetime

    @property
    def state(self) -> TaskState:
        return TaskState.STOPPED


LifecycleState = Unstarted | Started | Suspended | Resumed | Stopped


@dataclass(frozen=True, slots=True)
class TaskStatusInfo:
    """Status line for one task: subject, lifecycle state and active time in milliseconds."""

    task: str
    status: TaskState
    time_spent: int
