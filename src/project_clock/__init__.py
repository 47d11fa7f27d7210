"""Task time accounting: lifecycle state machine, active-time totals, duration breakdowns."""

from project_clock.core.errors import (
    ChronologyViolationError,
    ClockError,
    InsufficientResumesForStopError,
    InvalidTaskError,
    MissingBeginError,
    ResumeCountExceedsSuspendCountError,
    ResumeWithoutSuspendError,
    TaskNotFoundError,
    TimesheetFormatError,
    TransitionRejectedError,
)
from project_clock.duration import (
    CALENDAR_TIME_PARAMS,
    WORK_TIME_PARAMS,
    TimeParams,
    TimePeriod,
    decompose,
)
from project_clock.tasks.accounting import compute_all, compute_status, total_time_spent
from project_clock.tasks.lifecycle import Capability, classify, filter_by_capability, read_lifecycle
from project_clock.tasks.task_models import TaskRecord, TaskState, TaskStatusInfo
from project_clock.tasks.transitions import Action, resume, start, stop, suspend
from project_clock.timesheet import Timesheet, parse_timesheet, timesheet_to_dict

__all__ = [
    "CALENDAR_TIME_PARAMS",
    "WORK_TIME_PARAMS",
    "Action",
    "Capability",
    "ChronologyViolationError",
    "ClockError",
    "InsufficientResumesForStopError",
    "InvalidTaskError",
    "MissingBeginError",
    "ResumeCountExceedsSuspendCountError",
    "ResumeWithoutSuspendError",
    "TaskNotFoundError",
    "TaskRecord",
    "TaskState",
    "TaskStatusInfo",
    "TimeParams",
    "TimePeriod",
    "Timesheet",
    "TimesheetFormatError",
    "TransitionRejectedError",
    "classify",
    "compute_all",
    "compute_status",
    "decompose",
    "filter_by_capability",
    "parse_timesheet",
    "read_lifecycle",
    "resume",
    "start",
    "stop",
    "suspend",
    "timesheet_to_dict",
    "total_time_spent",
]
