# src/project_clock/core/errors.py

"""
Error taxonomy.

Two severity tiers:
- InvalidTaskError and its subclasses: the recorded history of a task is malformed.
  These abort the whole computation for a timesheet.
- TransitionRejectedError: a state advancement was asked for in a state that does not
  allow it. The caller can turn it into a prompt or a message and carry on.

TimesheetFormatError covers document-shape problems at the persistence boundary.
"""

from __future__ import annotations

from datetime import datetime

from .instants import format_instant

_SUBJECT_MAX = 25


def short_subject(subject: str) -> str:
    """Subject as shown in error messages (long subjects are truncated)."""
    if len(subject) > _SUBJECT_MAX:
        return f"{subject[:_SUBJECT_MAX - 3]}..."
    return subject


class ClockError(Exception):
    """Base class for all project clock errors."""


class InvalidTaskError(ClockError):
    """The timestamps recorded on a task do not form a valid history."""

    reason = "invalid task history"

    def __init__(self, subject: str, detail: str | None = None) -> None:
        self.subject = subject
        super().__init__(f"invalid task '{short_subject(subject)}'; {detail or self.reason}")


class MissingBeginError(InvalidTaskError):
    reason = "end, suspend or resume date(s) without begin date"


class ResumeWithoutSuspendError(InvalidTaskError):
    reason = "resume without suspend"


class ResumeCountExceedsSuspendCountError(InvalidTaskError):
    reason = "resumed more times than suspended"


class InsufficientResumesForStopError(InvalidTaskError):
    reason = "suspend and end without enough resumes"


class ChronologyViolationError(InvalidTaskError):
    """An interval on the task starts later than it ends."""

    def __init__(self, subject: str, interval_start: datetime, interval_end: datetime) -> None:
        self.interval_start = interval_start
        self.interval_end = interval_end
        super().__init__(
            subject,
            f"invalid time period '{format_instant(interval_start)}' => '{format_instant(interval_end)}'; "
            "start date is later than end date",
        )


class TransitionRejectedError(ClockError):
    """
    A start/suspend/resume/stop request is not allowed in the task's current state.

    Attributes:
    - subject: task subject
    - action: the attempted action ("start", "suspend", ...)
    - state: current lifecycle state (TaskState)
    """

    def __init__(self, subject: str, action: str, state: object, detail: str) -> None:
        self.subject = subject
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} task '{short_subject(subject)}'; {detail}.")


class TaskNotFoundError(ClockError, LookupError):
    def __init__(self, subject: str) -> None:
        self.subject = subject
        super().__init__(f"No task with subject '{short_subject(subject)}'.")


class TimesheetFormatError(ClockError):
    """The timesheet document does not have the expected shape."""
