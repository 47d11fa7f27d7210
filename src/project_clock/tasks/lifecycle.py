# src/project_clock/tasks/lifecycle.py

from __future__ import annotations

"""
Task lifecycle: classification, parsing into lifecycle variants, capability groups.

A task moves through these states:

                                     /-> resumed <-\\
  unstarted -> started -> suspended <-              |
                       \\--------------\\-> stopped <-/

Moving between suspended and stopped is always recorded as if it went through
resumed (see transitions.py), so a valid stopped task has as many resumes as
suspends.
"""

import logging
import re
from collections.abc import Iterable
from enum import StrEnum

from ..core.errors import (
    ChronologyViolationError,
    InsufficientResumesForStopError,
    MissingBeginError,
    ResumeCountExceedsSuspendCountError,
    ResumeWithoutSuspendError,
)
from .task_models import (
    Cycle,
    LifecycleState,
    Resumed,
    Started,
    Stopped,
    Suspended,
    TaskRecord,
    TaskState,
    Unstarted,
)

logger = logging.getLogger(__name__)


def classify(task: TaskRecord) -> TaskState:
    """
    Lifecycle state from field presence and list lengths only.

    Total: never raises, also for malformed tasks. Use read_lifecycle() when the
    history has to be valid.
    """
    if task.end is not None:
        return TaskState.STOPPED
    if task.begin is None:
        return TaskState.UNSTARTED
    if not task.suspend:
        return TaskState.STARTED
    if len(task.suspend) > len(task.resume):
        return TaskState.SUSPENDED
    return TaskState.RESUMED


def read_lifecycle(task: TaskRecord) -> LifecycleState:
    """
    Validate the structure of a task's history and return its lifecycle variant.

    Checks, in order: begin present for any later field, resume only after suspend,
    resume count <= suspend count, enough resumes before end, suspend[i] <= resume[i].
    Raises the matching InvalidTaskError subclass on the first failure.
    """
    subject = task.subject
    begin, suspend, resume, end = task.begin, task.suspend, task.resume, task.end

    if end is not None and begin is None:
        raise MissingBeginError(subject, "end date without begin date")
    if suspend and begin is None:
        raise MissingBeginError(subject, "suspend date(s) without begin date")
    if resume and begin is None:
        raise MissingBeginError(subject, "resume date(s) without begin date")
    if resume and not suspend:
        raise ResumeWithoutSuspendError(subject)
    if len(resume) > len(suspend):
        raise ResumeCountExceedsSuspendCountError(subject)
    if end is not None and len(resume) < len(suspend):
        raise InsufficientResumesForStopError(subject)

    for suspended_at, resumed_at in zip(suspend, resume):
        if suspended_at > resumed_at:
            raise ChronologyViolationError(subject, suspended_at, resumed_at)

    state = classify(task)
    if state is TaskState.UNSTARTED:
        return Unstarted()
    assert begin is not None

    cycles = tuple(Cycle(s, r) for s, r in zip(suspend, resume))

    match state:
        case TaskState.STARTED:
            return Started(begin=begin)
        case TaskState.SUSPENDED:
            return Suspended(begin=begin, cycles=cycles, suspended_at=suspend[-1])
        case TaskState.RESUMED:
            return Resumed(begin=begin, cycles=cycles)
        case TaskState.STOPPED:
            assert end is not None
            return Stopped(begin=begin, cycles=cycles, end=end)


class Capability(StrEnum):
    """Named groups of states that decide which commands may act on a task."""

    ACTIVE = "active"
    SUSPENDABLE = "suspendable"
    # Suspendable without completed tasks (default for suspending).
    ACTIVE_SUSPENDABLE = "active_suspendable"
    RESUMABLE = "resumable"
    STOPPABLE = "stoppable"
    UNSTARTED = "unstarted"
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


_ACTIVE = frozenset({TaskState.STARTED, TaskState.SUSPENDED, TaskState.RESUMED})

CAPABILITY_STATES: dict[Capability, frozenset[TaskState]] = {
    Capability.ACTIVE: _ACTIVE,
    Capability.SUSPENDABLE: frozenset({TaskState.STARTED, TaskState.RESUMED, TaskState.STOPPED}),
    Capability.ACTIVE_SUSPENDABLE: frozenset({TaskState.STARTED, TaskState.RESUMED}),
    Capability.RESUMABLE: frozenset({TaskState.SUSPENDED, TaskState.STOPPED}),
    Capability.STOPPABLE: _ACTIVE,
    Capability.UNSTARTED: frozenset({TaskState.UNSTARTED}),
    Capability.COMPLETE: frozenset({TaskState.STOPPED}),
    Capability.INCOMPLETE: frozenset(TaskState) - {TaskState.STOPPED},
}


def has_capability(task: TaskRecord, capability: Capability) -> bool:
    return classify(task) in CAPABILITY_STATES[capability]


def filter_by_capability(
    tasks: Iterable[TaskRecord],
    capability: Capability,
    pattern: str | None = None,
) -> tuple[list[TaskRecord], str]:
    """
    Tasks whose state belongs to the capability group, optionally narrowed to subjects
    matching `pattern` (regular expression search).

    Returns (matches, label). The label ("active", "matching suspendable", ...) is a
    presentation hint for prompts and messages.
    """
    states = CAPABILITY_STATES[capability]
    matches = [t for t in tasks if classify(t) in states]

    if not pattern:
        return matches, capability.label

    rx = re.compile(pattern)
    matches = [t for t in matches if rx.search(t.subject)]
    logger.debug("Filtered tasks capability=%s pattern=%r matches=%d", capability, pattern, len(matches))
    return matches, f"matching {capability.label}"
