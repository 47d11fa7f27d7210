# src/project_clock/tasks/transitions.py

from __future__ import annotations

"""
State advancement: start / suspend / resume / stop.

Each operation mutates the given TaskRecord in place (appending to suspend/resume or
setting begin/end) using the caller's `now`, and returns the same record.

Transfers between suspended and stopped are recorded as if they went through resumed:
- stop a suspended task:    resume += [now]; end = now
- suspend a stopped task:   suspend += [end, now]; resume += [now]; end removed
- resume a stopped task:    suspend += [end]; resume += [now]; end removed

Requests that the current state does not allow raise TransitionRejectedError.
Tasks with a malformed history raise InvalidTaskError before anything is changed.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from enum import StrEnum

from ..core.errors import TransitionRejectedError
from ..core.instants import format_instant
from .lifecycle import CAPABILITY_STATES, Capability, read_lifecycle
from .task_models import TaskRecord, TaskState

logger = logging.getLogger(__name__)


class Action(StrEnum):
    START = "start"
    SUSPEND = "suspend"
    RESUME = "resume"
    STOP = "stop"


_REJECTIONS: dict[tuple[Action, TaskState], str] = {
    (Action.START, TaskState.STARTED): "the task has already been started",
    (Action.START, TaskState.SUSPENDED): "the task has already been started",
    (Action.START, TaskState.RESUMED): "the task has already been started",
    (Action.START, TaskState.STOPPED): "the task has already been completed",
    (Action.SUSPEND, TaskState.UNSTARTED): "the task hasn't been started yet",
    (Action.SUSPEND, TaskState.SUSPENDED): "the task has already been suspended",
    (Action.RESUME, TaskState.UNSTARTED): "the task hasn't been started yet",
    (Action.RESUME, TaskState.STARTED): "the task is not suspended",
    (Action.RESUME, TaskState.RESUMED): "the task is not suspended",
    (Action.STOP, TaskState.UNSTARTED): "the task has not been started",
    (Action.STOP, TaskState.STOPPED): "the task has already been stopped",
}


def _latest_instant(task: TaskRecord) -> datetime | None:
    instants = [*task.suspend, *task.resume]
    if task.begin is not None:
        instants.append(task.begin)
    if task.end is not None:
        instants.append(task.end)
    return max(instants, default=None)


def _require(task: TaskRecord, action: Action, allowed: frozenset[TaskState], now: datetime) -> TaskState:
    state = read_lifecycle(task).state
    if state not in allowed:
        raise TransitionRejectedError(task.subject, action, state, _REJECTIONS[(action, state)])

    latest = _latest_instant(task)
    if latest is not None and now < latest:
        raise TransitionRejectedError(
            task.subject,
            action,
            state,
            f"{format_instant(now)} is earlier than the latest recorded time {format_instant(latest)}",
        )
    return state


def start(task: TaskRecord, now: datetime) -> TaskRecord:
    _require(task, Action.START, CAPABILITY_STATES[Capability.UNSTARTED], now)
    task.begin = now
    logger.info("Started task subject=%r at=%s", task.subject, format_instant(now))
    return task


def suspend(task: TaskRecord, now: datetime) -> TaskRecord:
    state = _require(task, Action.SUSPEND, CAPABILITY_STATES[Capability.SUSPENDABLE], now)

    if state is TaskState.STOPPED:
        assert task.end is not None
        task.suspend.extend([task.end, now])
        task.resume.append(now)
        task.end = None
    else:
        task.suspend.append(now)

    logger.info("Suspended task subject=%r from=%s at=%s", task.subject, state, format_instant(now))
    return task


def resume(task: TaskRecord, now: datetime) -> TaskRecord:
    state = _require(task, Action.RESUME, CAPABILITY_STATES[Capability.RESUMABLE], now)

    if state is TaskState.STOPPED:
        assert task.end is not None
        task.suspend.append(task.end)
        task.end = None
    task.resume.append(now)

    logger.info("Resumed task subject=%r from=%s at=%s", task.subject, state, format_instant(now))
    return task


def stop(task: TaskRecord, now: datetime) -> TaskRecord:
    state = _require(task, Action.STOP, CAPABILITY_STATES[Capability.STOPPABLE], now)

    if state is TaskState.SUSPENDED:
        task.resume.append(now)
    task.end = now

    logger.info("Stopped task subject=%r from=%s at=%s", task.subject, state, format_instant(now))
    return task


TRANSITIONS: dict[Action, Callable[[TaskRecord, datetime], TaskRecord]] = {
    Action.START: start,
    Action.SUSPEND: suspend,
    Action.RESUME: resume,
    Action.STOP: stop,
}


def advance(task: TaskRecord, action: Action | str, now: datetime) -> TaskRecord:
    """Apply one action by name ("start", "suspend", "resume", "stop")."""
    return TRANSITIONS[Action(action)](task, now)
