# src/project_clock/tasks/accounting.py

from __future__ import annotations

"""
Time accounting.

Active time of a task is the sum of its work intervals:
  begin -> suspend[0], resume[0] -> suspend[1], ..., resume[last] -> end (or now)

Suspended time (suspend[i] -> resume[i]) is never counted. `now` closes the open
interval of a started/resumed task and is always passed in by the caller.
"""

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime

from ..core.errors import ChronologyViolationError
from ..core.instants import milliseconds_between
from .lifecycle import read_lifecycle
from .task_models import (
    Cycle,
    LifecycleState,
    Resumed,
    Started,
    Stopped,
    Suspended,
    TaskRecord,
    TaskStatusInfo,
    Unstarted,
)

logger = logging.getLogger(__name__)


def work_intervals(lifecycle: LifecycleState, now: datetime) -> Iterator[tuple[datetime, datetime]]:
    """Yield (start, stop) of every interval of active work, in recorded order."""
    cycles: tuple[Cycle, ...] = ()
    match lifecycle:
        case Unstarted():
            return
        case Started(begin=begin):
            closing = now
        case Resumed(begin=begin, cycles=cycles):
            closing = now
        case Suspended(begin=begin, cycles=cycles, suspended_at=closing):
            pass
        case Stopped(begin=begin, cycles=cycles, end=closing):
            pass

    start = begin
    for cycle in cycles:
        yield start, cycle.suspended_at
        start = cycle.resumed_at
    yield start, closing


def compute_status(task: TaskRecord, now: datetime) -> TaskStatusInfo:
    """
    Status and active time (milliseconds) of one task.

    Raises an InvalidTaskError subclass if the task's history is malformed,
    including ChronologyViolationError for any interval that ends before it starts.
    """
    lifecycle = read_lifecycle(task)

    time_spent = 0
    for start, stop in work_intervals(lifecycle, now):
        if start > stop:
            raise ChronologyViolationError(task.subject, start, stop)
        time_spent += milliseconds_between(start, stop)

    return TaskStatusInfo(task=task.subject, status=lifecycle.state, time_spent=time_spent)


def compute_all(tasks: Iterable[TaskRecord], now: datetime) -> list[TaskStatusInfo]:
    """
    compute_status() for every task, in order.

    The first malformed task aborts the whole batch: one corrupt record means the
    timesheet cannot be reported on.
    """
    out = [compute_status(task, now) for task in tasks]
    logger.debug("Computed statuses tasks=%d now=%s", len(out), now)
    return out


def total_time_spent(statuses: Iterable[TaskStatusInfo]) -> int:
    return sum(s.time_spent for s in statuses)
