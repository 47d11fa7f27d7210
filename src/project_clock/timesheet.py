# src/project_clock/timesheet.py

"""
Timesheet documents <-> engine objects.

The document is the parsed JSON structure of a timesheet file:

    {
      "projectName": "...",
      "projectSettings": {"timeParams": {"hoursPerDay": 8, ...}},   # optional
      "tasks": [{"subject": "...", "begin": "2024-01-01T00:00:00.000Z", ...}]
    }

Reading and writing the file itself belongs to the caller. Absent optional fields are
omitted keys, never null.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .core.errors import TimesheetFormatError, short_subject
from .core.instants import format_instant, parse_instant
from .duration import TimeParams
from .tasks.task_models import TaskRecord

logger = logging.getLogger(__name__)

__all__ = [
    "Timesheet",
    "format_instant",
    "parse_instant",
    "parse_timesheet",
    "resolve_time_params",
    "task_from_dict",
    "task_to_dict",
    "timesheet_to_dict",
]


@dataclass(slots=True)
class Timesheet:
    project_name: str
    tasks: list[TaskRecord] = field(default_factory=list)
    time_params: TimeParams | None = None


def _instant(value: Any, field_name: str, subject: str) -> datetime:
    try:
        return parse_instant(value)
    except (TypeError, ValueError) as e:
        raise TimesheetFormatError(
            f"invalid task '{short_subject(subject)}'; '{field_name}' is not a valid timestamp ({value!r})"
        ) from e


def _instant_list(value: Any, field_name: str, subject: str) -> list[datetime]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TimesheetFormatError(
            f"invalid task '{short_subject(subject)}'; {field_name} field is not an array"
        )
    return [_instant(v, field_name, subject) for v in value]


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    v = data.get(key)
    return None if v is None else str(v)


def task_from_dict(data: Mapping[str, Any]) -> TaskRecord:
    if not isinstance(data, Mapping):
        raise TimesheetFormatError(f"task is not an object ({data!r})")

    subject = data.get("subject")
    if not isinstance(subject, str) or not subject.strip():
        raise TimesheetFormatError("task without a subject")

    begin = data.get("begin")
    end = data.get("end")

    return TaskRecord(
        subject=subject,
        description=_optional_str(data, "description"),
        notes=_optional_str(data, "notes"),
        begin=None if begin is None else _instant(begin, "begin", subject),
        suspend=_instant_list(data.get("suspend"), "suspend", subject),
        resume=_instant_list(data.get("resume"), "resume", subject),
        end=None if end is None else _instant(end, "end", subject),
    )


def task_to_dict(task: TaskRecord) -> dict[str, Any]:
    out: dict[str, Any] = {"subject": task.subject}
    if task.description is not None:
        out["description"] = task.description
    if task.notes is not None:
        out["notes"] = task.notes
    if task.begin is not None:
        out["begin"] = format_instant(task.begin)
    if task.suspend:
        out["suspend"] = [format_instant(t) for t in task.suspend]
    if task.resume:
        out["resume"] = [format_instant(t) for t in task.resume]
    if task.end is not None:
        out["end"] = format_instant(task.end)
    return out


def _time_params(data: Mapping[str, Any]) -> TimeParams | None:
    project_settings = data.get("projectSettings")
    if project_settings is None:
        return None
    if not isinstance(project_settings, Mapping):
        raise TimesheetFormatError("projectSettings is not an object")

    raw = project_settings.get("timeParams")
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise TimesheetFormatError("projectSettings.timeParams is not an object")
    try:
        return TimeParams.from_dict(raw)
    except ValueError as e:
        raise TimesheetFormatError(f"invalid projectSettings.timeParams; {e}") from e


def parse_timesheet(data: Any) -> Timesheet:
    """Validate the document shape and build a Timesheet. Raises TimesheetFormatError."""
    if not isinstance(data, Mapping):
        raise TimesheetFormatError("not a timesheet object")

    project_name = data.get("projectName")
    if not isinstance(project_name, str) or not project_name:
        raise TimesheetFormatError("timesheet without projectName")

    raw_tasks = data.get("tasks", [])
    if not isinstance(raw_tasks, list):
        raise TimesheetFormatError("tasks field is not an array")

    timesheet = Timesheet(
        project_name=project_name,
        tasks=[task_from_dict(t) for t in raw_tasks],
        time_params=_time_params(data),
    )
    logger.debug("Parsed timesheet project=%r tasks=%d", project_name, len(timesheet.tasks))
    return timesheet


def timesheet_to_dict(timesheet: Timesheet) -> dict[str, Any]:
    out: dict[str, Any] = {"projectName": timesheet.project_name}
    if timesheet.time_params is not None:
        out["projectSettings"] = {"timeParams": timesheet.time_params.to_dict()}
    out["tasks"] = [task_to_dict(t) for t in timesheet.tasks]
    return out


def resolve_time_params(timesheet: Timesheet, settings=None) -> TimeParams:
    """The timesheet's own time parameters, else the configured default preset."""
    if timesheet.time_params is not None:
        return timesheet.time_params
    if settings is None:
        from .config import get_settings

        settings = get_settings()
    return settings.default_time_params
