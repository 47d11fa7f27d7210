# src/project_clock/core/instants.py

"""ISO-8601 instants as stored in timesheets ("2024-01-01T00:00:00.000Z")."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

ONE_MILLISECOND = timedelta(milliseconds=1)


def parse_instant(text: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    Raises ValueError for anything that is not a valid timestamp.
    Naive timestamps are taken to be UTC.
    """
    if not isinstance(text, str) or not text.strip():
        raise ValueError(f"not a valid timestamp ({text!r})")
    dt = datetime.fromisoformat(text.strip())
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_instant(dt: datetime) -> str:
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return f"{dt:%Y-%m-%dT%H:%M:%S}.{dt.microsecond // 1000:03d}Z"


def milliseconds_between(start: datetime, end: datetime) -> int:
    """Whole milliseconds from start to end (negative if end is earlier)."""
    return (end - start) // ONE_MILLISECOND
