# src/project_clock/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the engine's callers.

The accounting engine never reads a clock: every entry point takes an explicit `now`.
Command-layer helpers take a Clock instead, so tests can pass a fixed one.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """Source of the "current instant" for state advancements and open intervals."""
    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC, truncated to whole milliseconds (the timesheet resolution)."""

    def now(self) -> datetime:
        dt = datetime.now(timezone.utc)
        return dt.replace(microsecond=dt.microsecond // 1000 * 1000)
