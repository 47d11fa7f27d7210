# src/project_clock/duration.py

"""
Duration decomposition.

A millisecond duration is split into years, months, weeks, days, hours, minutes,
seconds and milliseconds under a rate configuration (TimeParams). Two presets:
- CALENDAR_TIME_PARAMS: 24 h days, 7 d weeks, mean Gregorian months and years
- WORK_TIME_PARAMS: 8 h days, 5 d weeks, 20 d months, 260 d years

Arithmetic is done on Fractions so that e.g. exactly one work day never comes
out as 0 days and 7.999... hours. Float rates are read by their decimal form,
so one mean Gregorian year is exactly 1 year under the calendar preset.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from fractions import Fraction
from typing import Any

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

# The mean length of a Gregorian year is 365.2425 days.
GREGORIAN_YEAR_DAYS = 365.2425
GREGORIAN_MONTH_DAYS = 30.436875  # 365.2425 / 12


@dataclass(frozen=True, slots=True)
class TimeParams:
    """Rates used to convert hours into days, weeks, months and years (all > 0)."""

    hours_per_day: float
    days_per_week: float
    days_per_month: float
    days_per_year: float

    def __post_init__(self) -> None:
        for name in ("hours_per_day", "days_per_week", "days_per_month", "days_per_year"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ValueError(f"{name} must be a positive number (got {value!r})")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TimeParams:
        """Build from the timesheet form ({"hoursPerDay": 8, "daysPerWeek": 5, ...})."""
        try:
            return cls(
                hours_per_day=data["hoursPerDay"],
                days_per_week=data["daysPerWeek"],
                days_per_month=data["daysPerMonth"],
                days_per_year=data["daysPerYear"],
            )
        except KeyError as e:
            raise ValueError(f"missing time parameter {e.args[0]!r}") from e

    def to_dict(self) -> dict[str, float]:
        return {
            "hoursPerDay": self.hours_per_day,
            "daysPerWeek": self.days_per_week,
            "daysPerMonth": self.days_per_month,
            "daysPerYear": self.days_per_year,
        }


CALENDAR_TIME_PARAMS = TimeParams(
    hours_per_day=24,
    days_per_week=7,
    days_per_month=GREGORIAN_MONTH_DAYS,
    days_per_year=GREGORIAN_YEAR_DAYS,
)

WORK_TIME_PARAMS = TimeParams(
    hours_per_day=8,
    days_per_week=5,
    days_per_month=20,
    days_per_year=260,
)

TIME_PRESETS: dict[str, TimeParams] = {
    "calendar": CALENDAR_TIME_PARAMS,
    "work": WORK_TIME_PARAMS,
}


def _num(value: Fraction) -> int | float:
    return int(value) if value.denominator == 1 else float(value)


def _rate(value: int | float) -> Fraction:
    """Exact rational for a rate as written (365.2425 -> 146097/400, not its binary float)."""
    return Fraction(str(value)) if isinstance(value, float) else Fraction(value)


_TERMS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")

_ABBREVIATIONS = {
    "years": "y",
    "months": "mo",
    "weeks": "wk",
    "days": "d",
    "hours": "h",
    "hours_total": "h",
    "minutes": "min",
    "seconds": "s",
}


def _join(parts: list[str]) -> str:
    if len(parts) < 2:
        return "".join(parts)
    return f"{', '.join(parts[:-1])} and {parts[-1]}"


def _plural(term: str, number: int) -> str:
    return f"1 {term[:-1]}" if number == 1 else f"{number} {term}"


@dataclass(frozen=True, slots=True)
class TimePeriod:
    """
    A decomposed duration.

    The plain fields (years ... milliseconds) are the parts left after subtracting the
    larger units. The *_total fields hold the whole duration expressed in one unit.
    """

    years: int
    months: int
    weeks: int
    days: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int | float

    years_total: float
    months_total: float
    weeks_total: float
    days_total: float
    hours_total: float
    minutes_total: float
    seconds_total: float
    milliseconds_total: int | float

    def _non_zero(self, include_seconds: bool) -> list[str]:
        terms = _TERMS if include_seconds else _TERMS[:-1]
        return [t for t in terms if getattr(self, t) != 0]

    def narrow_str(self, include_seconds: bool = False) -> str:
        """As little space as possible: "1d 2h 5min"."""
        return " ".join(f"{getattr(self, t)}{_ABBREVIATIONS[t]}" for t in self._non_zero(include_seconds))

    def short_str(self, include_seconds: bool = False) -> str:
        """Abbreviated units: "1 d, 2 h and 5 min"."""
        return _join([f"{getattr(self, t)} {_ABBREVIATIONS[t]}" for t in self._non_zero(include_seconds)])

    def long_str(self, include_seconds: bool = False) -> str:
        """Full words: "1 day, 2 hours and 5 minutes"."""
        return _join([_plural(t, getattr(self, t)) for t in self._non_zero(include_seconds)])

    def digital_str(self, include_seconds: bool = False) -> str:
        """Every part, zero parts included, like a digital clock: "01:02:03:04:05:06"."""
        terms = _TERMS if include_seconds else _TERMS[:-1]
        return ":".join(f"{getattr(self, t):02d}" for t in terms)

    def hours_and_minutes(self, include_seconds: bool = False) -> str:
        """Whole hours and the remaining minutes: "26h 5min"."""
        parts = [f"{math.floor(self.hours_total)}h"] if self.hours_total >= 1 else []
        if self.minutes:
            parts.append(f"{self.minutes}min")
        if include_seconds and self.seconds:
            parts.append(f"{self.seconds}s")
        return " ".join(parts)


def decompose(milliseconds: int | float, params: TimeParams = WORK_TIME_PARAMS) -> TimePeriod:
    """
    Split a duration into calendar-like parts under `params`.

    Preconditions (not checked): milliseconds >= 0, all rates > 0.
    """
    ms = Fraction(milliseconds)
    hours_per_day = _rate(params.hours_per_day)
    days_per_week = _rate(params.days_per_week)
    days_per_month = _rate(params.days_per_month)
    days_per_year = _rate(params.days_per_year)

    hours_total = ms / MS_PER_HOUR
    days_total = hours_total / hours_per_day

    years = math.floor(days_total / days_per_year)
    rest = days_total - years * days_per_year
    months = math.floor(rest / days_per_month)
    rest -= months * days_per_month
    weeks = math.floor(rest / days_per_week)
    rest -= weeks * days_per_week
    days = math.floor(rest)

    whole_days = years * days_per_year + months * days_per_month + weeks * days_per_week + days
    hours = math.floor(hours_total - whole_days * hours_per_day)

    rest_ms = ms - (whole_days * hours_per_day + hours) * MS_PER_HOUR
    minutes = math.floor(rest_ms / MS_PER_MINUTE)
    rest_ms -= minutes * MS_PER_MINUTE
    seconds = math.floor(rest_ms / MS_PER_SECOND)
    rest_ms -= seconds * MS_PER_SECOND

    return TimePeriod(
        years=years,
        months=months,
        weeks=weeks,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=_num(rest_ms),
        years_total=float(days_total / days_per_year),
        months_total=float(days_total / days_per_month),
        weeks_total=float(days_total / days_per_week),
        days_total=float(days_total),
        hours_total=float(hours_total),
        minutes_total=float(ms / MS_PER_MINUTE),
        seconds_total=float(ms / MS_PER_SECOND),
        milliseconds_total=_num(ms),
    )
