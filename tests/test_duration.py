# tests/test_duration.py

from __future__ import annotations

import pytest

from project_clock.duration import (
    CALENDAR_TIME_PARAMS,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    WORK_TIME_PARAMS,
    TimeParams,
    TimePeriod,
    decompose,
)


def _reconstruct(p: TimePeriod, params: TimeParams) -> float:
    days = (
        p.years * params.days_per_year
        + p.months * params.days_per_month
        + p.weeks * params.days_per_week
        + p.days
    )
    hours = days * params.hours_per_day + p.hours
    return hours * MS_PER_HOUR + p.minutes * MS_PER_MINUTE + p.seconds * 1000 + p.milliseconds


def test_one_work_day() -> None:
    p = decompose(28_800_000, WORK_TIME_PARAMS)
    assert p.days_total == 1
    assert p.hours_total == 8
    assert (p.years, p.months, p.weeks, p.days, p.hours, p.minutes) == (0, 0, 0, 1, 0, 0)


def test_one_calendar_day_is_a_third_of_work_days() -> None:
    p = decompose(24 * MS_PER_HOUR, WORK_TIME_PARAMS)
    assert p.days_total == 3
    assert p.days == 3
    assert p.hours == 0

    c = decompose(24 * MS_PER_HOUR, CALENDAR_TIME_PARAMS)
    assert c.days_total == 1
    assert (c.days, c.hours) == (1, 0)


def test_work_calendar_breakdown() -> None:
    # 1 year + 1 month + 1 week + 1 day + 1 h + 1 min + 1 s + 1 ms of working time
    days = 260 + 20 + 5 + 1
    ms = (days * 8 + 1) * MS_PER_HOUR + MS_PER_MINUTE + 1000 + 1
    p = decompose(ms, WORK_TIME_PARAMS)
    assert (p.years, p.months, p.weeks, p.days, p.hours, p.minutes, p.seconds, p.milliseconds) == (
        1, 1, 1, 1, 1, 1, 1, 1,
    )
    assert p.milliseconds_total == ms
    assert p.weeks_total == pytest.approx(days / 5 + 1 / 40 + (MS_PER_MINUTE + 1001) / (40 * MS_PER_HOUR))


def test_totals_keep_whole_magnitude() -> None:
    ms = 90 * MS_PER_MINUTE + 30_500
    p = decompose(ms, CALENDAR_TIME_PARAMS)
    assert (p.hours, p.minutes, p.seconds, p.milliseconds) == (1, 30, 30, 500)
    assert p.minutes_total == pytest.approx(90.508333, rel=1e-6)
    assert p.seconds_total == pytest.approx(5430.5)
    assert p.hours_total == pytest.approx(ms / MS_PER_HOUR)
    assert p.months_total == pytest.approx(p.days_total / (365.2425 / 12))
    assert p.years_total == pytest.approx(p.days_total / 365.2425)


def test_zero() -> None:
    p = decompose(0)
    assert p.milliseconds_total == 0
    assert p.narrow_str(include_seconds=True) == ""
    assert p.long_str() == ""


@pytest.mark.parametrize("params", [WORK_TIME_PARAMS, CALENDAR_TIME_PARAMS, TimeParams(7.5, 4, 17.5, 210)])
@pytest.mark.parametrize(
    "ms",
    [1, 999, 59_999, 28_800_000, 86_399_999, 123_456_789, 31_556_952_000, 98_765_432_109],
)
def test_decomposition_reconstructs_input(params, ms) -> None:
    p = decompose(ms, params)
    assert _reconstruct(p, params) == pytest.approx(ms, abs=1)
    assert 0 <= p.minutes < 60
    assert 0 <= p.seconds < 60
    assert 0 <= p.milliseconds < 1000
    assert 0 <= p.hours < params.hours_per_day
    assert 0 <= p.days < params.days_per_week


def test_work_year_boundary() -> None:
    p = decompose(260 * 8 * MS_PER_HOUR, WORK_TIME_PARAMS)
    assert p.years == 1
    assert p.years_total == 1
    assert (p.months, p.weeks, p.days, p.hours, p.minutes, p.seconds) == (0, 0, 0, 0, 0, 0)

    p = decompose(260 * 8 * MS_PER_HOUR - 1, WORK_TIME_PARAMS)
    assert p.years == 0
    assert (p.months, p.weeks, p.days, p.hours, p.minutes, p.seconds, p.milliseconds) == (
        12, 3, 4, 7, 59, 59, 999,
    )


CALENDAR_DAY_MS = 24 * MS_PER_HOUR
CALENDAR_WEEK_MS = 7 * CALENDAR_DAY_MS
CALENDAR_MONTH_MS = 2_629_746_000
CALENDAR_YEAR_MS = 31_556_952_000


def test_calendar_year_boundary() -> None:
    p = decompose(CALENDAR_YEAR_MS, CALENDAR_TIME_PARAMS)
    assert p.years == 1
    assert p.years_total == 1
    assert (p.months, p.weeks, p.days, p.hours, p.minutes, p.seconds, p.milliseconds) == (0, 0, 0, 0, 0, 0, 0)
    assert p.long_str() == "1 year"


@pytest.mark.parametrize("months", range(1, 12))
def test_calendar_month_boundaries(months) -> None:
    p = decompose(months * CALENDAR_MONTH_MS, CALENDAR_TIME_PARAMS)
    assert p.months_total == pytest.approx(months)
    assert (p.years, p.months) == (0, months)
    assert (p.weeks, p.days, p.hours, p.minutes, p.seconds, p.milliseconds) == (0, 0, 0, 0, 0, 0)


def test_twelve_calendar_months_are_a_year() -> None:
    p = decompose(12 * CALENDAR_MONTH_MS, CALENDAR_TIME_PARAMS)
    assert (p.years, p.months, p.days, p.hours) == (1, 0, 0, 0)


def test_calendar_weeks_and_days() -> None:
    p = decompose((9 * 24 + 5) * MS_PER_HOUR, CALENDAR_TIME_PARAMS)
    assert (p.years, p.months, p.weeks, p.days, p.hours) == (0, 0, 1, 2, 5)
    assert p.weeks_total == pytest.approx((9 + 5 / 24) / 7)


# ---- display helpers ----


def test_display_strings() -> None:
    ms = ((5 + 2) * 8 + 3) * MS_PER_HOUR + 5 * MS_PER_MINUTE + 7_000
    p = decompose(ms, WORK_TIME_PARAMS)
    assert (p.weeks, p.days, p.hours, p.minutes, p.seconds) == (1, 2, 3, 5, 7)

    assert p.narrow_str() == "1wk 2d 3h 5min"
    assert p.narrow_str(include_seconds=True) == "1wk 2d 3h 5min 7s"
    assert p.short_str() == "1 wk, 2 d, 3 h and 5 min"
    assert p.long_str() == "1 week, 2 days, 3 hours and 5 minutes"
    assert p.hours_and_minutes() == "59h 5min"
    assert p.hours_and_minutes(include_seconds=True) == "59h 5min 7s"


def test_calendar_display_strings() -> None:
    ms = (
        CALENDAR_YEAR_MS
        + 2 * CALENDAR_MONTH_MS
        + 3 * CALENDAR_WEEK_MS
        + 4 * CALENDAR_DAY_MS
        + 5 * MS_PER_HOUR
        + 6 * MS_PER_MINUTE
        + 7_008
    )
    p = decompose(ms, CALENDAR_TIME_PARAMS)
    assert p.milliseconds == 8
    assert p.narrow_str(include_seconds=True) == "1y 2mo 3wk 4d 5h 6min 7s"
    assert p.digital_str() == "01:02:03:04:05:06"
    assert p.digital_str(include_seconds=True) == "01:02:03:04:05:06:07"


def test_digital_str_keeps_zero_parts() -> None:
    p = decompose(2 * MS_PER_HOUR + 30 * MS_PER_MINUTE, WORK_TIME_PARAMS)
    assert p.digital_str() == "00:00:00:00:02:30"
    assert p.digital_str(include_seconds=True) == "00:00:00:00:02:30:00"


def test_display_single_part() -> None:
    p = decompose(MS_PER_MINUTE, WORK_TIME_PARAMS)
    assert p.long_str() == "1 minute"
    assert p.short_str() == "1 min"
    assert p.hours_and_minutes() == "1min"


# ---- TimeParams ----


def test_time_params_from_dict_round_trip() -> None:
    data = {"hoursPerDay": 7.5, "daysPerWeek": 4, "daysPerMonth": 16, "daysPerYear": 200}
    params = TimeParams.from_dict(data)
    assert params == TimeParams(7.5, 4, 16, 200)
    assert params.to_dict() == data


@pytest.mark.parametrize(
    "data",
    [
        {"hoursPerDay": 0, "daysPerWeek": 5, "daysPerMonth": 20, "daysPerYear": 260},
        {"hoursPerDay": 8, "daysPerWeek": -5, "daysPerMonth": 20, "daysPerYear": 260},
        {"hoursPerDay": "8", "daysPerWeek": 5, "daysPerMonth": 20, "daysPerYear": 260},
        {"hoursPerDay": 8, "daysPerWeek": 5, "daysPerMonth": 20},
    ],
)
def test_time_params_rejects_bad_rates(data) -> None:
    with pytest.raises(ValueError):
        TimeParams.from_dict(data)


def test_presets() -> None:
    assert WORK_TIME_PARAMS == TimeParams(8, 5, 20, 260)
    assert CALENDAR_TIME_PARAMS.hours_per_day == 24
    assert CALENDAR_TIME_PARAMS.days_per_month == pytest.approx(30.44, abs=0.01)
    assert CALENDAR_TIME_PARAMS.days_per_year == 365.2425
