from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, time, timedelta
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Iterable

from .exceptions import InvalidTimeError

WEEKLY_HOLIDAY_MIN_HOURS = Decimal("15")
MINUTES_PER_DAY = 24 * 60
# Larger hourly wages are treated as unparsable
MAX_WAGE_DIGITS = 15

_HOURS_QUANTUM = Decimal("0.01")
_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


@dataclass(frozen=True)
class WorkInterval:
    day: date
    start_time: time
    end_time: time
    hours: Decimal


@dataclass(frozen=True)
class WeekBucket:
    week_start: date  # Sunday
    total_hours: Decimal
    day_count: int


@dataclass(frozen=True)
class PayrollSummary:
    total_hours: Decimal
    total_days: int
    basic_pay: int
    weekly_holiday_pay: int
    total_pay: int
    eligible_weeks: int
    total_weeks: int


# ---------------------------------------------------------------------------
# Parsing / rounding
# ---------------------------------------------------------------------------

def parse_time(value: str) -> time:
    """Parse a strict 24-hour ``HH:MM`` string."""
    match = _TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidTimeError(f"Invalid time {value!r} (expected HH:MM)")
    return time(int(match.group(1)), int(match.group(2)))


def parse_wage(value: str | None) -> Decimal:
    """
    Lenient wage parsing for a free-text field.
    Anything that is not a finite, non-negative number of at most
    MAX_WAGE_DIGITS integer digits counts as 0.
    """
    if value is None:
        return Decimal(0)
    try:
        wage = Decimal(value.strip().replace(",", ""))
    except InvalidOperation:
        return Decimal(0)
    if not wage.is_finite() or wage < 0:
        return Decimal(0)
    if wage and wage.adjusted() >= MAX_WAGE_DIGITS:
        return Decimal(0)
    return wage


def round_half_up(value: Decimal) -> int:
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 2)
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------

def hours_between_times(start: time, end: time) -> Decimal:
    """
    Hours between two wall-clock times, 2 decimals.
    An end earlier than the start is a shift crossing midnight.
    """
    start_minutes = start.hour * 60 + start.minute
    end_minutes = end.hour * 60 + end.minute
    if end_minutes < start_minutes:
        end_minutes += MINUTES_PER_DAY
    hours = Decimal(end_minutes - start_minutes) / Decimal(60)
    return hours.quantize(_HOURS_QUANTUM, rounding=ROUND_HALF_UP)


def build_interval(day: date, start: time, end: time) -> WorkInterval:
    return WorkInterval(
        day=day,
        start_time=start,
        end_time=end,
        hours=hours_between_times(start, end),
    )


# ---------------------------------------------------------------------------
# Weeks
# ---------------------------------------------------------------------------

def week_start(day: date) -> date:
    """Sunday on or before ``day``."""
    days_since_sunday = (day.weekday() + 1) % 7
    return day - timedelta(days=days_since_sunday)


def bucket_weeks(intervals: Iterable[WorkInterval]) -> list[WeekBucket]:
    hours_by_week: dict[date, Decimal] = {}
    days_by_week: dict[date, set[date]] = {}
    for wi in intervals:
        key = week_start(wi.day)
        hours_by_week[key] = hours_by_week.get(key, Decimal(0)) + wi.hours
        days_by_week.setdefault(key, set()).add(wi.day)

    return [
        WeekBucket(
            week_start=key,
            total_hours=hours_by_week[key],
            day_count=len(days_by_week[key]),
        )
        for key in sorted(hours_by_week)
    ]


def is_eligible_week(
    bucket: WeekBucket,
    *,
    min_hours: Decimal = WEEKLY_HOLIDAY_MIN_HOURS,
) -> bool:
    return bucket.total_hours >= min_hours and bucket.day_count > 0


# ---------------------------------------------------------------------------
# Payroll
# ---------------------------------------------------------------------------

def calculate_total(
    intervals: Iterable[WorkInterval],
    wage: Decimal,
    *,
    min_hours: Decimal = WEEKLY_HOLIDAY_MIN_HOURS,
) -> PayrollSummary:
    """
    Payroll summary for a set of work intervals at an hourly wage.

    - basic pay: total hours * wage
    - weekly holiday pay (주휴수당): for every Sunday-Saturday week with at
      least ``min_hours`` worked, one day of average pay
      (week hours / days worked * wage)

    Basic pay and holiday pay are each rounded to the unit, then summed.
    """
    if wage < 0:
        raise ValueError(f"wage must be >= 0 (got {wage})")

    intervals = list(intervals)
    total_hours = sum((wi.hours for wi in intervals), Decimal("0.00"))
    total_days = len({wi.day for wi in intervals})
    basic_pay = round_half_up(total_hours * wage)

    buckets = bucket_weeks(intervals)
    holiday_pay = Decimal(0)
    eligible_weeks = 0
    for bucket in buckets:
        if is_eligible_week(bucket, min_hours=min_hours):
            eligible_weeks += 1
            daily_average = bucket.total_hours / bucket.day_count
            holiday_pay += daily_average * wage

    weekly_holiday_pay = round_half_up(holiday_pay)

    return PayrollSummary(
        total_hours=total_hours,
        total_days=total_days,
        basic_pay=basic_pay,
        weekly_holiday_pay=weekly_holiday_pay,
        total_pay=basic_pay + weekly_holiday_pay,
        eligible_weeks=eligible_weeks,
        total_weeks=len(buckets),
    )


# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

def shift_month(cursor: date, months: int) -> date:
    """First day of the month ``months`` away from ``cursor``."""
    index = cursor.year * 12 + (cursor.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_grid(cursor: date) -> tuple[int, list[date]]:
    """
    Leading blank cells (Sunday = 0) and the dates of ``cursor``'s month.
    """
    first = cursor.replace(day=1)
    days_in_month = calendar.monthrange(first.year, first.month)[1]
    leading = (first.weekday() + 1) % 7
    return leading, [first.replace(day=d) for d in range(1, days_in_month + 1)]
