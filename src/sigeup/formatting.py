from __future__ import annotations

from datetime import date, time
from decimal import Decimal

WEEKDAY_LABELS = ("일", "월", "화", "수", "목", "금", "토")


def format_amount(value: int, suffix: str = "원") -> str:
    return f"{value:,}{suffix}"


def format_hours(value: Decimal) -> str:
    return f"{value:.2f}"


def time_to_str(value: time | None) -> str:
    if not value:
        return ""
    return value.strftime("%H:%M")


def month_title(cursor: date) -> str:
    return f"{cursor.year}년 {cursor.month}월"


def day_title(day: date) -> str:
    return f"{day.month}월 {day.day}일"
