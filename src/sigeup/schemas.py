from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, field_validator

from .calculations import parse_time


class WorkEntryIn(BaseModel):
    date: date
    start_time: str
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        # same rule as the HTML form: strict HH:MM, whitespace ignored
        parse_time(value)
        return value.strip()


class WorkEntryOut(BaseModel):
    date: date
    start_time: str
    end_time: str
    hours: Decimal


class WorkEntryList(BaseModel):
    items: list[WorkEntryOut]


class WageIn(BaseModel):
    hourly_wage: str


class PayrollSummaryOut(BaseModel):
    total_hours: Decimal
    total_days: int
    basic_pay: int
    weekly_holiday_pay: int
    total_pay: int
    eligible_weeks: int
    total_weeks: int
