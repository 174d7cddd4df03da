from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from .calculations import (
    WEEKLY_HOLIDAY_MIN_HOURS,
    PayrollSummary,
    WorkInterval,
    calculate_total,
    parse_wage,
    shift_month,
)
from .exceptions import SigeupError
from .schedule import Schedule

logger = logging.getLogger(__name__)


class CalculatorSession:
    """
    State behind one calculator screen.

    Every mutating method ends with ``recompute()``, so ``summary`` always
    reflects the current schedule and wage. ``summary`` is None while the
    wage field is empty.
    """

    def __init__(
        self,
        *,
        hourly_wage: str = "",
        today: date | None = None,
        min_hours: Decimal = WEEKLY_HOLIDAY_MIN_HOURS,
    ) -> None:
        self.schedule = Schedule()
        self.hourly_wage = hourly_wage
        self.min_hours = min_hours

        self.month = (today or date.today()).replace(day=1)
        self.selected_date: date | None = None
        self.start_input = ""
        self.end_input = ""

        self.summary: PayrollSummary | None = None
        self.recompute()

    def recompute(self) -> PayrollSummary | None:
        if not self.hourly_wage:
            self.summary = None
            return None

        self.summary = calculate_total(
            self.schedule,
            parse_wage(self.hourly_wage),
            min_hours=self.min_hours,
        )
        return self.summary

    # -- inputs ------------------------------------------------------------

    def set_wage(self, value: str | None) -> PayrollSummary | None:
        self.hourly_wage = value or ""
        return self.recompute()

    def select_date(self, day: date) -> None:
        self.selected_date = day

    def set_times(self, start: str | None, end: str | None) -> None:
        self.start_input = start or ""
        self.end_input = end or ""

    # -- schedule ----------------------------------------------------------

    def add_entry(
        self,
        day: date | None = None,
        start: str | None = None,
        end: str | None = None,
    ) -> WorkInterval:
        """
        Register work for a day. Arguments left out fall back to the
        selected date and the pending time inputs.
        On failure nothing changes and the error propagates.
        """
        day = day if day is not None else self.selected_date
        start = start if start is not None else self.start_input
        end = end if end is not None else self.end_input

        try:
            wi = self.schedule.add_entry(day, start, end)
        except SigeupError as exc:
            logger.warning("Rejected work entry for %s: %s", day, exc.message)
            raise

        logger.info("Recorded %s %s-%s (%s h)", wi.day, start, end, wi.hours)
        self.start_input = ""
        self.end_input = ""
        self.recompute()
        return wi

    def remove_entry(self, day: date) -> bool:
        removed = self.schedule.remove_entry(day)
        if removed:
            logger.info("Removed work entry for %s", day)
        self.recompute()
        return removed

    # -- calendar ----------------------------------------------------------

    def prev_month(self) -> date:
        self.month = shift_month(self.month, -1)
        return self.month

    def next_month(self) -> date:
        self.month = shift_month(self.month, 1)
        return self.month
