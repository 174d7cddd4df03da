from datetime import date
from decimal import Decimal

import pytest
from sigeup.exceptions import IncompleteEntryError
from sigeup.session import CalculatorSession

MONDAY = date(2025, 1, 6)


def make_session(wage: str = "10000") -> CalculatorSession:
    return CalculatorSession(hourly_wage=wage, today=date(2025, 1, 15))


def test_initial_state():
    s = make_session()
    assert s.month == date(2025, 1, 1)
    assert s.selected_date is None
    assert s.summary is not None
    assert s.summary.total_hours == 0
    assert s.summary.total_pay == 0


def test_empty_wage_hides_summary():
    s = make_session(wage="")
    assert s.summary is None
    s.set_wage("10000")
    assert s.summary is not None
    s.set_wage("")
    assert s.summary is None


def test_blank_wage_shows_zero_pay_summary():
    s = make_session(wage="  ")
    assert s.summary is not None
    s.add_entry(MONDAY, "09:00", "18:00")
    assert s.summary.total_hours == Decimal("9.00")
    assert s.summary.total_pay == 0


def test_oversized_wage_counts_as_zero():
    s = make_session()
    s.set_wage("1e30")
    s.add_entry(MONDAY, "09:00", "18:00")
    assert s.summary.basic_pay == 0
    assert s.remove_entry(MONDAY) is True
    assert s.summary.total_days == 0


def test_unparsable_wage_counts_as_zero():
    s = make_session(wage="abc")
    s.add_entry(MONDAY, "09:00", "18:00")
    assert s.summary.total_hours == Decimal("9.00")
    assert s.summary.basic_pay == 0


def test_add_entry_uses_pending_inputs_and_clears_them():
    s = make_session()
    s.select_date(MONDAY)
    s.set_times("09:00", "18:00")
    wi = s.add_entry()
    assert wi.day == MONDAY
    assert s.start_input == ""
    assert s.end_input == ""
    assert s.summary.basic_pay == 90000
    assert s.summary.total_weeks == 1


def test_failed_add_keeps_state(caplog):
    s = make_session()
    s.set_times("09:00", "")
    with caplog.at_level("WARNING"):
        with pytest.raises(IncompleteEntryError):
            s.add_entry()
    assert len(s.schedule) == 0
    assert s.start_input == "09:00"
    assert "Rejected work entry" in caplog.text


def test_summary_follows_mutations():
    s = make_session()
    for i in range(5):
        s.add_entry(date(2025, 1, 6 + i), "09:00", "15:00")
    assert s.summary.total_pay == 360000
    assert s.summary.eligible_weeks == 1

    s.remove_entry(date(2025, 1, 10))
    assert s.summary.total_hours == Decimal("24.00")
    assert s.summary.weekly_holiday_pay == 60000
    assert s.summary.basic_pay == 240000

    s.set_wage("5000")
    assert s.summary.total_pay == 150000


def test_remove_missing_entry_is_silent():
    s = make_session()
    assert s.remove_entry(MONDAY) is False
    assert s.summary.total_pay == 0


def test_month_navigation():
    s = make_session()
    assert s.prev_month() == date(2024, 12, 1)
    assert s.next_month() == date(2025, 1, 1)
    assert s.next_month() == date(2025, 2, 1)
    assert s.summary.total_pay == 0
