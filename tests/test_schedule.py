from datetime import date
from decimal import Decimal

import pytest
from sigeup.exceptions import IncompleteEntryError, InvalidTimeError
from sigeup.schedule import Schedule

DAY = date(2025, 1, 6)


def test_add_entry_computes_hours():
    s = Schedule()
    wi = s.add_entry(DAY, "09:00", "18:00")
    assert wi.hours == Decimal("9.00")
    assert s.get(DAY) == wi
    assert len(s) == 1


def test_add_entry_night_shift():
    wi = Schedule().add_entry(DAY, "22:00", "06:00")
    assert wi.hours == Decimal("8.00")


def test_add_entry_overwrites_same_date():
    s = Schedule()
    s.add_entry(DAY, "09:00", "18:00")
    s.add_entry(DAY, "10:00", "12:00")
    assert len(s) == 1
    assert s.get(DAY).hours == Decimal("2.00")


@pytest.mark.parametrize(
    "day,start,end",
    [(None, "09:00", "18:00"), (DAY, "", "18:00"), (DAY, "09:00", None)],
)
def test_add_entry_requires_all_fields(day, start, end):
    s = Schedule()
    with pytest.raises(IncompleteEntryError):
        s.add_entry(day, start, end)
    assert len(s) == 0


def test_add_entry_rejects_malformed_time_without_change():
    s = Schedule()
    s.add_entry(DAY, "09:00", "18:00")
    with pytest.raises(InvalidTimeError):
        s.add_entry(DAY, "25:00", "18:00")
    assert s.get(DAY).hours == Decimal("9.00")


def test_remove_entry_is_idempotent():
    s = Schedule()
    s.add_entry(DAY, "09:00", "18:00")
    assert s.remove_entry(DAY) is True
    assert s.remove_entry(DAY) is False
    assert len(s) == 0


def test_iteration_sorted_by_date():
    s = Schedule()
    s.add_entry(date(2025, 1, 9), "09:00", "10:00")
    s.add_entry(date(2025, 1, 2), "09:00", "10:00")
    s.add_entry(date(2025, 1, 5), "09:00", "10:00")
    assert [wi.day for wi in s] == [date(2025, 1, 2), date(2025, 1, 5), date(2025, 1, 9)]
