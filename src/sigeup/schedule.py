from __future__ import annotations

from datetime import date
from typing import Iterator

from .calculations import WorkInterval, build_interval, parse_time
from .exceptions import IncompleteEntryError

MISSING_FIELDS_MESSAGE = "날짜와 시간을 모두 입력해주세요!"


class Schedule:
    """
    Work intervals keyed by calendar day, at most one per day.
    Iteration is sorted by date ascending.
    """

    def __init__(self) -> None:
        self._entries: dict[date, WorkInterval] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WorkInterval]:
        for day in sorted(self._entries):
            yield self._entries[day]

    def __contains__(self, day: object) -> bool:
        return day in self._entries

    def get(self, day: date) -> WorkInterval | None:
        return self._entries.get(day)

    def add_entry(
        self,
        day: date | None,
        start: str | None,
        end: str | None,
    ) -> WorkInterval:
        """Insert or overwrite the interval for ``day``."""
        if day is None or not start or not end:
            raise IncompleteEntryError(MISSING_FIELDS_MESSAGE)

        start_value = parse_time(start)
        end_value = parse_time(end)

        wi = build_interval(day, start_value, end_value)
        self._entries[day] = wi
        return wi

    def remove_entry(self, day: date) -> bool:
        if day not in self._entries:
            return False

        del self._entries[day]
        return True
