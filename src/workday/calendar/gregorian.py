from __future__ import annotations

import logging
from typing import Iterable

from .base import Calendar
from .date import Date

logger = logging.getLogger(__name__)

_SUNDAY: int = 0
_SATURDAY: int = 6

_DAYS_IN_MONTH: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class GregorianCalendar(Calendar):
    """
    Civil calendar with a Saturday/Sunday weekend, a registry of one-time
    holidays keyed by ``YYYY-MM-DD`` and a registry of ``(month, day)``
    holidays that recur every year.
    """

    def __init__(
        self,
        holidays: Iterable[Date] | None = None,
        recurring_holidays: Iterable[Date] | None = None,
    ) -> None:
        self._holidays: set[str] = set()
        self._recurring_holidays: set[tuple[int, int]] = set()
        if holidays:
            self.add_holidays(holidays)
        if recurring_holidays:
            self.add_recurring_holidays(recurring_holidays)

    # ── rules ────────────────────────────────────────────────────────────

    @staticmethod
    def is_leap_year(year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def days_in_month(self, year: int, month: int) -> int:
        if month == 2 and self.is_leap_year(year):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    def is_valid_date(self, date: Date) -> bool:
        if date.year < 0 or not 1 <= date.month <= 12:
            return False
        if not 1 <= date.day <= self.days_in_month(date.year, date.month):
            return False
        return 0 <= date.hour < 24 and 0 <= date.minute < 60

    # ── holiday management ───────────────────────────────────────────────

    def set_holiday(self, date: Date) -> None:
        if not self.is_valid_date(date):
            logger.debug("Ignoring invalid holiday %s", date)
            return
        self._holidays.add(date.get_date())

    def set_recurring_holiday(self, date: Date) -> None:
        if not self.is_valid_date(date):
            logger.debug("Ignoring invalid recurring holiday %s", date)
            return
        self._recurring_holidays.add((date.month, date.day))

    def add_holidays(self, dates: Iterable[Date]) -> None:
        for d in dates:
            self.set_holiday(d)

    def add_recurring_holidays(self, dates: Iterable[Date]) -> None:
        for d in dates:
            self.set_recurring_holiday(d)

    def is_holiday(self, date: Date) -> bool:
        if not self.is_valid_date(date):
            return False
        if date.day_of_week() in (_SUNDAY, _SATURDAY):
            return True
        if date.get_date() in self._holidays:
            return True
        return (date.month, date.day) in self._recurring_holidays

    # ── stepping ─────────────────────────────────────────────────────────

    def add_day(self, date: Date) -> None:
        year, month, day = date.year, date.month, date.day + 1
        if day > self.days_in_month(year, month):
            day = 1
            month += 1
            if month > 12:
                month = 1
                year += 1
        date.set_date(year, month, day, date.hour, date.minute)

    def remove_day(self, date: Date) -> None:
        year, month, day = date.year, date.month, date.day - 1
        if day < 1:
            month -= 1
            if month < 1:
                month = 12
                year -= 1
            day = self.days_in_month(year, month)
        date.set_date(year, month, day, date.hour, date.minute)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def holidays(self) -> frozenset[str]:
        return frozenset(self._holidays)

    @property
    def recurring_holidays(self) -> frozenset[tuple[int, int]]:
        return frozenset(self._recurring_holidays)

    def __repr__(self) -> str:
        return (
            f"GregorianCalendar(holidays={len(self._holidays)}, "
            f"recurring_holidays={len(self._recurring_holidays)})"
        )
