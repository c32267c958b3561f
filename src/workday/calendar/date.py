from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass

from ._exceptions import InvalidDateError
from .timeutils import TimeOfDay

# Sakamoto, Lachman, Keith and Craver month offsets.
_DOW_OFFSETS: tuple[int, ...] = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

_INVALID: int = -1

_DATE_RE = re.compile(r"^(\d{1,4})-(\d{1,2})-(\d{1,2})$")
_DATE_TIME_RE = re.compile(r"^(\d{1,4})-(\d{1,2})-(\d{1,2})[ T](\d{1,2}):(\d{1,2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{1,2})$")


def _tdiv(a: int, b: int) -> int:
    q = abs(a) // b
    return -q if a < 0 else q


@dataclass(order=True)
class Date:
    """
    Mutable year/month/day/hour/minute value.

    Comparison is lexicographic over the five fields.  No validation happens
    here; whether a value is a real date is a Calendar concern.
    """

    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def invalid(cls) -> Date:
        return cls(_INVALID, _INVALID, _INVALID, _INVALID, _INVALID)

    @classmethod
    def parse(cls, text: str) -> Date:
        """
        Accepts ``YYYY-MM-DD``, ``YYYY-MM-DD HH:MM`` or ``HH:MM``.  A
        time-only string yields a zero date part.
        """
        s = (text or "").strip()
        m = _DATE_TIME_RE.match(s)
        if m:
            return cls(*(int(g) for g in m.groups()))
        m = _DATE_RE.match(s)
        if m:
            return cls(*(int(g) for g in m.groups()))
        m = _TIME_RE.match(s)
        if m:
            h, mi = (int(g) for g in m.groups())
            return cls(0, 0, 0, h, mi)
        raise InvalidDateError(f"Cannot parse date {text!r}.")

    @classmethod
    def from_datetime(cls, value: dt.datetime | dt.date) -> Date:
        if isinstance(value, dt.datetime):
            return cls(value.year, value.month, value.day, value.hour, value.minute)
        return cls(value.year, value.month, value.day)

    def to_datetime(self) -> dt.datetime:
        try:
            return dt.datetime(self.year, self.month, self.day, self.hour, self.minute)
        except ValueError as exc:
            raise InvalidDateError(f"{self} is not representable: {exc}") from exc

    def generate_invalid_date(self) -> Date:
        return Date.invalid()

    def set_date(self, year: int, month: int, day: int, hour: int, minute: int) -> None:
        self.year = year
        self.month = month
        self.day = day
        self.hour = hour
        self.minute = minute

    def set_time(self, time: TimeOfDay) -> None:
        self.hour, self.minute = time

    def copy(self) -> Date:
        return Date(self.year, self.month, self.day, self.hour, self.minute)

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def is_invalid(self) -> bool:
        return self == Date.invalid()

    def get_time(self) -> TimeOfDay:
        return self.hour, self.minute

    def get_date(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def get_date_and_time(self) -> str:
        return f"{self.get_date()} {self.hour:02d}:{self.minute:02d}"

    def day_of_week(self) -> int:
        """0 = Sunday .. 6 = Saturday."""
        y = self.year - 1 if self.month < 3 else self.year
        total = (
            y + _tdiv(y, 4) - _tdiv(y, 100) + _tdiv(y, 400)
            + _DOW_OFFSETS[self.month - 1] + self.day
        )
        return total % 7

    def __str__(self) -> str:
        return self.get_date_and_time()
