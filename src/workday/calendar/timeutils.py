from __future__ import annotations

from typing import Tuple

HOURS_IN_DAY: int = 24
MINUTES_IN_HOUR: int = 60
MINUTES_IN_DAY: int = MINUTES_IN_HOUR * HOURS_IN_DAY

TimeOfDay = Tuple[int, int]


def convert_to_minutes(time: TimeOfDay) -> int:
    hours, minutes = time
    return hours * MINUTES_IN_HOUR + minutes


def add_minutes(left: int, right: int) -> TimeOfDay:
    # No wrap at 24h; callers own the day boundary.
    return divmod(left + right, MINUTES_IN_HOUR)


def subtract_minutes(larger: int, smaller: int) -> TimeOfDay:
    """Difference as (hours, minutes), borrowing one day if negative."""
    diff = larger - smaller
    if diff < 0:
        diff += MINUTES_IN_DAY
    return divmod(diff, MINUTES_IN_HOUR)


def add_time(left: TimeOfDay, right: TimeOfDay) -> TimeOfDay:
    return add_minutes(convert_to_minutes(left), convert_to_minutes(right))


def subtract_time(larger: TimeOfDay, smaller: TimeOfDay) -> TimeOfDay:
    return subtract_minutes(convert_to_minutes(larger), convert_to_minutes(smaller))
