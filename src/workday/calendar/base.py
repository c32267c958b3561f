from __future__ import annotations

from abc import ABC, abstractmethod

from .date import Date


class Calendar(ABC):
    """
    Capability set the workday engine relies on.

    Concrete calendars own their holiday registries and know how to validate
    a Date and step it one day in either direction.  ``add_day`` and
    ``remove_day`` mutate their argument in place and assume it is valid.
    """

    @abstractmethod
    def set_holiday(self, date: Date) -> None: ...

    @abstractmethod
    def set_recurring_holiday(self, date: Date) -> None: ...

    @abstractmethod
    def add_day(self, date: Date) -> None: ...

    @abstractmethod
    def remove_day(self, date: Date) -> None: ...

    @abstractmethod
    def is_holiday(self, date: Date) -> bool: ...

    @abstractmethod
    def is_valid_date(self, date: Date) -> bool: ...

    def is_workday(self, date: Date) -> bool:
        return self.is_valid_date(date) and not self.is_holiday(date)
