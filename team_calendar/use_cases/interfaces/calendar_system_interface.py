"""Interface for Jalali/Gregorian calendar systems."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Tuple, Union

from team_calendar.entities.jalali import JalaliDate, JalaliMonth

JalaliLike = Union[JalaliDate, Tuple[int, int, int]]


class CalendarSystemInterface(ABC):
    """Explicit calendar handed to every component that does date math.

    Implementations are pure: no shared mutable state, the same input always
    gives the same output. Invalid input raises ``InvalidDate``.
    """

    @abstractmethod
    def to_jalali(self, value: date) -> JalaliDate:
        """Project a Gregorian day onto the Jalali calendar.

        Args:
            value: Gregorian calendar day

        Returns:
            The matching Jalali date
        """
        pass

    @abstractmethod
    def to_gregorian(self, value: JalaliLike) -> date:
        """Convert a Jalali day back to the Gregorian calendar.

        Args:
            value: Jalali date or ``(year, month, day)`` tuple

        Returns:
            The matching Gregorian day
        """
        pass

    @abstractmethod
    def is_leap(self, year: int) -> bool:
        pass

    @abstractmethod
    def days_in_month(self, year: int, month: int) -> int:
        pass

    @abstractmethod
    def start_of_month(self, month: JalaliMonth) -> date:
        pass

    @abstractmethod
    def end_of_month(self, month: JalaliMonth) -> date:
        pass

    @abstractmethod
    def add_months(self, value: date, months: int) -> date:
        """Move by whole Jalali months, clamping the day to the target month."""
        pass

    @abstractmethod
    def add_days(self, value: date, days: int) -> date:
        pass

    @abstractmethod
    def is_same_month(self, first: date, second: date) -> bool:
        """True when both days share the Jalali year and month."""
        pass

    @abstractmethod
    def weekday_index(self, value: date) -> int:
        """Iranian day of week: Saturday=0 ... Friday=6."""
        pass

    @abstractmethod
    def month_of(self, value: date) -> JalaliMonth:
        pass

    @abstractmethod
    def today(self) -> date:
        pass
