from __future__ import annotations

from dataclasses import dataclass

from team_calendar.entities.constants import PERSIAN_MONTHS
from team_calendar.utils.exceptions import InvalidDate


def _check_month(month: int) -> None:
    if not isinstance(month, int) or isinstance(month, bool):
        raise InvalidDate(f"Jalali month must be an integer, got {month!r}", month)
    if not 1 <= month <= 12:
        raise InvalidDate(f"Jalali month must be in 1..12, got {month}", month)


@dataclass(frozen=True, order=True, slots=True)
class JalaliDate:
    """A Jalali (year, month, day) triple with no time-of-day component.

    Only the coarse bounds are checked here; whether the day exists in that
    particular month is decided by the calendar system.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not isinstance(self.year, int) or isinstance(self.year, bool):
            raise InvalidDate(f"Jalali year must be an integer, got {self.year!r}", self.year)
        _check_month(self.month)
        if not isinstance(self.day, int) or isinstance(self.day, bool):
            raise InvalidDate(f"Jalali day must be an integer, got {self.day!r}", self.day)
        if not 1 <= self.day <= 31:
            raise InvalidDate(f"Jalali day must be in 1..31, got {self.day}", self.day)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def format_long(self) -> str:
        """``"1 مهر 1404"`` style label used by day headers."""
        return f"{self.day} {PERSIAN_MONTHS[self.month - 1]} {self.year}"

    def month_of(self) -> "JalaliMonth":
        return JalaliMonth(self.year, self.month)

    def __str__(self) -> str:
        return self.isoformat("/")


@dataclass(frozen=True, order=True, slots=True)
class JalaliMonth:
    """The calendar page cursor: one Jalali month."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not isinstance(self.year, int) or isinstance(self.year, bool):
            raise InvalidDate(f"Jalali year must be an integer, got {self.year!r}", self.year)
        _check_month(self.month)

    def shift(self, months: int) -> "JalaliMonth":
        """Return the month ``months`` steps away (negative moves back)."""
        index = self.year * 12 + (self.month - 1) + months
        year, month0 = divmod(index, 12)
        return JalaliMonth(year, month0 + 1)

    def contains(self, value: JalaliDate) -> bool:
        return value.year == self.year and value.month == self.month

    def first_day(self) -> JalaliDate:
        return JalaliDate(self.year, self.month, 1)

    @property
    def name(self) -> str:
        return PERSIAN_MONTHS[self.month - 1]

    def title(self) -> str:
        return f"{self.name} {self.year}"

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}"
