"""Jalali calendar system backed by the ``jdatetime`` library."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import jdatetime

from team_calendar.entities.jalali import JalaliDate, JalaliMonth
from team_calendar.use_cases.interfaces.calendar_system_interface import (
    CalendarSystemInterface,
    JalaliLike,
)
from team_calendar.utils.exceptions import InvalidDate


class JdatetimeCalendarSystem(CalendarSystemInterface):
    """Gregorian <-> Jalali conversion and Jalali month arithmetic.

    jdatetime implements the arithmetic Jalali calendar (33-year leap cycle),
    which agrees with the official calendar to the day for the years a team
    calendar deals with.
    """

    @staticmethod
    def _as_date(value: date) -> date:
        if isinstance(value, datetime):
            return value.date()
        if not isinstance(value, date):
            raise InvalidDate(f"Expected a Gregorian date, got {value!r}", value)
        return value

    @staticmethod
    def _as_jalali(value: JalaliLike) -> JalaliDate:
        if isinstance(value, JalaliDate):
            return value
        try:
            year, month, day = value
        except (TypeError, ValueError) as exc:
            raise InvalidDate(f"Expected a Jalali (year, month, day), got {value!r}", value) from exc
        return JalaliDate(year, month, day)

    def to_jalali(self, value: date) -> JalaliDate:
        value = self._as_date(value)
        try:
            converted = jdatetime.date.fromgregorian(date=value)
        except (ValueError, OverflowError) as exc:
            raise InvalidDate(f"{value.isoformat()} is outside the Jalali range", value) from exc
        return JalaliDate(converted.year, converted.month, converted.day)

    def to_gregorian(self, value: JalaliLike) -> date:
        jalali = self._as_jalali(value)
        limit = self.days_in_month(jalali.year, jalali.month)
        if jalali.day > limit:
            raise InvalidDate(
                f"{jalali} does not exist: month {jalali.month} of {jalali.year} has {limit} days",
                jalali,
            )
        try:
            return jdatetime.date(jalali.year, jalali.month, jalali.day).togregorian()
        except (ValueError, OverflowError) as exc:
            raise InvalidDate(f"Cannot convert Jalali date {jalali}: {exc}", jalali) from exc

    def is_leap(self, year: int) -> bool:
        try:
            return jdatetime.date(year, 1, 1).isleap()
        except (TypeError, ValueError) as exc:
            raise InvalidDate(f"Unsupported Jalali year {year!r}", year) from exc

    def days_in_month(self, year: int, month: int) -> int:
        JalaliMonth(year, month)  # bounds check
        if month <= 6:
            return 31
        if month <= 11:
            return 30
        return 30 if self.is_leap(year) else 29

    def start_of_month(self, month: JalaliMonth) -> date:
        return self.to_gregorian(JalaliDate(month.year, month.month, 1))

    def end_of_month(self, month: JalaliMonth) -> date:
        last = self.days_in_month(month.year, month.month)
        return self.to_gregorian(JalaliDate(month.year, month.month, last))

    def add_months(self, value: date, months: int) -> date:
        jalali = self.to_jalali(value)
        target = jalali.month_of().shift(months)
        day = min(jalali.day, self.days_in_month(target.year, target.month))
        return self.to_gregorian(JalaliDate(target.year, target.month, day))

    def add_days(self, value: date, days: int) -> date:
        value = self._as_date(value)
        try:
            return value + timedelta(days=days)
        except OverflowError as exc:
            raise InvalidDate(f"{value.isoformat()} + {days} days is out of range", value) from exc

    def is_same_month(self, first: date, second: date) -> bool:
        return self.month_of(first) == self.month_of(second)

    def weekday_index(self, value: date) -> int:
        # isoweekday() % 7 is the Sunday=0 numbering
        return (self._as_date(value).isoweekday() % 7 + 1) % 7

    def month_of(self, value: date) -> JalaliMonth:
        return self.to_jalali(value).month_of()

    def today(self) -> date:
        return date.today()
