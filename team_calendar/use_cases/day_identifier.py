"""Compact ``YYYYMMDD`` keys for Jalali calendar days.

The year is written unpadded. Lexicographic order of identifiers matches
chronological order only while every year has the same number of digits,
which holds for four-digit Jalali years.
"""
from __future__ import annotations

from datetime import date
from typing import Tuple

from team_calendar.entities.jalali import JalaliDate, JalaliMonth
from team_calendar.use_cases.interfaces.calendar_system_interface import (
    CalendarSystemInterface,
)
from team_calendar.utils.exceptions import InvalidDate


def jalali_day_identifier(value: JalaliDate) -> str:
    return f"{value.year}{value.month:02d}{value.day:02d}"


def to_day_identifier(value: date, calendar: CalendarSystemInterface) -> str:
    """Identifier of the Jalali day a Gregorian date falls on."""
    return jalali_day_identifier(calendar.to_jalali(value))


def parse_day_identifier(day_id: str) -> JalaliDate:
    """Split an identifier back into its Jalali year, month and day."""
    if not isinstance(day_id, str) or len(day_id) < 5 or not day_id.isdigit():
        raise InvalidDate(f"Malformed day identifier: {day_id!r}", day_id)
    return JalaliDate(int(day_id[:-4]), int(day_id[-4:-2]), int(day_id[-2:]))


def day_identifier_range(
    month: JalaliMonth, calendar: CalendarSystemInterface
) -> Tuple[str, str]:
    """Identifiers of the first and last day of a Jalali month."""
    last = calendar.days_in_month(month.year, month.month)
    return (
        jalali_day_identifier(JalaliDate(month.year, month.month, 1)),
        jalali_day_identifier(JalaliDate(month.year, month.month, last)),
    )
