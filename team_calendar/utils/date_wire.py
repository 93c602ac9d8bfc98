"""Gregorian date handling at the network boundary.

Inside the package every calendar day is a ``datetime.date``. The API speaks
``YYYY-MM-DD`` strings, and the few places that need a timestamp anchor the
day at noon UTC so no timezone can roll it over to a neighbouring day.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time, timezone
from typing import Union

from team_calendar.utils.exceptions import InvalidDate

NOON = time(12, 0, tzinfo=timezone.utc)

_DATE_PREFIX = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})(?:$|[T ])")


def parse_wire_date(value: Union[str, date, datetime, None]) -> date:
    """Turn a value received from the API into a date-only value.

    ISO timestamps keep the calendar day they were written with; no timezone
    conversion is applied.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDate(f"Unsupported Gregorian date value: {value!r}", value)

    match = _DATE_PREFIX.match(value)
    if not match:
        raise InvalidDate(f"Unsupported Gregorian date string: {value!r}", value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDate(f"Invalid Gregorian date {value!r}: {exc}", value) from exc


def format_wire_date(value: date) -> str:
    if isinstance(value, datetime):
        value = value.date()
    if not isinstance(value, date):
        raise InvalidDate(f"Expected a date, got {value!r}", value)
    return value.isoformat()


def anchor_noon_utc(value: date) -> datetime:
    """Timestamp for a calendar day, pinned at 12:00 UTC."""
    return datetime.combine(parse_wire_date(value), NOON)
