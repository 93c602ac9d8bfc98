"""Grouping of tasks and meetings by Jalali day identifier."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple, TypeVar

from team_calendar import LOGGER
from team_calendar.entities.meeting import Meeting
from team_calendar.entities.task import Task
from team_calendar.use_cases.day_identifier import to_day_identifier
from team_calendar.use_cases.interfaces.calendar_system_interface import (
    CalendarSystemInterface,
)
from team_calendar.utils.date_wire import parse_wire_date
from team_calendar.utils.exceptions import InvalidDate

T = TypeVar("T")

# Items with no usable id go after every real id
_NO_ID = float("inf")


class DayBucketIndex(Mapping):
    """Read-only mapping of day identifier to the ordered items of that day.

    Attributes:
        skipped: Number of input items dropped because their date was unusable
    """

    def __init__(self, buckets: Dict[str, Tuple[Any, ...]], skipped: int = 0):
        self._buckets = buckets
        self.skipped = skipped

    def __getitem__(self, day_id: str) -> Tuple[Any, ...]:
        return self._buckets[day_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def get_bucket(self, day_id: str) -> Tuple[Any, ...]:
        return self._buckets.get(day_id, ())

    @property
    def item_count(self) -> int:
        return sum(len(items) for items in self._buckets.values())

    def __repr__(self) -> str:
        return f"<DayBucketIndex {len(self._buckets)} days, {self.skipped} skipped>"


def index_by_day(
    items: Iterable[T],
    date_accessor: Callable[[T], date],
    calendar: CalendarSystemInterface,
    sort_key: Callable[[T], Any],
) -> DayBucketIndex:
    """Build a fresh day index; the input is never mutated.

    Items whose date cannot be read are skipped and counted rather than
    aborting the whole index.
    """
    grouped: Dict[str, List[T]] = {}
    skipped = 0
    for item in items:
        try:
            day_id = to_day_identifier(date_accessor(item), calendar)
        except (InvalidDate, ValueError, TypeError) as exc:
            skipped += 1
            LOGGER.debug(f"Skipping item without a usable date: {item!r} ({exc})")
            continue
        grouped.setdefault(day_id, []).append(item)

    if skipped:
        LOGGER.info(f"Day index built with {skipped} item(s) skipped")

    return DayBucketIndex(
        {day_id: tuple(sorted(bucket, key=sort_key)) for day_id, bucket in grouped.items()},
        skipped=skipped,
    )


def _id_key(value: Any) -> float:
    return value if isinstance(value, int) else _NO_ID


def task_sort_key(task: Task) -> Tuple[int, float]:
    """HIGH, MEDIUM, LOW, then tasks without a priority; ties by id."""
    return task.priority_rank, _id_key(task.id)


def meeting_sort_key(meeting: Meeting) -> Tuple[int, int, str, float]:
    """All-day meetings first, then by start time; ties by id."""
    if meeting.all_day:
        return 0, 0, "", _id_key(meeting.id)
    if not meeting.start_time:
        return 1, 1, "", _id_key(meeting.id)
    return 1, 0, meeting.start_time, _id_key(meeting.id)


def task_date(task: Task) -> date:
    return parse_wire_date(task.date)


def meeting_date(meeting: Meeting) -> date:
    return parse_wire_date(meeting.date)


def index_tasks(tasks: Iterable[Task], calendar: CalendarSystemInterface) -> DayBucketIndex:
    return index_by_day(tasks, task_date, calendar, task_sort_key)


def index_meetings(
    meetings: Iterable[Meeting], calendar: CalendarSystemInterface
) -> DayBucketIndex:
    return index_by_day(meetings, meeting_date, calendar, meeting_sort_key)
