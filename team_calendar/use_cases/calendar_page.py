"""State and orchestration of the month calendar page."""

from __future__ import annotations

import asyncio
import re
from datetime import date
from typing import Any, Awaitable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from team_calendar import LOGGER
from team_calendar.entities.calendar_view import CalendarCell, DayDetail, MonthGrid
from team_calendar.entities.constants import FRIDAY_INDEX, TaskPriority
from team_calendar.entities.holiday import Holiday
from team_calendar.entities.jalali import JalaliDate, JalaliMonth
from team_calendar.entities.meeting import Meeting, MeetingDraft
from team_calendar.entities.task import AssigneeRef, Task, TaskDraft
from team_calendar.use_cases.day_buckets import DayBucketIndex, index_meetings, index_tasks
from team_calendar.use_cases.day_identifier import (
    day_identifier_range,
    jalali_day_identifier,
    parse_day_identifier,
)
from team_calendar.use_cases.interfaces.calendar_repository_interface import (
    CalendarRepositoryInterface,
)
from team_calendar.use_cases.interfaces.calendar_system_interface import (
    CalendarSystemInterface,
)
from team_calendar.use_cases.month_grid import MonthGridBuilder
from team_calendar.utils.exceptions import FetchFailure, InvalidDate

_MANUAL_DATE = re.compile(r"^\s*(\d{1,4})\s*[/\-.]\s*(\d{1,2})\s*[/\-.]\s*(\d{1,2})\s*$")

FETCH_ERROR_MESSAGES = {
    "tasks": "Tasks could not be loaded.",
    "meetings": "Meetings could not be loaded.",
    "holidays": "Holidays could not be loaded.",
}


class ManualDateResult(NamedTuple):
    """Outcome of a typed-in Jalali date: a Gregorian day or a message."""

    value: Optional[date]
    error: Optional[str] = None


class CalendarPageController:
    """Owns the displayed month and the data fetched for it.

    Collections are only ever replaced as a whole; grids and day indexes are
    derived from them and rebuilt after every replacement.
    """

    def __init__(
        self,
        calendar: CalendarSystemInterface,
        repository: CalendarRepositoryInterface,
        cursor: Optional[JalaliMonth] = None,
        today: Optional[date] = None,
    ):
        """Initialize the controller.

        Args:
            calendar: Calendar system used for every date computation
            repository: Client of the team API
            cursor: Month to show first, defaults to the current month
            today: Fixed "today", defaults to the calendar's clock
        """
        self.calendar = calendar
        self.repository = repository
        self._today = today
        self._cursor = cursor or calendar.month_of(self.today)
        self._grid_builder = MonthGridBuilder(calendar)

        self._tasks: Tuple[Task, ...] = ()
        self._meetings: Tuple[Meeting, ...] = ()
        self._holidays: Tuple[Holiday, ...] = ()
        self._derived: Dict[str, Any] = {}

        # bumped on every fetch; responses of an older generation are dropped
        self._generation = 0
        self.loading = False
        self.errors: Dict[str, str] = {}

    # ─────────── state ───────────
    @property
    def today(self) -> date:
        return self._today or self.calendar.today()

    @property
    def cursor(self) -> JalaliMonth:
        return self._cursor

    @cursor.setter
    def cursor(self, month: JalaliMonth) -> None:
        self._cursor = month
        self._derived.pop("grid", None)

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self._tasks

    @tasks.setter
    def tasks(self, tasks: Iterable[Task]) -> None:
        self._tasks = tuple(tasks)
        self._derived.pop("task_buckets", None)

    @property
    def meetings(self) -> Tuple[Meeting, ...]:
        return self._meetings

    @meetings.setter
    def meetings(self, meetings: Iterable[Meeting]) -> None:
        self._meetings = tuple(meetings)
        self._derived.pop("meeting_buckets", None)

    @property
    def holidays(self) -> Tuple[Holiday, ...]:
        return self._holidays

    @holidays.setter
    def holidays(self, holidays: Iterable[Holiday]) -> None:
        self._holidays = tuple(holidays)
        self._derived.pop("holiday_map", None)

    # ─────────── derived views ───────────
    def _cached(self, key: str, factory):
        if key not in self._derived:
            self._derived[key] = factory()
        return self._derived[key]

    @property
    def grid(self) -> MonthGrid:
        return self._cached("grid", lambda: self._grid_builder.build(self._cursor))

    @property
    def task_buckets(self) -> DayBucketIndex:
        return self._cached("task_buckets", lambda: index_tasks(self._tasks, self.calendar))

    @property
    def meeting_buckets(self) -> DayBucketIndex:
        return self._cached(
            "meeting_buckets", lambda: index_meetings(self._meetings, self.calendar)
        )

    @property
    def holiday_map(self) -> Dict[str, Holiday]:
        return self._cached("holiday_map", lambda: {h.day_id: h for h in self._holidays})

    @property
    def start_id(self) -> str:
        return day_identifier_range(self._cursor, self.calendar)[0]

    @property
    def end_id(self) -> str:
        return day_identifier_range(self._cursor, self.calendar)[1]

    @property
    def title(self) -> str:
        return self._cursor.title()

    @property
    def skipped_items(self) -> int:
        """Tasks and meetings left off the grid because of unreadable dates."""
        return self.task_buckets.skipped + self.meeting_buckets.skipped

    # ─────────── navigation ───────────
    async def go_to(self, month: JalaliMonth) -> None:
        LOGGER.info(f"Showing {month}")
        self.cursor = month
        await self.refresh()

    async def next_month(self) -> None:
        await self.go_to(self._cursor.shift(1))

    async def previous_month(self) -> None:
        await self.go_to(self._cursor.shift(-1))

    async def go_to_today(self) -> None:
        await self.go_to(self.calendar.month_of(self.today))

    # ─────────── fetching ───────────
    async def refresh(self) -> None:
        """Fetch tasks, meetings and holidays of the current month concurrently."""
        self._generation += 1
        generation = self._generation
        month = self._cursor
        start_id, end_id = day_identifier_range(month, self.calendar)
        start = self.calendar.start_of_month(month)
        end = self.calendar.end_of_month(month)

        self.loading = True
        self.errors = {}
        await asyncio.gather(
            self._apply("tasks", self.repository.get_tasks(), generation),
            self._apply("meetings", self.repository.get_meetings(start, end), generation),
            self._apply("holidays", self.repository.get_holidays(start_id, end_id), generation),
        )
        if generation == self._generation:
            self.loading = False

    async def _apply(self, category: str, request: Awaitable[List[Any]], generation: int) -> None:
        try:
            items = await request
        except FetchFailure as exc:
            LOGGER.warning(f"Loading {category} failed: {exc}")
            items, error = [], FETCH_ERROR_MESSAGES[category]
        except Exception as exc:
            LOGGER.opt(exception=exc).error(f"Unexpected error while loading {category}")
            items, error = [], FETCH_ERROR_MESSAGES[category]
        else:
            error = None

        if generation != self._generation:
            LOGGER.debug(f"Discarding stale {category} response of generation {generation}")
            return
        if error:
            self.errors[category] = error
        setattr(self, category, items or [])

    # ─────────── rendering ───────────
    def cells(self) -> List[CalendarCell]:
        today = self.today
        task_buckets = self.task_buckets
        meeting_buckets = self.meeting_buckets
        holiday_map = self.holiday_map

        cells = []
        for day in self.grid:
            jalali = self.calendar.to_jalali(day)
            day_id = jalali_day_identifier(jalali)
            cells.append(
                CalendarCell(
                    date=day,
                    jalali=jalali,
                    day_id=day_id,
                    in_month=self._cursor.contains(jalali),
                    is_today=day == today,
                    is_friday=self.calendar.weekday_index(day) == FRIDAY_INDEX,
                    holiday=holiday_map.get(day_id),
                    tasks=task_buckets.get_bucket(day_id),
                    meetings=meeting_buckets.get_bucket(day_id),
                )
            )
        return cells

    def select_day(self, day_id: str) -> DayDetail:
        """Day view for one cell; raises ``InvalidDate`` for a bad identifier."""
        jalali = parse_day_identifier(day_id)
        gregorian = self.calendar.to_gregorian(jalali)
        return DayDetail(
            day_id=day_id,
            jalali=jalali,
            gregorian=gregorian,
            tasks=self.task_buckets.get_bucket(day_id),
            meetings=self.meeting_buckets.get_bucket(day_id),
            holiday=self.holiday_map.get(day_id),
        )

    # ─────────── creating items ───────────
    async def create_task(
        self,
        day_id: str,
        title: str,
        priority: TaskPriority = TaskPriority.MEDIUM,
        assigned_to_id: Optional[int] = None,
        follow_up_at: Optional[str] = None,
    ) -> Task:
        """Create a task on a selected day; the server gets the Gregorian date."""
        detail = self.select_day(day_id)
        draft = TaskDraft(
            title=title,
            date=detail.gregorian,
            priority=priority,
            assigned_to=AssigneeRef(id=assigned_to_id),
            follow_up_enabled=follow_up_at is not None,
            follow_up_at=follow_up_at,
        )
        created = await self.repository.create_task(draft)
        self.tasks = self._tasks + (created,)
        return created

    async def create_meeting(self, day_id: str, title: str, **fields: Any) -> Meeting:
        """Create a meeting on a selected day; extra fields go to ``MeetingDraft``."""
        detail = self.select_day(day_id)
        draft = MeetingDraft(title=title, date=detail.gregorian, **fields)
        created = await self.repository.create_meeting(draft)
        self.meetings = self._meetings + (created,)
        return created

    def parse_manual_date(self, text: str) -> ManualDateResult:
        """Read a typed Jalali date such as ``1404/07/01``.

        Bad input never raises; the message is returned for display instead.
        """
        match = _MANUAL_DATE.match(text or "")
        if not match:
            return ManualDateResult(None, f"'{text}' is not a date; use YYYY/MM/DD.")
        try:
            jalali = JalaliDate(*(int(part) for part in match.groups()))
            return ManualDateResult(self.calendar.to_gregorian(jalali))
        except InvalidDate as exc:
            LOGGER.debug(f"Rejected manual date {text!r}: {exc}")
            return ManualDateResult(None, f"'{text}' is not a valid Jalali date.")
