from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, List, Optional, Tuple

from team_calendar.entities.constants import DAYS_PER_WEEK, GRID_SIZE
from team_calendar.entities.holiday import Holiday
from team_calendar.entities.jalali import JalaliDate, JalaliMonth
from team_calendar.entities.meeting import Meeting
from team_calendar.entities.task import Task


@dataclass(frozen=True, slots=True)
class MonthGrid:
    """Six Saturday-first weeks covering one Jalali month."""

    month: JalaliMonth
    days: Tuple[date, ...]

    def __post_init__(self) -> None:
        if len(self.days) != GRID_SIZE:
            raise ValueError(f"a month grid holds {GRID_SIZE} days, got {len(self.days)}")

    @property
    def start(self) -> date:
        return self.days[0]

    @property
    def end(self) -> date:
        return self.days[-1]

    def weeks(self) -> List[Tuple[date, ...]]:
        return [
            self.days[i : i + DAYS_PER_WEEK] for i in range(0, GRID_SIZE, DAYS_PER_WEEK)
        ]

    def __iter__(self) -> Iterator[date]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    def __getitem__(self, index: int) -> date:
        return self.days[index]


@dataclass(frozen=True, slots=True)
class CalendarCell:
    """Everything needed to draw one day of the month view."""

    date: date
    jalali: JalaliDate
    day_id: str
    in_month: bool
    is_today: bool
    is_friday: bool
    holiday: Optional[Holiday] = None
    tasks: Tuple[Task, ...] = ()
    meetings: Tuple[Meeting, ...] = ()

    @property
    def is_holiday(self) -> bool:
        return bool(self.holiday and self.holiday.holiday)

    @property
    def is_off_day(self) -> bool:
        return self.is_holiday or self.is_friday

    @property
    def tooltip(self) -> Optional[str]:
        # at most four occasions are listed under the cause
        if not self.holiday or not self.holiday.cause:
            return None
        lines = [self.holiday.cause]
        lines.extend(f"• {event}" for event in self.holiday.events[:4])
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class DayDetail:
    """Content of the day view opened by selecting a cell."""

    day_id: str
    jalali: JalaliDate
    gregorian: date
    tasks: Tuple[Task, ...] = field(default_factory=tuple)
    meetings: Tuple[Meeting, ...] = field(default_factory=tuple)
    holiday: Optional[Holiday] = None

    @property
    def title(self) -> str:
        return self.jalali.format_long()

    @property
    def is_empty(self) -> bool:
        return not self.tasks and not self.meetings
