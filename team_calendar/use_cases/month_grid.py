from __future__ import annotations

from team_calendar.entities.calendar_view import MonthGrid
from team_calendar.entities.constants import GRID_SIZE
from team_calendar.entities.jalali import JalaliMonth
from team_calendar.use_cases.interfaces.calendar_system_interface import (
    CalendarSystemInterface,
)


class MonthGridBuilder:
    """Lays out a Jalali month on six Saturday-first weeks."""

    def __init__(self, calendar: CalendarSystemInterface):
        self.calendar = calendar

    def build(self, month: JalaliMonth) -> MonthGrid:
        month_start = self.calendar.start_of_month(month)
        offset = self.calendar.weekday_index(month_start)
        grid_start = self.calendar.add_days(month_start, -offset)
        # offset <= 6 and a month has <= 31 days, so 42 cells always suffice
        days = tuple(self.calendar.add_days(grid_start, i) for i in range(GRID_SIZE))
        return MonthGrid(month=month, days=days)


def build_grid(month: JalaliMonth, calendar: CalendarSystemInterface) -> MonthGrid:
    return MonthGridBuilder(calendar).build(month)
