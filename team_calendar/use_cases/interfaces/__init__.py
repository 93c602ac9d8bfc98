from __future__ import annotations

from team_calendar.use_cases.interfaces.calendar_repository_interface import (
    CalendarRepositoryInterface,
)
from team_calendar.use_cases.interfaces.calendar_system_interface import (
    CalendarSystemInterface,
)

__all__ = [
    "CalendarRepositoryInterface",
    "CalendarSystemInterface",
]
