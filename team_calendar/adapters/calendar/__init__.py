from __future__ import annotations

from team_calendar.adapters.calendar.jdatetime_calendar_system import JdatetimeCalendarSystem

__all__ = ["JdatetimeCalendarSystem"]
