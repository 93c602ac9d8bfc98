from __future__ import annotations

from team_calendar.settings.calendar_api_settings import CalendarApiSettings
from team_calendar.settings.calendar_view_settings import CalendarViewSettings

__all__ = ["CalendarApiSettings", "CalendarViewSettings"]
