from __future__ import annotations

from team_calendar.adapters.repositories.api.calendar_api_repository import CalendarApiRepository

__all__ = ["CalendarApiRepository"]
