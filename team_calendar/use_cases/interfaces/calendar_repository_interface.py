"""Interface for the remote team API used by the calendar page."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Any, Dict, List, Optional

from team_calendar.entities.holiday import Holiday
from team_calendar.entities.meeting import Meeting, MeetingDraft
from team_calendar.entities.task import Task, TaskDraft


class CalendarRepositoryInterface(ABC):
    """Interface for the tasks, meetings and holidays endpoints."""

    @abstractmethod
    async def get_tasks(self) -> List[Task]:
        """Get all tasks visible to the current user.

        Returns:
            List of tasks
        """
        pass

    @abstractmethod
    async def get_meetings(self, start: date, end: date) -> List[Meeting]:
        """Get the meetings of a Gregorian date range.

        Args:
            start: First Gregorian day, inclusive
            end: Last Gregorian day, inclusive

        Returns:
            List of meetings
        """
        pass

    @abstractmethod
    async def get_holidays(self, start_id: str, end_id: str) -> List[Holiday]:
        """Get holidays of a Jalali day-identifier range.

        Args:
            start_id: Identifier of the first day
            end_id: Identifier of the last day

        Returns:
            List of holiday entries
        """
        pass

    @abstractmethod
    async def create_task(self, draft: TaskDraft) -> Task:
        pass

    @abstractmethod
    async def create_meeting(self, draft: MeetingDraft) -> Meeting:
        pass

    @abstractmethod
    async def login(self, email: str, password: str) -> Optional[Dict[str, Any]]:
        """Open a session and return the signed-in user, if any."""
        pass

    @abstractmethod
    async def me(self) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    async def logout(self) -> None:
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying HTTP resources."""
        pass
