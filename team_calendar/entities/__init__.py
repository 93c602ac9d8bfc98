from __future__ import annotations

from team_calendar.entities.holiday import Holiday
from team_calendar.entities.jalali import JalaliDate, JalaliMonth
from team_calendar.entities.meeting import Meeting, MeetingDraft
from team_calendar.entities.task import Task, TaskDraft

__all__ = [
    "Holiday",
    "JalaliDate",
    "JalaliMonth",
    "Meeting",
    "MeetingDraft",
    "Task",
    "TaskDraft",
]
