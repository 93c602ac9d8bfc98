from __future__ import annotations

import datetime as dt
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_serializer
from pydantic import field_validator
from pydantic import model_validator
from pydantic.alias_generators import to_camel

from team_calendar.entities.constants import MAX_REMINDER_MINUTES

_CLOCK = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Meeting(BaseModel):
    """A meeting as returned by ``GET /api/meetings``."""

    id: Optional[int] = None
    title: str = ""
    # Raw Gregorian ``YYYY-MM-DD``; parsed when the meeting is indexed by day
    date: Optional[str] = None
    all_day: bool = False
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    content: Optional[str] = None
    outcome: Optional[str] = None
    reminder_minutes_before: Optional[List[int]] = None
    alarm_enabled: Optional[bool] = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    @field_validator("date", mode="before")
    @classmethod
    def _stringify_date(cls, value: Any) -> Optional[str]:
        if isinstance(value, dt.date):
            return value.isoformat()
        return value


def normalize_reminders(minutes: List[int]) -> List[int]:
    """Keep positive reminders up to a year ahead, unique, latest first."""
    kept = set()
    for value in minutes:
        if value is None or value <= 0 or value > MAX_REMINDER_MINUTES:
            continue
        kept.add(int(value))
    return sorted(kept, reverse=True)


class MeetingDraft(BaseModel):
    """Body of ``POST /api/meetings`` for a meeting created from a calendar day."""

    title: str
    date: dt.date = Field(description="Gregorian day of the meeting")
    all_day: bool = False
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    content: Optional[str] = None
    reminder_minutes_before: List[int] = Field(default_factory=list)
    alarm_enabled: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("meeting title is required")
        return value

    @field_validator("start_time", "end_time", "location", "content", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator("reminder_minutes_before")
    @classmethod
    def _normalize_reminders(cls, value: List[int]) -> List[int]:
        return normalize_reminders(value)

    @model_validator(mode="after")
    def _check_times(self) -> "MeetingDraft":
        if self.all_day:
            self.start_time = None
            self.end_time = None
            return self
        if not self.start_time:
            raise ValueError("a timed meeting needs a start time")
        for clock in (self.start_time, self.end_time):
            if clock is not None and not _CLOCK.match(clock):
                raise ValueError(f"time must be HH:mm, got {clock!r}")
        return self

    @field_serializer("date")
    def _serialize_date(self, value: dt.date) -> str:
        return value.isoformat()

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
