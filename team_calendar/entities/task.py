from __future__ import annotations

import datetime as dt
from typing import Any, Dict, Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_serializer
from pydantic import field_validator
from pydantic.alias_generators import to_camel

from team_calendar.entities.constants import MISSING_PRIORITY_RANK
from team_calendar.entities.constants import PRIORITY_RANK
from team_calendar.entities.constants import TaskPriority
from team_calendar.entities.constants import TaskStatus


def _lenient_priority(value: Any) -> Optional[TaskPriority]:
    if value is None or isinstance(value, TaskPriority):
        return value
    try:
        return TaskPriority(str(value).strip().upper())
    except ValueError:
        return None


class Task(BaseModel):
    """A task as returned by ``GET /api/tasks``."""

    id: int
    title: str = ""
    status: TaskStatus = TaskStatus.TODO
    priority: Optional[TaskPriority] = None
    # Raw Gregorian ``YYYY-MM-DD``; parsed when the task is indexed by day
    date: Optional[str] = None
    assigned_to_id: Optional[int] = None
    assigned_to_name: Optional[str] = None
    created_by_id: Optional[int] = None
    created_by_name: Optional[str] = None
    follow_up_enabled: Optional[bool] = None
    follow_up_at: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    @field_validator("priority", mode="before")
    @classmethod
    def _normalize_priority(cls, value: Any) -> Optional[TaskPriority]:
        return _lenient_priority(value)

    @field_validator("date", mode="before")
    @classmethod
    def _stringify_date(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, dt.date):
            return value.isoformat()
        return str(value)

    @property
    def priority_rank(self) -> int:
        if self.priority is None:
            return MISSING_PRIORITY_RANK
        return PRIORITY_RANK[self.priority]


class AssigneeRef(BaseModel):
    id: Optional[int] = None


class TaskDraft(BaseModel):
    """Body of ``POST /api/tasks`` for a task created from a calendar day."""

    title: str
    date: dt.date = Field(description="Gregorian day of the task")
    priority: TaskPriority = TaskPriority.MEDIUM
    assigned_to: AssigneeRef = Field(default_factory=AssigneeRef)
    follow_up_enabled: bool = False
    follow_up_at: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("title")
    @classmethod
    def _title_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("task title is required")
        return value

    @field_serializer("date")
    def _serialize_date(self, value: dt.date) -> str:
        return value.isoformat()

    def to_payload(self) -> Dict[str, Any]:
        """JSON body in the API's camelCase shape."""
        return self.model_dump(by_alias=True, mode="json")
