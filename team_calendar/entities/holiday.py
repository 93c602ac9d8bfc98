from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator
from pydantic.alias_generators import to_camel


class Holiday(BaseModel):
    """One entry of ``GET /api/calendar/holidays/range``.

    Args:
        day_id: Jalali day identifier, e.g. ``"14040101"``
        holiday: Whether the day is an official day off
        cause: Reason shown in the day tooltip
        events: Other occasions on that day
    """

    day_id: str = Field(description="Jalali day identifier")
    holiday: bool = Field(default=False, description="Official day off")
    cause: Optional[str] = Field(default=None, description="Holiday reason")
    events: List[str] = Field(default_factory=list, description="Occasions of the day")

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    @field_validator("events", mode="before")
    @classmethod
    def _null_events(cls, value):
        return [] if value is None else value
