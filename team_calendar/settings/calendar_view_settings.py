from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from team_calendar.utils.pydantic_advanced_settings import CustomizedSettings


class CalendarViewSettings(CustomizedSettings):
    """Options of the terminal month view.

    Values come from, in order: keyword arguments, ``--year``/``--month``
    style command line flags, ``config.json``, ``CALENDAR_VIEW_*``
    environment variables and the ``.env`` file.
    """

    json_config_path: ClassVar[str] = "config.json"

    year: Optional[int] = Field(default=None, description="Jalali year to show")
    month: Optional[int] = Field(default=None, description="Jalali month to show (1-12)")
    log_level: str = Field(default="INFO", description="Console log level")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CALENDAR_VIEW_",
        extra="ignore",
    )
