from __future__ import annotations

__version__ = "0.4.2"
__name__ = "team_calendar"

import os

from team_calendar.utils.basic_logger import loguru_logger

LOGGER = loguru_logger(
    __name__,
    stream_level=os.environ.get("TEAM_CALENDAR_LOG_LEVEL", "INFO"),
    filename=os.environ.get("TEAM_CALENDAR_LOG_FILE"),
)


__all__ = ["__version__", "__name__", "loguru_logger", "LOGGER"]
