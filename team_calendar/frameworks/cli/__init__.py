from __future__ import annotations

from team_calendar.frameworks.cli.month_renderer import MonthRenderer

__all__ = ["MonthRenderer"]
