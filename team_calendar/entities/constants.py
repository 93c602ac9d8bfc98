from __future__ import annotations

from enum import Enum


class TaskStatus(Enum):
    """Workflow statuses used by the team API."""
    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"


class TaskPriority(Enum):
    """Task priority values used by the team API."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


# Lower rank sorts first inside a day bucket
PRIORITY_RANK = {
    TaskPriority.HIGH: 1,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 3,
}
MISSING_PRIORITY_RANK = 99

PERSIAN_MONTHS = [
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
]

# Saturday first, Iranian week order
WEEKDAYS_FA = ["ش", "ی", "د", "س", "چ", "پ", "ج"]

DAYS_PER_WEEK = 7
WEEKS_PER_GRID = 6
GRID_SIZE = DAYS_PER_WEEK * WEEKS_PER_GRID
FRIDAY_INDEX = 6

# Reminders longer than a year are dropped
MAX_REMINDER_MINUTES = 365 * 24 * 60
