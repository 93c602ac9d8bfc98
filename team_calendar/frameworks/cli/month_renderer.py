from __future__ import annotations

from typing import List, Sequence

from team_calendar.entities.calendar_view import CalendarCell
from team_calendar.entities.constants import DAYS_PER_WEEK, WEEKDAYS_FA

CELL_WIDTH = 8
HOLIDAY_MARK = "*"
FRIDAY_MARK = "!"


class MonthRenderer:
    """Plain-text month view: Saturday-first weeks with day markers.

    Out-of-month days are bracketed, holidays end with ``*``, Fridays with
    ``!``, and the number of tasks plus meetings follows in parentheses.
    """

    def __init__(self, cell_width: int = CELL_WIDTH):
        self.cell_width = cell_width

    def render_cell(self, cell: CalendarCell) -> str:
        number = str(cell.jalali.day)
        if not cell.in_month:
            number = f"[{number}]"
        if cell.is_holiday:
            number += HOLIDAY_MARK
        elif cell.is_friday:
            number += FRIDAY_MARK
        count = len(cell.tasks) + len(cell.meetings)
        if count:
            number += f"({count})"
        if cell.is_today:
            number = f">{number}"
        return number.rjust(self.cell_width)

    def render(self, title: str, cells: Sequence[CalendarCell], errors: Sequence[str] = ()) -> str:
        lines: List[str] = [title.center(self.cell_width * DAYS_PER_WEEK).rstrip()]
        lines.append("".join(name.rjust(self.cell_width) for name in WEEKDAYS_FA))
        for i in range(0, len(cells), DAYS_PER_WEEK):
            week = cells[i : i + DAYS_PER_WEEK]
            lines.append("".join(self.render_cell(cell) for cell in week))

        legend = [
            f"{HOLIDAY_MARK} {cell.jalali}: {cell.holiday.cause or '-'}"
            for cell in cells
            if cell.in_month and cell.is_holiday
        ]
        if legend:
            lines.append("")
            lines.extend(legend)
        for error in errors:
            lines.append(f"warning: {error}")
        return "\n".join(lines)

    def render_day(self, cells: Sequence[CalendarCell], day_id: str) -> str:
        """Agenda of one day: meetings first, then tasks in bucket order."""
        cell = next((c for c in cells if c.day_id == day_id), None)
        if cell is None:
            return f"{day_id}: not on this page"
        lines = [f"{cell.jalali.format_long()} ({cell.date.isoformat()})"]
        if cell.tooltip:
            lines.append(cell.tooltip)
        for meeting in cell.meetings:
            when = "all day" if meeting.all_day else (meeting.start_time or "--:--")
            lines.append(f"  [{when}] {meeting.title}")
        for task in cell.tasks:
            priority = task.priority.value if task.priority else "-"
            lines.append(f"  #{task.id} {priority:<6} {task.status.value:<5} {task.title}")
        if len(lines) == 1:
            lines.append("  nothing planned")
        return "\n".join(lines)
