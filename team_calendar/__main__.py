import asyncio
import sys

from pydantic import ValidationError

from team_calendar import LOGGER
from team_calendar import loguru_logger
from team_calendar.app_container import get_container
from team_calendar.entities.jalali import JalaliMonth
from team_calendar.frameworks.cli.month_renderer import MonthRenderer
from team_calendar.settings.calendar_api_settings import CalendarApiSettings
from team_calendar.settings.calendar_view_settings import CalendarViewSettings
from team_calendar.use_cases.calendar_page import CalendarPageController
from team_calendar.use_cases.interfaces.calendar_repository_interface import (
    CalendarRepositoryInterface,
)
from team_calendar.utils.exceptions import FetchFailure, InvalidDate


async def show_month(view_settings: CalendarViewSettings) -> int:
    """Sign in if configured, load the requested month and print it.

    Args:
        view_settings: Year/month selection of the view

    Returns:
        Process exit code
    """
    container = get_container()
    controller = container[CalendarPageController]
    repository = container[CalendarRepositoryInterface]
    api_settings = container[CalendarApiSettings]

    try:
        month = controller.cursor
        if view_settings.year is not None or view_settings.month is not None:
            month = JalaliMonth(
                view_settings.year if view_settings.year is not None else month.year,
                view_settings.month if view_settings.month is not None else month.month,
            )
    except InvalidDate as e:
        LOGGER.error(f"Invalid month requested: {e}")
        return 1

    try:
        if api_settings.has_credentials:
            try:
                await repository.login(api_settings.email, api_settings.password)
            except FetchFailure as e:
                LOGGER.warning(f"Login failed, continuing anonymously: {e}")
        await controller.go_to(month)
        renderer = container[MonthRenderer]
        print(renderer.render(controller.title, controller.cells(), list(controller.errors.values())))
    finally:
        await repository.close()
    return 0


def main() -> None:
    try:
        view_settings = CalendarViewSettings()
    except ValidationError as e:
        LOGGER.error(f"Invalid view settings: {e}")
        sys.exit(1)
    loguru_logger("team_calendar", stream_level=view_settings.log_level)
    LOGGER.info(f"Starting team calendar view {view_settings.model_dump()}")
    sys.exit(asyncio.run(show_month(view_settings)))


if __name__ == "__main__":
    main()
