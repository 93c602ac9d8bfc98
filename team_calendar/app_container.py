"""Application container for the team calendar client."""

from __future__ import annotations

from lagom import Container, Singleton

from team_calendar import LOGGER
from team_calendar.adapters.calendar.jdatetime_calendar_system import (
    JdatetimeCalendarSystem,
)
from team_calendar.adapters.repositories.api.calendar_api_repository import (
    CalendarApiRepository,
)
from team_calendar.frameworks.cli.month_renderer import MonthRenderer
from team_calendar.settings.calendar_api_settings import CalendarApiSettings
from team_calendar.use_cases.calendar_page import CalendarPageController
from team_calendar.use_cases.interfaces.calendar_repository_interface import (
    CalendarRepositoryInterface,
)
from team_calendar.use_cases.interfaces.calendar_system_interface import (
    CalendarSystemInterface,
)

# Global container instance
_container = None


def get_container() -> Container:
    """Get the global container instance.

    Returns:
        The configured container
    """
    global _container
    if _container is None:
        _container = setup_container()
    return _container


def setup_container(api_settings: CalendarApiSettings = None) -> Container:
    """Set up and configure the application container.

    Args:
        api_settings: Explicit API settings, read from the environment otherwise

    Returns:
        Fully configured container
    """
    container = Container()

    if api_settings is not None:
        container[CalendarApiSettings] = api_settings
    else:
        container[CalendarApiSettings] = Singleton(lambda: CalendarApiSettings())

    # A) Bind INTERFACE -> ADAPTER
    container[CalendarSystemInterface] = Singleton(lambda: JdatetimeCalendarSystem())
    container[CalendarRepositoryInterface] = Singleton(
        lambda c: CalendarApiRepository(c[CalendarApiSettings])
    )

    # B) Use cases and presenters
    container[CalendarPageController] = Singleton(
        lambda c: CalendarPageController(
            c[CalendarSystemInterface],
            c[CalendarRepositoryInterface],
        )
    )
    container[MonthRenderer] = Singleton(lambda: MonthRenderer())

    LOGGER.debug("Calendar container configured")
    return container
