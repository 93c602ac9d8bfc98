"""aiohttp client for the team API endpoints used by the calendar page."""

from __future__ import annotations

import asyncio
from datetime import date
from typing import Any, Dict, List, Optional, Type, TypeVar
from urllib.parse import unquote

import aiohttp
from pydantic import BaseModel, ValidationError
from yarl import URL

from team_calendar import LOGGER
from team_calendar.entities.holiday import Holiday
from team_calendar.entities.meeting import Meeting, MeetingDraft
from team_calendar.entities.task import Task, TaskDraft
from team_calendar.settings.calendar_api_settings import CalendarApiSettings
from team_calendar.use_cases.interfaces.calendar_repository_interface import (
    CalendarRepositoryInterface,
)
from team_calendar.utils.date_wire import format_wire_date
from team_calendar.utils.exceptions import FetchFailure

ModelT = TypeVar("ModelT", bound=BaseModel)

UNAUTHENTICATED = {401, 403}


class CalendarApiRepository(CalendarRepositoryInterface):
    """Session-based client for ``/api/tasks``, ``/api/meetings`` and holidays.

    The session keeps the server's cookies. Requests with a body echo the
    CSRF cookie back as a header, the way the server expects.
    """

    def __init__(
        self,
        settings: CalendarApiSettings,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Initialize the repository.

        Args:
            settings: Connection settings of the team API
            session: Optional pre-built session, mostly for tests
        """
        self.settings = settings
        self._session = session

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.timeout),
                cookie_jar=aiohttp.CookieJar(unsafe=True),
            )
        return self._session

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "CalendarApiRepository":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _xsrf_token(self, session: aiohttp.ClientSession) -> Optional[str]:
        cookies = session.cookie_jar.filter_cookies(URL(self.settings.root))
        morsel = cookies.get(self.settings.xsrf_cookie_name)
        if morsel is None or not morsel.value:
            return None
        return unquote(morsel.value)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        session = await self._get_session()
        url = f"{self.settings.root}{path}"
        headers = {"Accept": "application/json"}
        if payload is not None:
            headers["Content-Type"] = "application/json"
            token = self._xsrf_token(session)
            if token:
                headers[self.settings.xsrf_header_name] = token

        LOGGER.debug(f"{method} {path} params={params}")
        try:
            async with session.request(
                method, url, params=params, json=payload, headers=headers
            ) as response:
                if not 200 <= response.status < 300:
                    text = await response.text()
                    raise FetchFailure(
                        text or f"HTTP {response.status}",
                        status_code=response.status,
                        headers=dict(response.headers),
                    )
                content_type = response.headers.get("Content-Type", "")
                if "application/json" not in content_type:
                    return None
                return await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise FetchFailure(f"{method} {path} failed: {exc!r}") from exc

    @staticmethod
    def _parse_list(body: Any, model: Type[ModelT], what: str) -> List[ModelT]:
        if not isinstance(body, list):
            LOGGER.warning(f"Expected a list of {what}, got {type(body).__name__}")
            return []
        parsed: List[ModelT] = []
        for raw in body:
            try:
                parsed.append(model.model_validate(raw))
            except ValidationError as exc:
                LOGGER.warning(f"Dropping malformed {what} entry {raw!r}: {exc.error_count()} error(s)")
        return parsed

    @staticmethod
    def _parse_one(body: Any, model: Type[ModelT], what: str) -> ModelT:
        if body is None:
            raise FetchFailure(f"Server returned no {what}")
        try:
            return model.model_validate(body)
        except ValidationError as exc:
            raise FetchFailure(f"Server returned a malformed {what}: {exc}") from exc

    async def get_tasks(self) -> List[Task]:
        body = await self._request("GET", "/api/tasks")
        tasks = self._parse_list(body, Task, "task")
        LOGGER.info(f"Fetched {len(tasks)} task(s)")
        return tasks

    async def get_meetings(self, start: date, end: date) -> List[Meeting]:
        body = await self._request(
            "GET",
            "/api/meetings",
            params={"from": format_wire_date(start), "to": format_wire_date(end)},
        )
        meetings = self._parse_list(body, Meeting, "meeting")
        LOGGER.info(f"Fetched {len(meetings)} meeting(s) for {start} .. {end}")
        return meetings

    async def get_holidays(self, start_id: str, end_id: str) -> List[Holiday]:
        body = await self._request(
            "GET",
            "/api/calendar/holidays/range",
            params={"start": start_id, "end": end_id},
        )
        holidays = self._parse_list(body, Holiday, "holiday")
        LOGGER.info(f"Fetched {len(holidays)} holiday entr(ies) for {start_id} .. {end_id}")
        return holidays

    async def create_task(self, draft: TaskDraft) -> Task:
        body = await self._request("POST", "/api/tasks", payload=draft.to_payload())
        task = self._parse_one(body, Task, "task")
        LOGGER.info(f"Created task {task.id} on {task.date}")
        return task

    async def create_meeting(self, draft: MeetingDraft) -> Meeting:
        body = await self._request("POST", "/api/meetings", payload=draft.to_payload())
        meeting = self._parse_one(body, Meeting, "meeting")
        LOGGER.info(f"Created meeting {meeting.id} on {meeting.date}")
        return meeting

    async def me(self) -> Optional[Dict[str, Any]]:
        """Current user, or ``None`` when the session is anonymous.

        Also makes the server issue its CSRF cookie.
        """
        try:
            return await self._request("GET", "/api/auth/me")
        except FetchFailure as exc:
            if exc.status_code in UNAUTHENTICATED:
                return None
            raise

    async def login(self, email: str, password: str) -> Optional[Dict[str, Any]]:
        await self.me()
        await self._request(
            "POST", "/api/auth/login", payload={"email": email, "password": password}
        )
        user = await self.me()
        LOGGER.info(f"Signed in as {email}")
        return user

    async def logout(self) -> None:
        await self._request("POST", "/api/auth/logout", payload={})
