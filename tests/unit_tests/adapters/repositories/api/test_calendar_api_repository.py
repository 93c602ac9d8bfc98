from __future__ import annotations

import unittest
from datetime import date
from http.cookies import SimpleCookie
from unittest.mock import AsyncMock
from unittest.mock import MagicMock

import aiohttp

from team_calendar.adapters.repositories.api.calendar_api_repository import (
    CalendarApiRepository,
)
from team_calendar.entities.meeting import MeetingDraft
from team_calendar.entities.task import TaskDraft
from team_calendar.settings.calendar_api_settings import CalendarApiSettings
from team_calendar.utils.exceptions import FetchFailure


def make_response(status=200, body=None, content_type="application/json", text=""):
    response = MagicMock()
    response.status = status
    response.headers = {"Content-Type": content_type}
    response.json = AsyncMock(return_value=body)
    response.text = AsyncMock(return_value=text)
    return response


class TestCalendarApiRepository(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.settings = CalendarApiSettings(base_url="http://api.test/")
        self.session = MagicMock()
        self.session.closed = False
        self.session.close = AsyncMock()
        self.session.cookie_jar.filter_cookies.return_value = SimpleCookie()
        self.repository = CalendarApiRepository(self.settings, session=self.session)

    def respond_with(self, *responses):
        contexts = []
        for response in responses:
            context = MagicMock()
            context.__aenter__ = AsyncMock(return_value=response)
            context.__aexit__ = AsyncMock(return_value=False)
            contexts.append(context)
        self.session.request.side_effect = contexts

    def request_call(self, index=0):
        return self.session.request.call_args_list[index]

    async def test_get_tasks_parses_and_drops_malformed(self):
        self.respond_with(
            make_response(
                body=[
                    {"id": 1, "title": "a", "priority": "HIGH", "date": "2025-09-23"},
                    {"title": "no id"},
                    {"id": 2, "title": "b", "priority": "URGENT", "assignedToName": "Sara"},
                ]
            )
        )

        tasks = await self.repository.get_tasks()

        self.assertEqual([t.id for t in tasks], [1, 2])
        self.assertIsNone(tasks[1].priority)
        self.assertEqual(tasks[1].assigned_to_name, "Sara")
        method, url = self.request_call().args
        self.assertEqual((method, url), ("GET", "http://api.test/api/tasks"))
        self.assertNotIn("X-XSRF-TOKEN", self.request_call().kwargs["headers"])

    async def test_get_meetings_sends_wire_dates(self):
        self.respond_with(make_response(body=[{"id": 3, "title": "sync", "date": "2025-09-23", "allDay": True}]))

        meetings = await self.repository.get_meetings(date(2025, 9, 23), date(2025, 10, 22))

        self.assertTrue(meetings[0].all_day)
        call = self.request_call()
        self.assertEqual(call.args[1], "http://api.test/api/meetings")
        self.assertEqual(call.kwargs["params"], {"from": "2025-09-23", "to": "2025-10-22"})

    async def test_get_holidays_uses_day_identifiers(self):
        self.respond_with(
            make_response(body=[{"dayId": "14040713", "holiday": True, "cause": "x", "events": None}])
        )

        holidays = await self.repository.get_holidays("14040701", "14040730")

        self.assertEqual(holidays[0].day_id, "14040713")
        self.assertEqual(holidays[0].events, [])
        call = self.request_call()
        self.assertEqual(call.args[1], "http://api.test/api/calendar/holidays/range")
        self.assertEqual(call.kwargs["params"], {"start": "14040701", "end": "14040730"})

    async def test_non_list_body_reads_as_empty(self):
        self.respond_with(make_response(body={"error": "nope"}))
        self.assertEqual(await self.repository.get_tasks(), [])

    async def test_server_error_raises_fetch_failure(self):
        self.respond_with(make_response(status=500, text="internal error"))

        with self.assertRaises(FetchFailure) as ctx:
            await self.repository.get_holidays("14040701", "14040730")

        self.assertEqual(ctx.exception.status_code, 500)
        self.assertEqual(str(ctx.exception), "HTTP 500: internal error")

    async def test_transport_error_raises_fetch_failure(self):
        self.session.request.side_effect = aiohttp.ClientConnectionError("down")

        with self.assertRaises(FetchFailure) as ctx:
            await self.repository.get_tasks()
        self.assertIsNone(ctx.exception.status_code)

    async def test_create_task_echoes_csrf_cookie(self):
        cookies = SimpleCookie()
        cookies["XSRF-TOKEN"] = "abc%3D"
        self.session.cookie_jar.filter_cookies.return_value = cookies
        self.respond_with(make_response(body={"id": 9, "title": "new", "date": "2025-09-23"}))

        task = await self.repository.create_task(TaskDraft(title="new", date=date(2025, 9, 23)))

        self.assertEqual(task.id, 9)
        call = self.request_call()
        self.assertEqual(call.args, ("POST", "http://api.test/api/tasks"))
        self.assertEqual(call.kwargs["headers"]["X-XSRF-TOKEN"], "abc=")
        self.assertEqual(call.kwargs["json"]["date"], "2025-09-23")
        self.assertEqual(call.kwargs["json"]["priority"], "MEDIUM")

    async def test_create_meeting_without_body_fails(self):
        self.respond_with(make_response(body=None, content_type="text/plain"))

        draft = MeetingDraft(title="retro", date=date(2025, 9, 25), start_time="10:00")
        with self.assertRaises(FetchFailure):
            await self.repository.create_meeting(draft)
        self.assertEqual(self.request_call().kwargs["json"]["startTime"], "10:00")

    async def test_me_returns_none_when_anonymous(self):
        self.respond_with(make_response(status=401, text=""))
        self.assertIsNone(await self.repository.me())

    async def test_me_propagates_other_failures(self):
        self.respond_with(make_response(status=502, text="bad gateway"))
        with self.assertRaises(FetchFailure):
            await self.repository.me()

    async def test_login_flow(self):
        self.respond_with(
            make_response(status=401),
            make_response(body=None, content_type=""),
            make_response(body={"id": 1, "email": "a@b.c"}),
        )

        user = await self.repository.login("a@b.c", "secret")

        self.assertEqual(user["email"], "a@b.c")
        paths = [call.args[1] for call in self.session.request.call_args_list]
        self.assertEqual(
            paths,
            [
                "http://api.test/api/auth/me",
                "http://api.test/api/auth/login",
                "http://api.test/api/auth/me",
            ],
        )
        self.assertEqual(self.request_call(1).kwargs["json"], {"email": "a@b.c", "password": "secret"})

    async def test_logout(self):
        self.respond_with(make_response(body=None, content_type=""))

        await self.repository.logout()

        call = self.request_call()
        self.assertEqual(call.args, ("POST", "http://api.test/api/auth/logout"))
        self.assertEqual(call.kwargs["json"], {})
        self.assertEqual(call.kwargs["headers"]["Content-Type"], "application/json")

    async def test_close(self):
        async with self.repository:
            pass
        self.session.close.assert_awaited_once()


if __name__ == "__main__":
    unittest.main()
