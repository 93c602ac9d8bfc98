"""Unit tests for the day identifier codec."""

import unittest
from datetime import date, datetime

from team_calendar.adapters.calendar.jdatetime_calendar_system import (
    JdatetimeCalendarSystem,
)
from team_calendar.entities.jalali import JalaliDate, JalaliMonth
from team_calendar.use_cases.day_identifier import (
    day_identifier_range,
    jalali_day_identifier,
    parse_day_identifier,
    to_day_identifier,
)
from team_calendar.utils.exceptions import InvalidDate


class TestDayIdentifier(unittest.TestCase):
    """Test suite for day identifiers."""

    def setUp(self):
        """Set up test fixtures."""
        self.calendar = JdatetimeCalendarSystem()

    def test_known_gregorian_day(self):
        """Test 2025-09-23 is the first of Mehr 1404."""
        self.assertEqual(to_day_identifier(date(2025, 9, 23), self.calendar), "14040701")

    def test_month_and_day_are_zero_padded(self):
        """Test single digit months and days get two characters."""
        self.assertEqual(jalali_day_identifier(JalaliDate(1403, 1, 1)), "14030101")
        self.assertEqual(jalali_day_identifier(JalaliDate(1403, 12, 30)), "14031230")

    def test_same_day_from_different_instants(self):
        """Test different times on one day give the same identifier."""
        instants = [
            datetime(2025, 9, 23, 0, 0),
            datetime(2025, 9, 23, 12, 0),
            datetime(2025, 9, 23, 23, 59, 59),
            date(2025, 9, 23),
        ]
        identifiers = {to_day_identifier(instant, self.calendar) for instant in instants}
        self.assertEqual(identifiers, {"14040701"})

    def test_identifiers_sort_chronologically(self):
        """Test string order follows day order for four-digit years."""
        days = [date(2024, 3, 19), date(2024, 3, 20), date(2024, 12, 31), date(2025, 9, 23)]
        identifiers = [to_day_identifier(day, self.calendar) for day in days]
        self.assertEqual(identifiers, sorted(identifiers))

    def test_parse_round_trip(self):
        """Test parsing gives back the Jalali date."""
        self.assertEqual(parse_day_identifier("14040701"), JalaliDate(1404, 7, 1))

    def test_parse_rejects_malformed(self):
        """Test malformed identifiers raise InvalidDate."""
        for value in ["", "1404-07-01", "14041301", "14040700", "abc", None]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidDate):
                    parse_day_identifier(value)

    def test_month_range(self):
        """Test first and last identifiers of a month."""
        self.assertEqual(
            day_identifier_range(JalaliMonth(1404, 7), self.calendar), ("14040701", "14040730")
        )
        self.assertEqual(
            day_identifier_range(JalaliMonth(1403, 12), self.calendar), ("14031201", "14031230")
        )
        self.assertEqual(
            day_identifier_range(JalaliMonth(1404, 12), self.calendar), ("14041201", "14041229")
        )


if __name__ == "__main__":
    unittest.main()
