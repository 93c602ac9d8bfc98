"""Unit tests for JdatetimeCalendarSystem."""

import unittest
from datetime import date, datetime, timedelta

from team_calendar.adapters.calendar.jdatetime_calendar_system import (
    JdatetimeCalendarSystem,
)
from team_calendar.entities.jalali import JalaliDate, JalaliMonth
from team_calendar.utils.exceptions import InvalidDate


class TestJdatetimeCalendarSystem(unittest.TestCase):
    """Test suite for Gregorian/Jalali conversion and month arithmetic."""

    def setUp(self):
        """Set up test fixtures."""
        self.calendar = JdatetimeCalendarSystem()

    def test_to_jalali_known_values(self):
        """Test conversion of well-known Gregorian days."""
        cases = [
            (date(2025, 9, 23), JalaliDate(1404, 7, 1)),
            (date(2024, 3, 20), JalaliDate(1403, 1, 1)),
            (date(2023, 3, 21), JalaliDate(1402, 1, 1)),
            (date(2017, 1, 1), JalaliDate(1395, 10, 12)),
            (date(2025, 3, 20), JalaliDate(1403, 12, 30)),
        ]
        for gregorian, expected in cases:
            with self.subTest(gregorian=gregorian):
                self.assertEqual(self.calendar.to_jalali(gregorian), expected)

    def test_to_jalali_accepts_datetime(self):
        """Test a timestamp is reduced to its calendar day."""
        self.assertEqual(
            self.calendar.to_jalali(datetime(2025, 9, 23, 23, 59)),
            JalaliDate(1404, 7, 1),
        )

    def test_to_gregorian_known_values(self):
        """Test conversion of Jalali days and tuples."""
        self.assertEqual(self.calendar.to_gregorian(JalaliDate(1403, 1, 1)), date(2024, 3, 20))
        self.assertEqual(self.calendar.to_gregorian((1395, 10, 12)), date(2017, 1, 1))
        self.assertEqual(self.calendar.to_gregorian((1399, 12, 30)), date(2021, 3, 20))

    def test_round_trip_over_a_century(self):
        """Test Gregorian -> Jalali -> Gregorian is lossless day by day."""
        day = date(1950, 1, 1)
        end = date(2050, 12, 31)
        while day <= end:
            self.assertEqual(self.calendar.to_gregorian(self.calendar.to_jalali(day)), day)
            day += timedelta(days=1)

    def test_round_trip_sparse_multi_century(self):
        """Test round trip every 11 days between 1700 and 2300."""
        day = date(1700, 1, 1)
        while day <= date(2300, 12, 31):
            self.assertEqual(self.calendar.to_gregorian(self.calendar.to_jalali(day)), day)
            day += timedelta(days=11)

    def test_leap_years(self):
        """Test Esfand length follows the Jalali leap cycle."""
        for year in (1391, 1395, 1399, 1403):
            with self.subTest(year=year):
                self.assertTrue(self.calendar.is_leap(year))
                self.assertEqual(self.calendar.days_in_month(year, 12), 30)
        for year in (1400, 1401, 1402, 1404):
            with self.subTest(year=year):
                self.assertFalse(self.calendar.is_leap(year))
                self.assertEqual(self.calendar.days_in_month(year, 12), 29)

    def test_leap_day_count_matches_year_length(self):
        """Test a year has 366 days exactly when its Esfand has 30."""
        for year in range(1300, 1500):
            with self.subTest(year=year):
                length = (
                    self.calendar.to_gregorian((year + 1, 1, 1))
                    - self.calendar.to_gregorian((year, 1, 1))
                ).days
                self.assertEqual(length, 366 if self.calendar.days_in_month(year, 12) == 30 else 365)

    def test_days_in_month_by_season(self):
        """Test first half months have 31 days and the next five 30."""
        for month in range(1, 7):
            self.assertEqual(self.calendar.days_in_month(1404, month), 31)
        for month in range(7, 12):
            self.assertEqual(self.calendar.days_in_month(1404, month), 30)

    def test_invalid_jalali_dates_raise(self):
        """Test non-existent Jalali days raise InvalidDate."""
        for value in [(1404, 12, 30), (1404, 7, 31), (1404, 13, 1), (1404, 0, 1), (1404, 1, 0), ("x", 1)]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidDate):
                    self.calendar.to_gregorian(value)

    def test_invalid_gregorian_input_raises(self):
        """Test non-date input raises InvalidDate."""
        with self.assertRaises(InvalidDate):
            self.calendar.to_jalali("2025-02-30")

    def test_invalid_month_for_days_in_month(self):
        """Test days_in_month rejects months outside 1..12."""
        with self.assertRaises(InvalidDate):
            self.calendar.days_in_month(1404, 13)

    def test_start_and_end_of_month(self):
        """Test month boundaries in Gregorian terms."""
        mehr = JalaliMonth(1404, 7)
        self.assertEqual(self.calendar.start_of_month(mehr), date(2025, 9, 23))
        self.assertEqual(self.calendar.end_of_month(mehr), date(2025, 10, 22))
        self.assertEqual(self.calendar.end_of_month(JalaliMonth(1403, 12)), date(2025, 3, 20))

    def test_add_months_clamps_day(self):
        """Test month arithmetic clamps to the target month length."""
        shahrivar_31 = self.calendar.to_gregorian((1404, 6, 31))
        self.assertEqual(
            self.calendar.to_jalali(self.calendar.add_months(shahrivar_31, 1)),
            JalaliDate(1404, 7, 30),
        )
        self.assertEqual(
            self.calendar.to_jalali(self.calendar.add_months(shahrivar_31, -6)),
            JalaliDate(1403, 12, 30),
        )
        self.assertEqual(
            self.calendar.to_jalali(self.calendar.add_months(shahrivar_31, 18)),
            JalaliDate(1405, 12, 29),
        )

    def test_add_days(self):
        """Test day arithmetic crosses Jalali months."""
        self.assertEqual(self.calendar.add_days(date(2025, 9, 23), -1), date(2025, 9, 22))
        self.assertEqual(self.calendar.add_days(date(2025, 9, 23), 30), date(2025, 10, 23))

    def test_is_same_month(self):
        """Test only the Jalali year and month are compared."""
        self.assertTrue(self.calendar.is_same_month(date(2025, 9, 23), date(2025, 10, 22)))
        self.assertFalse(self.calendar.is_same_month(date(2025, 9, 22), date(2025, 9, 23)))

    def test_weekday_index_saturday_first(self):
        """Test the Iranian week numbering."""
        # 2025-09-20 is a Saturday
        for offset in range(7):
            with self.subTest(offset=offset):
                self.assertEqual(
                    self.calendar.weekday_index(date(2025, 9, 20) + timedelta(days=offset)),
                    offset,
                )

    def test_month_of(self):
        """Test the cursor month of a Gregorian day."""
        self.assertEqual(self.calendar.month_of(date(2025, 10, 22)), JalaliMonth(1404, 7))


if __name__ == "__main__":
    unittest.main()
