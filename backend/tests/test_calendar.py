"""
Unit tests for liftlog.calendar.
Run: cd backend && python -m pytest tests/ -v
"""
import unittest
from datetime import date, datetime, timezone

from liftlog.calendar import (
    add_days,
    days_descending,
    month_day,
    monday_of,
    parse_iso,
    to_iso,
    today,
    today_iso,
    try_parse_iso,
    weeks_descending,
)


# --- today ---
class TestToday(unittest.TestCase):
    def test_late_night_stays_on_local_day(self):
        """23:30 in New York is already tomorrow in UTC."""
        now = datetime(2026, 1, 6, 4, 30, tzinfo=timezone.utc)
        self.assertEqual(today("America/New_York", now=now), date(2026, 1, 5))
        self.assertEqual(today("UTC", now=now), date(2026, 1, 6))

    def test_ahead_of_utc(self):
        now = datetime(2026, 1, 5, 20, 0, tzinfo=timezone.utc)
        self.assertEqual(today_iso("Asia/Tokyo", now=now), "2026-01-06")

    def test_without_now_returns_a_date(self):
        self.assertIsInstance(today("UTC"), date)


# --- parsing ---
class TestParseIso(unittest.TestCase):
    def test_round_trip(self):
        self.assertEqual(to_iso(parse_iso("2026-02-28")), "2026-02-28")

    def test_date_and_datetime_pass_through(self):
        self.assertEqual(parse_iso(date(2026, 1, 1)), date(2026, 1, 1))
        self.assertEqual(parse_iso(datetime(2026, 1, 1, 9, 0)), date(2026, 1, 1))

    def test_rejects_garbage(self):
        for bad in ("", "2026-13-01", "2026-02-30", "yesterday", "2026-1-5", "2026-W02-1", "20260105", None, 20260105):
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    parse_iso(bad)
                self.assertIsNone(try_parse_iso(bad))


# --- arithmetic ---
class TestAddDays(unittest.TestCase):
    def test_crosses_month_and_year(self):
        self.assertEqual(add_days(date(2025, 12, 31), 1), date(2026, 1, 1))
        self.assertEqual(add_days(date(2026, 3, 1), -1), date(2026, 2, 28))
        self.assertEqual(add_days(date(2024, 3, 1), -1), date(2024, 2, 29))

    def test_round_trip(self):
        d = date(2026, 1, 5)
        for n in (-400, -7, -1, 0, 1, 30, 366):
            with self.subTest(n=n):
                self.assertEqual(add_days(add_days(d, n), -n), d)


class TestMondayOf(unittest.TestCase):
    def test_every_day_of_a_fortnight(self):
        d = date(2025, 12, 25)
        for i in range(14):
            day = add_days(d, i)
            m = monday_of(day)
            with self.subTest(day=day):
                self.assertEqual(m.weekday(), 0)
                self.assertTrue(0 <= (day - m).days <= 6)

    def test_sunday_goes_back_six_days(self):
        self.assertEqual(monday_of(date(2026, 1, 11)), date(2026, 1, 5))

    def test_monday_is_itself(self):
        self.assertEqual(monday_of(date(2026, 1, 5)), date(2026, 1, 5))


# --- sequences ---
class TestDaysDescending(unittest.TestCase):
    def test_inclusive_and_descending(self):
        days = list(days_descending(date(2026, 1, 1), date(2026, 1, 3)))
        self.assertEqual(days, [date(2026, 1, 3), date(2026, 1, 2), date(2026, 1, 1)])

    def test_single_day(self):
        self.assertEqual(list(days_descending(date(2026, 1, 1), date(2026, 1, 1))), [date(2026, 1, 1)])

    def test_empty_when_start_after_end(self):
        self.assertEqual(list(days_descending(date(2026, 1, 2), date(2026, 1, 1))), [])

    def test_is_lazy(self):
        gen = days_descending(date(1, 1, 2), date(9999, 12, 31))
        self.assertEqual(next(gen), date(9999, 12, 31))


class TestWeeksDescending(unittest.TestCase):
    def test_mid_week_bounds_keep_full_rows(self):
        # 2026-01-01 is a Thursday, 2026-01-06 a Tuesday
        weeks = list(weeks_descending(date(2026, 1, 1), date(2026, 1, 6)))
        self.assertEqual([w.monday for w in weeks], [date(2026, 1, 5), date(2025, 12, 29)])
        for w in weeks:
            self.assertEqual(len(w.days), 7)

        current = weeks[0]
        self.assertEqual([c.in_range for c in current.days], [True, True, False, False, False, False, False])
        first = weeks[1]
        self.assertEqual([c.in_range for c in first.days], [False, False, False, True, True, True, True])

    def test_single_week(self):
        weeks = list(weeks_descending(date(2026, 1, 5), date(2026, 1, 11)))
        self.assertEqual(len(weeks), 1)
        self.assertTrue(all(c.in_range for c in weeks[0].days))


class TestLabels(unittest.TestCase):
    def test_month_day(self):
        self.assertEqual(month_day(date(2026, 1, 5)), "1/5")


if __name__ == "__main__":
    unittest.main()
