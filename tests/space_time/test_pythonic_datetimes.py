"""Tests for datetime utility functions."""

import unittest
from datetime import datetime, timezone, timedelta
from zoneinfo import ZoneInfo

import pytz

from skytrack.space_time.pythonic_datetimes import (
    NaiveDateTimeError,
    at_local_hour,
    days_in_month,
    ensure_aware,
    ensure_utc,
    get_utc_datetime,
    start_of_local_day,
    start_of_local_month,
)


class TestPythonicDatetimes(unittest.TestCase):
    """Test cases for datetime utility functions."""

    def test_ensure_utc(self):
        dt_utc = datetime(2025, 1, 1, tzinfo=timezone.utc)
        self.assertEqual(ensure_utc(dt_utc), dt_utc)

        with self.assertRaises(NaiveDateTimeError):
            ensure_utc(datetime(2025, 1, 1))

        dt_est = datetime(2025, 1, 1, tzinfo=timezone(timedelta(hours=-5)))
        self.assertEqual(ensure_utc(dt_est), datetime(2025, 1, 1, 5, tzinfo=timezone.utc))

    def test_ensure_aware(self):
        dt = datetime(2025, 1, 1, tzinfo=ZoneInfo("Asia/Tokyo"))
        self.assertIs(ensure_aware(dt), dt)
        with self.assertRaises(NaiveDateTimeError):
            ensure_aware(datetime(2025, 1, 1))

    def test_start_of_local_day(self):
        """Midnight is taken in the datetime's own zone, not UTC."""
        tz = ZoneInfo("America/New_York")
        dt = datetime(2024, 6, 21, 15, 42, 7, tzinfo=tz)
        midnight = start_of_local_day(dt)
        self.assertEqual(midnight, datetime(2024, 6, 21, 0, 0, tzinfo=tz))
        self.assertEqual(
            midnight.astimezone(timezone.utc),
            datetime(2024, 6, 21, 4, 0, tzinfo=timezone.utc),
        )

    def test_at_local_hour(self):
        tz = ZoneInfo("Europe/Paris")
        dt = datetime(2024, 3, 2, 21, 35, 10, tzinfo=tz)
        self.assertEqual(
            at_local_hour(dt, days_before=3), datetime(2024, 2, 28, 21, 0, tzinfo=tz)
        )
        self.assertEqual(at_local_hour(dt), datetime(2024, 3, 2, 21, 0, tzinfo=tz))

    def test_anchors_in_pytz_zones_use_the_offset_of_their_own_date(self):
        """Anchors re-localize instead of reusing a pytz fixed offset."""
        tz = pytz.timezone("America/New_York")
        after_fall_back = tz.localize(datetime(2024, 11, 3, 15, 0))
        self.assertEqual(
            start_of_local_day(after_fall_back), tz.localize(datetime(2024, 11, 3, 0, 0))
        )
        self.assertEqual(
            start_of_local_day(after_fall_back).utcoffset(), timedelta(hours=-4)
        )

        after_spring_forward = tz.localize(datetime(2024, 3, 12, 15, 20))
        earlier = at_local_hour(after_spring_forward, days_before=3)
        self.assertEqual(earlier.hour, 15)
        self.assertEqual(earlier.utcoffset(), timedelta(hours=-5))

        month_start = start_of_local_month(tz.localize(datetime(2024, 3, 15, 12, 0)))
        self.assertEqual(month_start.hour, 12)
        self.assertEqual(month_start.utcoffset(), timedelta(hours=-5))

    def test_start_of_local_month(self):
        dt = datetime(2024, 2, 15, 9, 30, tzinfo=timezone.utc)
        self.assertEqual(
            start_of_local_month(dt), datetime(2024, 2, 1, 9, 0, tzinfo=timezone.utc)
        )

    def test_days_in_month(self):
        self.assertEqual(days_in_month(datetime(2024, 2, 15)), 29)
        self.assertEqual(days_in_month(datetime(2023, 2, 15)), 28)
        self.assertEqual(days_in_month(datetime(2024, 4, 1)), 30)
        self.assertEqual(days_in_month(datetime(2024, 12, 31)), 31)

    def test_get_utc_datetime(self):
        dt = get_utc_datetime(2024, 6, 21, 16)
        self.assertEqual(dt.tzinfo, pytz.UTC)
        self.assertEqual(dt, datetime(2024, 6, 21, 16, tzinfo=timezone.utc))


if __name__ == "__main__":
    unittest.main()
