"""Tests for Julian date conversion functions."""

import unittest
from datetime import datetime, timezone
from skytrack.space_time.julian import (
    days_since_j2000,
    get_julian_date,
    julian_centuries_since_j2000,
    julian_from_datetime,
    julian_to_datetime,
)
from skytrack.space_time.pythonic_datetimes import NaiveDateTimeError
from skytrack.space_time.rounding import create_and_round_to_millisecond


class TestJulianDateConversion(unittest.TestCase):
    """Test case for Julian date conversion functions."""

    def test_julian_from_datetime(self):
        dt = datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        self.assertAlmostEqual(julian_from_datetime(dt), 2460754.208333333, places=9)

    def test_julian_from_naive_datetime(self):
        with self.assertRaises(NaiveDateTimeError):
            julian_from_datetime(datetime(2025, 3, 19, 17, 0))

    def test_julian_to_datetime(self):
        """Results are rounded to the millisecond."""
        dt = julian_to_datetime(2460754.208333333)
        self.assertEqual(dt, datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc))

    def test_get_julian_date(self):
        """Datetimes are converted, floats pass through."""
        dt = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
        self.assertEqual(get_julian_date(dt), 2451545.0)
        self.assertEqual(get_julian_date(2460483.25), 2460483.25)

    def test_epoch_offsets(self):
        self.assertEqual(days_since_j2000(2451545.0), 0.0)
        self.assertEqual(days_since_j2000(2451544.0), -1.0)
        self.assertAlmostEqual(julian_centuries_since_j2000(2451545.0 + 36525.0), 1.0)

    def test_round_to_millisecond(self):
        """Test rounding microseconds to nearest millisecond."""
        dt = create_and_round_to_millisecond(123456, 0, 0, 0, 1, 1, 2025)
        self.assertEqual(dt, datetime(2025, 1, 1, 0, 0, 0, 123000, tzinfo=timezone.utc))

        # Overflow carries into the seconds
        dt = create_and_round_to_millisecond(999999, 0, 0, 0, 1, 1, 2025)
        self.assertEqual(dt, datetime(2025, 1, 1, 0, 0, 1, 0, tzinfo=timezone.utc))


if __name__ == "__main__":
    unittest.main()
