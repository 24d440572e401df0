"""Tests for Julian date calculation functions."""

import unittest
from datetime import datetime, timedelta, timezone
from skytrack.space_time.julian_calc import (
    gregorian_to_jdn,
    jdn_to_julian_date,
    datetime_to_julian,
    julian_to_datetime,
)


class TestJulianDateCalculations(unittest.TestCase):
    """Test case for Julian date calculation functions."""

    def test_gregorian_to_jdn(self):
        """Known Julian Day Numbers (noon of the given date)."""
        self.assertEqual(gregorian_to_jdn(2000, 1, 1), 2451545)
        self.assertEqual(gregorian_to_jdn(1970, 1, 1), 2440588)
        self.assertEqual(gregorian_to_jdn(2024, 6, 21), 2460483)

    def test_proleptic_gregorian(self):
        """Dates before the 1582 reform follow the Gregorian rules too."""
        self.assertEqual(gregorian_to_jdn(1582, 10, 15), 2299161)
        self.assertEqual(gregorian_to_jdn(1582, 10, 4), 2299150)
        self.assertEqual(gregorian_to_jdn(1066, 10, 14), 2110695)
        self.assertEqual(gregorian_to_jdn(1, 1, 1), 1721426)

    def test_leap_day(self):
        """February 29th sits between the 28th and March 1st."""
        self.assertEqual(gregorian_to_jdn(2024, 2, 29), gregorian_to_jdn(2024, 2, 28) + 1)
        self.assertEqual(gregorian_to_jdn(2024, 3, 1), gregorian_to_jdn(2024, 2, 29) + 1)

    def test_jdn_to_julian_date(self):
        """Julian days begin at noon."""
        self.assertAlmostEqual(jdn_to_julian_date(2451545, 12, 0, 0), 2451545.0, places=9)
        self.assertAlmostEqual(jdn_to_julian_date(2451545, 0, 0, 0), 2451544.5, places=9)
        self.assertAlmostEqual(jdn_to_julian_date(2451545, 18, 0, 0), 2451545.25, places=9)

    def test_datetime_to_julian(self):
        """Test converting datetime objects to Julian dates."""
        dt = datetime(2025, 3, 19, 17, 0, tzinfo=timezone.utc)
        self.assertAlmostEqual(datetime_to_julian(dt), 2460754.208333333, places=6)

        # J2000.0
        dt = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.assertEqual(datetime_to_julian(dt), 2451545.0)

        # Offsets are converted to UTC first
        dt = datetime(2000, 1, 1, 8, 0, tzinfo=timezone(timedelta(hours=-4)))
        self.assertEqual(datetime_to_julian(dt), 2451545.0)

        with self.assertRaises(ValueError):
            datetime_to_julian(datetime(2025, 3, 19, 17, 0))

    def test_julian_to_datetime(self):
        """Test converting Julian dates to datetime objects."""
        result = julian_to_datetime(2451545.0)
        expected = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.assertLessEqual(abs((result - expected).total_seconds()), 1)

        result = julian_to_datetime(2460483.5)
        expected = datetime(2024, 6, 22, 0, 0, tzinfo=timezone.utc)
        self.assertLessEqual(abs((result - expected).total_seconds()), 1)

        result = julian_to_datetime(1721425.5)
        self.assertEqual(result, datetime(1, 1, 1, 0, 0, tzinfo=timezone.utc))

    def test_roundtrip_conversion(self):
        """datetime -> Julian date -> datetime stays within a second."""
        test_dates = [
            datetime(2000, 1, 1, 0, 0, tzinfo=timezone.utc),
            datetime(1999, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc),
            datetime(2024, 2, 29, 6, 30, tzinfo=timezone.utc),
            datetime(2038, 1, 19, 3, 14, 7, tzinfo=timezone.utc),
            datetime(1500, 6, 21, 16, 0, tzinfo=timezone.utc),
            datetime(1066, 10, 14, 9, 0, tzinfo=timezone.utc),
            datetime(300, 3, 1, 0, 0, tzinfo=timezone.utc),
            datetime(1, 1, 1, 12, 0, tzinfo=timezone.utc),
        ]
        for dt in test_dates:
            result = julian_to_datetime(datetime_to_julian(dt))
            self.assertLessEqual(
                abs((result - dt).total_seconds()), 2, f"Roundtrip failed for {dt}"
            )


if __name__ == "__main__":
    unittest.main()
