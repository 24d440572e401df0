"""Tests for millisecond rounding of converted instants."""

import unittest
from datetime import datetime, timezone

from skytrack.space_time.rounding import create_and_round_to_millisecond


class TestRounding(unittest.TestCase):
    def test_rounds_to_millisecond(self):
        dt = create_and_round_to_millisecond(123456, 0, 0, 0, 1, 1, 2025)
        self.assertEqual(dt, datetime(2025, 1, 1, 0, 0, 0, 123000, tzinfo=timezone.utc))

    def test_overflow_carries_into_seconds(self):
        dt = create_and_round_to_millisecond(999999, 59, 59, 23, 31, 12, 2024)
        self.assertEqual(dt, datetime(2025, 1, 1, 0, 0, 0, 0, tzinfo=timezone.utc))


if __name__ == "__main__":
    unittest.main()
