"""Tests for observer locations and manual coordinate entry."""

import unittest

from skytrack.location import (
    DEFAULT_LOCATION,
    InvalidLocationError,
    Location,
    format_coordinates,
    parse_location,
)


class TestLocation(unittest.TestCase):
    def test_default_location(self):
        self.assertEqual(DEFAULT_LOCATION.latitude, 40.7128)
        self.assertEqual(DEFAULT_LOCATION.longitude, -74.0060)
        self.assertEqual(DEFAULT_LOCATION.name, "New York, NY")

    def test_str(self):
        self.assertEqual(str(DEFAULT_LOCATION), "40.7128°, -74.0060°")
        self.assertEqual(format_coordinates(Location(-33.86881, 151.2)), "-33.8688°, 151.2000°")

    def test_no_validation_on_construction(self):
        location = Location(latitude=200.0, longitude=-500.0)
        self.assertEqual(location.latitude, 200.0)


class TestParseLocation(unittest.TestCase):
    def test_numeric_strings(self):
        location = parse_location("51.5074", "-0.1278", "London")
        self.assertEqual(location, Location(51.5074, -0.1278, "London"))

    def test_numbers(self):
        location = parse_location(-33.8688, 151.2093)
        self.assertEqual(location.latitude, -33.8688)
        self.assertEqual(location.longitude, 151.2093)

    def test_default_name(self):
        self.assertEqual(parse_location("48.8566", "2.3522").name, "48.86, 2.35")
        self.assertEqual(parse_location("48.8566", "2.3522", "  ").name, "48.86, 2.35")

    def test_bounds_are_inclusive(self):
        parse_location(90, 180)
        parse_location(-90, -180)

    def test_out_of_range(self):
        with self.assertRaises(InvalidLocationError):
            parse_location("90.1", "0")
        with self.assertRaises(InvalidLocationError):
            parse_location("0", "-180.5")

    def test_not_a_number(self):
        for latitude, longitude in (("abc", "0"), ("0", ""), ("nan", "0"), (None, "0")):
            with self.subTest(latitude=latitude, longitude=longitude):
                with self.assertRaises(InvalidLocationError):
                    parse_location(latitude, longitude)

    def test_is_a_value_error(self):
        self.assertTrue(issubclass(InvalidLocationError, ValueError))


if __name__ == "__main__":
    unittest.main()
