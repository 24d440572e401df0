"""Astronomical constants shared by the ephemeris and time modules."""

import math

# Julian Date at J2000.0
J2000 = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0

SECONDS_PER_DAY = 86400.0
HOURS_PER_DAY = 24.0
DEGREES_PER_HOUR = 15.0

# Fixed mean obliquity of the ecliptic, degrees
OBLIQUITY_DEGREES = 23.439

DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi
