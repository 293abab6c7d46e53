"""Global math & physics constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. :cite:t:`meeus_1998_algorithms`, Chapter 7
"""

from __future__ import annotations

# Third Party Imports
from numpy import pi

# Angular conversion constants
DEG2RAD = pi / 180.0
RAD2DEG = 180.0 / pi
ARCMIN2DEG = 1.0 / 60.0
ARCSEC2DEG = 1.0 / 3600.0

# Distance conversion constants, expressed relative to the kilometer
MM2KM = 1.0e-6
CM2KM = 1.0e-5
M2KM = 1.0e-3
MILE2KM = 1.609344  # International statute mile
KM2AU = 6.685e-9  # Astronomical Unit per kilometer

# Temperature conversion constants
CELSIUS2KELVIN = 273.15  # Kelvin at 0 degrees Celsius
FAHRENHEIT_OFFSET = 32.0  # Fahrenheit at 0 degrees Celsius
CELSIUS2FAHRENHEIT = 9.0 / 5.0  # Fahrenheit degrees per Celsius degree

# Calendrical constants
JULIAN_DAY_OFFSET = 1_720_994.5  # the extra 0.5 starts the Julian day at midnight
MINUTES_PER_DAY = 24.0 * 60.0
SECONDS_PER_DAY = 24.0 * 3600.0
