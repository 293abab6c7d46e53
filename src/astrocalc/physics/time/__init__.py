"""Contains the calendrical value type and the Julian Day algorithm.

The Julian Day is a continuous count of days, with a fractional part, used to compare dates
from different calendars on a single time line.
"""
