"""Defines the :class:`.DateTime` value type and the Julian Day algorithm.

A :class:`.DateTime` holds a civil date and time with a fixed zone offset. Years use astronomical
numbering, so the year before 1 AD is 0 and 1 BC is -1 in the Julian calendar sense.

References:
    :cite:t:`meeus_1998_algorithms`, Chapter 7

The Julian Day of a :class:`.DateTime` is computed as::

    y, m = (year, month)          if month > 2
           (year - 1, month + 12) otherwise
    t = 0.75 if year < 0 else 0
    a = trunc(year / 100)          (Gregorian dates only, else 0)
    b = 2 - a + trunc(a / 4)       (Gregorian dates only, else 0)
    JD = b + trunc(365.25 * y - t) + trunc(30.6001 * (m + 1)) + fractional_day + 1720994.5

Every ``trunc`` rounds toward zero, which matters for negative years.
"""

from __future__ import annotations

# Standard Library Imports
from operator import index
from typing import TYPE_CHECKING

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.exceptions import InvalidDateTimeError
from .. import constants as const
from ..maths import truncate

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from datetime import datetime

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def isLeapYear(year: int) -> bool:
    """Determine whether `year` is a leap year under the Gregorian rule.

    Years divisible by 4 are leap years, except centuries which are only leap years when
    divisible by 400.
    """
    if year % 4 != 0:
        return False
    if year % 100 == 0 and year % 400 != 0:
        return False
    return True


def daysInMonth(year: int, month: int) -> int:
    """Return the number of days in `month` of `year`, accounting for leap years."""
    if month == 2 and isLeapYear(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _integerField(name, value):
    try:
        return index(value)
    except TypeError as err:
        raise InvalidDateTimeError(f"DateTime: {name} must be an integer, got {value!r}") from err

class DateTime:
    """Validated, immutable civil date & time with a fixed zone offset."""

    def __init__(self, year, month, day, hour=0, minute=0, second=0, zone=0):
        """Validate and store each field.

        Args:
            year (int): astronomical year, may be zero or negative
            month (int): month of the year, 1-12
            day (int): day of the month, 1-31
            hour (int): hour of the day, 0-23
            minute (int): minute of the hour, 0-59
            second (int): second of the minute, 0-59
            zone (int): offset from Greenwich in 1/24ths of a day, -12 to 12

        Raises:
            :class:`.InvalidDateTimeError`: if any field is not an integer or is outside its
                valid range
        """
        year, month, day, hour, minute, second, zone = (
            _integerField(name, value)
            for name, value in zip(
                ("year", "month", "day", "hour", "minute", "second", "zone"),
                (year, month, day, hour, minute, second, zone),
            )
        )
        if month < 1 or month > 12:
            raise InvalidDateTimeError(f"DateTime: month must be in range 1-12, got {month}")
        if day < 1 or day > 31:
            raise InvalidDateTimeError(f"DateTime: day must be in range 1-31, got {day}")
        if BehavioralConfig.getConfig().calendar.StrictDays and day > daysInMonth(year, month):
            raise InvalidDateTimeError(
                f"DateTime: day must be in range 1-{daysInMonth(year, month)} for {year}-{month:02d}, got {day}",
            )
        if hour < 0 or hour > 23:
            raise InvalidDateTimeError(f"DateTime: hour must be in range 0-23, got {hour}")
        if minute < 0 or minute > 59:
            raise InvalidDateTimeError(f"DateTime: minute must be in range 0-59, got {minute}")
        if second < 0 or second > 59:
            raise InvalidDateTimeError(f"DateTime: second must be in range 0-59, got {second}")
        if zone < -12 or zone > 12:
            raise InvalidDateTimeError(f"DateTime: zone must be in range -12-12, got {zone}")

        self._year = year
        self._month = month
        self._day = day
        self._hour = hour
        self._minute = minute
        self._second = second
        self._zone = zone

    @classmethod
    def fromDate(cls, year, month, day):
        """Construct a :class:`.DateTime` at midnight Greenwich on the given date."""
        return cls(year, month, day, 0, 0, 0, 0)

    @property
    def year(self):
        """int: astronomical year."""
        return self._year

    @property
    def month(self):
        """int: month of the year."""
        return self._month

    @property
    def day(self):
        """int: day of the month."""
        return self._day

    @property
    def hour(self):
        """int: hour of the day."""
        return self._hour

    @property
    def minute(self):
        """int: minute of the hour."""
        return self._minute

    @property
    def second(self):
        """int: second of the minute."""
        return self._second

    @property
    def zone(self):
        """int: offset from Greenwich, in 1/24ths of a day."""
        return self._zone

    def isGregorian(self) -> bool:
        """Determine whether this date falls on or after the configured Gregorian cutover.

        The cutover comes from the ``calendar`` section of :class:`.BehavioralConfig`. In the
        cutover year, both the month and the day of month must reach the cutover's values.
        """
        calendar = BehavioralConfig.getConfig().calendar
        if self._year > calendar.GregorianCutoverYear:
            return True
        return (
            self._year == calendar.GregorianCutoverYear
            and self._month >= calendar.GregorianCutoverMonth
            and self._day >= calendar.GregorianCutoverDay
        )

    def fractionalDay(self) -> float:
        """``float``: day of the month plus the elapsed fraction of that day."""
        return (
            self._day
            + self._hour / 24.0
            + self._minute / const.MINUTES_PER_DAY
            + self._second / const.SECONDS_PER_DAY
        )

    def toJulianDay(self) -> float:
        """Compute the Julian Day of this date & time, ignoring the zone offset.

        Returns:
            ``float``: Julian Day, starting at midnight
        """
        if self._month > 2:
            year, month = self._year, self._month
        else:
            year, month = self._year - 1, self._month + 12

        correction = 0.75 if self._year < 0 else 0.0

        if self.isGregorian():
            century = truncate(self._year / 100.0)
            century_term = 2.0 - century + truncate(century / 4.0)
        else:
            century_term = 0.0

        return (
            century_term
            + truncate(365.25 * year - correction)
            + truncate(30.6001 * (month + 1))
            + self.fractionalDay()
            + const.JULIAN_DAY_OFFSET
        )

    def toUniversalJulianDay(self) -> float:
        """Compute the Julian Day of this date & time referred to Greenwich.

        The zone offset is removed, so a :class:`.DateTime` at 06:00 in zone +6 has the same
        universal Julian Day as one at 00:00 in zone 0.
        """
        return self.toJulianDay() - self._zone / 24.0

    def __eq__(self, other):
        """Date times are equal when every field is equal."""
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        """Hash on every field."""
        return hash(self._fields())

    def _fields(self):
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._zone,
        )

    def __repr__(self):
        """Return a string representation of this :class:`.DateTime`."""
        return "DateTime({}, {}, {}, {}, {}, {}, {})".format(*self._fields())


def datetimeToDateTime(date_time: datetime) -> DateTime:
    """Convert a ``datetime`` object to a :class:`.DateTime`.

    Sub-second precision is dropped. An aware ``datetime`` keeps its UTC offset as the zone,
    rounded toward zero to whole hours.

    Args:
        date_time (datetime): ``datetime`` object to be converted.

    Returns:
        DateTime: Converted :class:`.DateTime` object.
    """
    zone = 0
    offset = date_time.utcoffset()
    if offset is not None:
        zone = int(truncate(offset.total_seconds() / 3600.0))

    return DateTime(
        date_time.year,
        date_time.month,
        date_time.day,
        date_time.hour,
        date_time.minute,
        date_time.second,
        zone,
    )
