"""Hold the unit labels for each measurement domain."""

from __future__ import annotations

# Standard Library Imports
from enum import Enum
from typing import Union


class DistanceUnit(str, Enum):
    """Defines valid labels for distance units."""

    MILLIMETER: str = "millimeter"
    """``str``: one thousandth of a meter."""

    CENTIMETER: str = "centimeter"
    """``str``: one hundredth of a meter."""

    METER: str = "meter"
    """``str``: SI base unit of length."""

    KILOMETER: str = "kilometer"
    """``str``: one thousand meters."""

    MILE: str = "mile"
    """``str``: international statute mile, 1.609344 km."""

    ASTRONOMICAL_UNIT: str = "astronomical_unit"
    """``str``: mean Earth-Sun distance."""


class TemperatureUnit(str, Enum):
    """Defines valid labels for temperature units."""

    CELSIUS: str = "celsius"
    """``str``: degrees Celsius."""

    FAHRENHEIT: str = "fahrenheit"
    """``str``: degrees Fahrenheit."""

    KELVIN: str = "kelvin"
    """``str``: absolute temperature, kelvin."""


class AngularUnit(str, Enum):
    """Defines valid labels for plane angle units."""

    DEGREE: str = "degree"
    """``str``: 1/360 of a full turn."""

    RADIAN: str = "radian"
    """``str``: SI unit of plane angle."""

    ARC_MINUTE: str = "arc_minute"
    """``str``: 1/60 of a degree."""

    ARC_SECOND: str = "arc_second"
    """``str``: 1/3600 of a degree."""


UnitLabel = Union[DistanceUnit, TemperatureUnit, AngularUnit]
"""Any unit label, regardless of domain."""

UNIT_DOMAINS: tuple[type[Enum], ...] = (DistanceUnit, TemperatureUnit, AngularUnit)
"""``tuple``: every label enumeration, one per measurement domain."""


def parseUnit(token: str) -> UnitLabel:
    """Resolve a string token to its unit label, searching every domain.

    Args:
        token (``str``): unit label value, e.g. ``"kilometer"``. Case-insensitive.

    Raises:
        ``ValueError``: if no domain defines `token`.

    Returns:
        :class:`.UnitLabel`: matching unit label
    """
    normalized = token.strip().lower().replace("-", "_").replace(" ", "_")
    for domain in UNIT_DOMAINS:
        try:
            return domain(normalized)
        except ValueError:
            continue

    raise ValueError(f"Unknown unit: {token!r}")
