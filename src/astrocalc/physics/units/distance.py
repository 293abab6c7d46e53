"""Distance measurements and their conversion table.

Metric units convert between each other by exact powers of ten. Miles and astronomical units
are reached through the kilometer using literal factors: kilometers are divided by 1.609344 to
get miles and multiplied by 6.685e-9 to get astronomical units.
"""

from __future__ import annotations

# Standard Library Imports
from functools import partial
from types import MappingProxyType

# Local Imports
from ...common.labels import DistanceUnit
from .. import constants as const
from .measurement import Measurement

_METRIC_EXPONENT: dict[DistanceUnit, int] = {
    DistanceUnit.MILLIMETER: -3,
    DistanceUnit.CENTIMETER: -2,
    DistanceUnit.METER: 0,
    DistanceUnit.KILOMETER: 3,
}
"""``dict``: power of ten relating each metric unit to the meter."""


def _toKilometers(value: float, unit: DistanceUnit) -> float:
    """Express `value` given in `unit` as kilometers."""
    if unit in _METRIC_EXPONENT:
        return value * 10.0 ** (_METRIC_EXPONENT[unit] - 3)
    if unit is DistanceUnit.MILE:
        return value * const.MILE2KM
    # Astronomical unit
    return value / const.KM2AU


def _fromKilometers(value: float, unit: DistanceUnit) -> float:
    """Express `value` given in kilometers as `unit`."""
    if unit in _METRIC_EXPONENT:
        return value * 10.0 ** (3 - _METRIC_EXPONENT[unit])
    if unit is DistanceUnit.MILE:
        return value / const.MILE2KM
    # Astronomical unit
    return value * const.KM2AU


def convertDistance(value: float, source: DistanceUnit, target: DistanceUnit) -> float:
    """Convert a distance `value` from the `source` unit to the `target` unit.

    Args:
        value (``float``): distance expressed in `source`.
        source (:class:`.DistanceUnit`): unit `value` is expressed in.
        target (:class:`.DistanceUnit`): unit to express the result in.

    Returns:
        ``float``: distance expressed in `target`
    """
    if source is target:
        return value
    if source in _METRIC_EXPONENT and target in _METRIC_EXPONENT:
        return value * 10.0 ** (_METRIC_EXPONENT[source] - _METRIC_EXPONENT[target])
    return _fromKilometers(_toKilometers(value, source), target)


DISTANCE_CONVERSIONS = MappingProxyType(
    {
        (source, target): partial(convertDistance, source=source, target=target)
        for source in DistanceUnit
        for target in DistanceUnit
    },
)
"""``MappingProxyType``: every ``(source, target)`` distance pair to its conversion function."""


class DistanceMeasurement(Measurement):
    """Abstract base class for measurements of length."""

    CONVERSIONS = DISTANCE_CONVERSIONS


class Millimeter(DistanceMeasurement):
    """Distance expressed in millimeters."""

    UNIT = DistanceUnit.MILLIMETER


class Centimeter(DistanceMeasurement):
    """Distance expressed in centimeters."""

    UNIT = DistanceUnit.CENTIMETER


class Meter(DistanceMeasurement):
    """Distance expressed in meters."""

    UNIT = DistanceUnit.METER


class Kilometer(DistanceMeasurement):
    """Distance expressed in kilometers."""

    UNIT = DistanceUnit.KILOMETER


class Mile(DistanceMeasurement):
    """Distance expressed in international statute miles."""

    UNIT = DistanceUnit.MILE


class AstronomicalUnit(DistanceMeasurement):
    """Distance expressed in astronomical units."""

    UNIT = DistanceUnit.ASTRONOMICAL_UNIT
