"""Plane angle measurements and their conversion table.

All angular units are pure scalings of the degree: ``radians = degrees * pi / 180``, and there
are 60 arc minutes or 3600 arc seconds in a degree.
"""

from __future__ import annotations

# Standard Library Imports
from functools import partial
from types import MappingProxyType

# Local Imports
from ...common.labels import AngularUnit
from .. import constants as const
from .measurement import Measurement


def _toDegrees(value: float, unit: AngularUnit) -> float:
    if unit is AngularUnit.RADIAN:
        return value * const.RAD2DEG
    if unit is AngularUnit.ARC_MINUTE:
        return value * const.ARCMIN2DEG
    if unit is AngularUnit.ARC_SECOND:
        return value * const.ARCSEC2DEG
    return value


def _fromDegrees(value: float, unit: AngularUnit) -> float:
    if unit is AngularUnit.RADIAN:
        return value * const.DEG2RAD
    if unit is AngularUnit.ARC_MINUTE:
        return value / const.ARCMIN2DEG
    if unit is AngularUnit.ARC_SECOND:
        return value / const.ARCSEC2DEG
    return value


def convertAngle(value: float, source: AngularUnit, target: AngularUnit) -> float:
    """Convert a plane angle `value` from the `source` unit to the `target` unit.

    Args:
        value (``float``): angle expressed in `source`.
        source (:class:`.AngularUnit`): unit `value` is expressed in.
        target (:class:`.AngularUnit`): unit to express the result in.

    Returns:
        ``float``: angle expressed in `target`
    """
    if source is target:
        return value
    return _fromDegrees(_toDegrees(value, source), target)


ANGULAR_CONVERSIONS = MappingProxyType(
    {
        (source, target): partial(convertAngle, source=source, target=target)
        for source in AngularUnit
        for target in AngularUnit
    },
)
"""``MappingProxyType``: every ``(source, target)`` angular pair to its conversion function."""


class AngularMeasurement(Measurement):
    """Abstract base class for measurements of plane angle."""

    CONVERSIONS = ANGULAR_CONVERSIONS


class Degree(AngularMeasurement):
    """Angle expressed in degrees."""

    UNIT = AngularUnit.DEGREE


class Radian(AngularMeasurement):
    """Angle expressed in radians."""

    UNIT = AngularUnit.RADIAN


class ArcMinute(AngularMeasurement):
    """Angle expressed in arc minutes."""

    UNIT = AngularUnit.ARC_MINUTE


class ArcSecond(AngularMeasurement):
    """Angle expressed in arc seconds."""

    UNIT = AngularUnit.ARC_SECOND
