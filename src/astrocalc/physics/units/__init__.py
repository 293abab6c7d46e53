"""Concrete unit types for every measurement domain.

Each concrete type holds a single scalar and implements the :class:`.Measurement` operations:
:meth:`~.Measurement.scalar`, :meth:`~.Measurement.unit` and :meth:`~.Measurement.convertScalar`.
"""

from __future__ import annotations

# Local Imports
from .angular import AngularMeasurement, ArcMinute, ArcSecond, Degree, Radian
from .distance import (
    AstronomicalUnit,
    Centimeter,
    DistanceMeasurement,
    Kilometer,
    Meter,
    Mile,
    Millimeter,
)
from .measurement import Measurement
from .temperature import Celsius, Fahrenheit, Kelvin, TemperatureMeasurement

__all__ = [
    "AngularMeasurement",
    "ArcMinute",
    "ArcSecond",
    "AstronomicalUnit",
    "Celsius",
    "Centimeter",
    "Degree",
    "DistanceMeasurement",
    "Fahrenheit",
    "Kelvin",
    "Kilometer",
    "Measurement",
    "Meter",
    "Mile",
    "Millimeter",
    "Radian",
    "TemperatureMeasurement",
]
