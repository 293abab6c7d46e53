"""Temperature measurements and their conversion table.

Temperature scales are related by affine transforms, so unlike the other domains a zero reading
does not map to zero in every unit::

    F = C * 9/5 + 32
    K = C + 273.15

Fahrenheit and Kelvin are related by composing both through Celsius.
"""

from __future__ import annotations

# Standard Library Imports
from types import MappingProxyType

# Local Imports
from ...common.labels import TemperatureUnit
from .. import constants as const
from .measurement import Measurement


def celsiusToFahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * const.CELSIUS2FAHRENHEIT + const.FAHRENHEIT_OFFSET


def fahrenheitToCelsius(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to degrees Celsius."""
    return (fahrenheit - const.FAHRENHEIT_OFFSET) / const.CELSIUS2FAHRENHEIT


def celsiusToKelvin(celsius: float) -> float:
    """Convert degrees Celsius to kelvin."""
    return celsius + const.CELSIUS2KELVIN


def kelvinToCelsius(kelvin: float) -> float:
    """Convert kelvin to degrees Celsius."""
    return kelvin - const.CELSIUS2KELVIN


def fahrenheitToKelvin(fahrenheit: float) -> float:
    """Convert degrees Fahrenheit to kelvin."""
    return celsiusToKelvin(fahrenheitToCelsius(fahrenheit))


def kelvinToFahrenheit(kelvin: float) -> float:
    """Convert kelvin to degrees Fahrenheit."""
    return celsiusToFahrenheit(kelvinToCelsius(kelvin))


def _identity(value: float) -> float:
    return value


TEMPERATURE_CONVERSIONS = MappingProxyType(
    {
        (TemperatureUnit.CELSIUS, TemperatureUnit.CELSIUS): _identity,
        (TemperatureUnit.CELSIUS, TemperatureUnit.FAHRENHEIT): celsiusToFahrenheit,
        (TemperatureUnit.CELSIUS, TemperatureUnit.KELVIN): celsiusToKelvin,
        (TemperatureUnit.FAHRENHEIT, TemperatureUnit.CELSIUS): fahrenheitToCelsius,
        (TemperatureUnit.FAHRENHEIT, TemperatureUnit.FAHRENHEIT): _identity,
        (TemperatureUnit.FAHRENHEIT, TemperatureUnit.KELVIN): fahrenheitToKelvin,
        (TemperatureUnit.KELVIN, TemperatureUnit.CELSIUS): kelvinToCelsius,
        (TemperatureUnit.KELVIN, TemperatureUnit.FAHRENHEIT): kelvinToFahrenheit,
        (TemperatureUnit.KELVIN, TemperatureUnit.KELVIN): _identity,
    },
)
"""``MappingProxyType``: every ``(source, target)`` temperature pair to its conversion function."""


class TemperatureMeasurement(Measurement):
    """Abstract base class for measurements of temperature."""

    CONVERSIONS = TEMPERATURE_CONVERSIONS

    LINEAR = False


class Celsius(TemperatureMeasurement):
    """Temperature expressed in degrees Celsius."""

    UNIT = TemperatureUnit.CELSIUS


class Fahrenheit(TemperatureMeasurement):
    """Temperature expressed in degrees Fahrenheit."""

    UNIT = TemperatureUnit.FAHRENHEIT


class Kelvin(TemperatureMeasurement):
    """Temperature expressed in kelvin."""

    UNIT = TemperatureUnit.KELVIN
