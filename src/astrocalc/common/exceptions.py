"""Contains all the custom-defined exceptions used in astrocalc."""

from __future__ import annotations


class UnsupportedConversionError(Exception):
    """Exception indicating a measurement cannot be expressed in the requested unit."""


class InvalidDateTimeError(ValueError):
    """Exception indicating a :class:`.DateTime` was constructed with an out-of-range field."""
