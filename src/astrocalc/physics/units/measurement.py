"""Defines the abstract :class:`.Measurement` base class shared by every concrete unit."""

from __future__ import annotations

# Standard Library Imports
from abc import ABC
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import isfinite

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.exceptions import UnsupportedConversionError
from ...common.logger import astrocalcLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable, Mapping

    # Local Imports
    from ...common.labels import UnitLabel

    ConversionTable = Mapping[tuple[UnitLabel, UnitLabel], Callable[[float], float]]


class Measurement(ABC):
    """Abstract base class for a scalar quantity tagged with a specific unit.

    Each domain (distance, temperature, angle) defines an intermediate subclass carrying the
    domain's :attr:`.CONVERSIONS` table, and each unit in that domain is a concrete subclass
    which only sets :attr:`.UNIT`. The shared operations then look up ``(UNIT, target)`` in
    the table, so the set of supported targets for any unit is exactly what its table lists.
    """

    UNIT: UnitLabel | None = None
    """:class:`.UnitLabel`: label of the unit this class represents, ``None`` on abstract classes."""

    CONVERSIONS: ConversionTable = {}
    """``dict``: maps ``(source, target)`` unit labels to a scalar conversion function."""

    LINEAR: bool = True
    """``bool``: whether zero maps to zero in every unit of this domain."""

    UNIT_REGISTRY: dict | None = None
    """``dict``: correlates unit labels to their concrete :class:`.Measurement` classes."""

    def __init__(self, scalar: float):
        """Store the scalar value of this measurement.

        Args:
            scalar (``float``): magnitude of the measurement, expressed in :attr:`.UNIT`.

        Raises:
            ``TypeError``: if called on a class without a :attr:`.UNIT`.
            ``ValueError``: if `scalar` is not a finite number.
        """
        if self.UNIT is None:
            raise TypeError(f"{type(self).__name__} is abstract and cannot hold a scalar")
        scalar = float(scalar)
        if not isfinite(scalar):
            raise ValueError(f"{type(self).__name__}: scalar must be finite, got {scalar}")
        self._scalar = scalar

    def scalar(self) -> float:
        """``float``: stored magnitude of this measurement."""
        return self._scalar

    def unit(self) -> UnitLabel:
        """:class:`.UnitLabel`: label of the unit this measurement is expressed in."""
        return self.UNIT

    def supports(self, target: UnitLabel) -> bool:
        """Return whether this measurement's table holds a conversion to `target`."""
        return (self.UNIT, target) in self.CONVERSIONS

    def convertScalar(self, target: UnitLabel) -> float:
        """Express this measurement's scalar in the `target` unit.

        A zero scalar in a linear domain short-circuits to ``0.0`` once the pair is known to
        be supported, see :attr:`.LINEAR` and the ``conversion.ZeroShortCircuit`` config item.

        Args:
            target (:class:`.UnitLabel`): unit to convert into.

        Raises:
            :class:`.UnsupportedConversionError`: if ``(UNIT, target)`` is not in :attr:`.CONVERSIONS`.

        Returns:
            ``float``: converted scalar value
        """
        conversion = self.CONVERSIONS.get((self.UNIT, target))
        if conversion is None:
            msg = f"{type(self).__name__} cannot be converted to {target!r}"
            astrocalcLogError(msg)
            raise UnsupportedConversionError(msg)

        if (
            self._scalar == 0.0
            and self.LINEAR
            and BehavioralConfig.getConfig().conversion.ZeroShortCircuit
        ):
            return 0.0

        return float(conversion(self._scalar))

    def convert(self, target: UnitLabel) -> Measurement:
        """Return a new :class:`.Measurement` of the `target` unit equal to this one.

        Raises:
            :class:`.UnsupportedConversionError`: if ``(UNIT, target)`` is not in :attr:`.CONVERSIONS`.
        """
        return self.factory(target, self.convertScalar(target))

    @classmethod
    def _generateRegistry(cls):
        """Populate :attr:`.UNIT_REGISTRY` based on every concrete subclass."""
        if Measurement.UNIT_REGISTRY is None:
            registry = {}
            pending = list(Measurement.__subclasses__())
            while pending:
                subclass = pending.pop()
                pending.extend(subclass.__subclasses__())
                if subclass.UNIT is not None:
                    registry[subclass.UNIT] = subclass
            Measurement.UNIT_REGISTRY = registry

    @classmethod
    def validUnits(cls) -> list[UnitLabel]:
        """Returns a list of the unit labels with a concrete class."""
        cls._generateRegistry()
        return list(Measurement.UNIT_REGISTRY.keys())

    @classmethod
    def factory(cls, unit: UnitLabel, scalar: float) -> Measurement:
        """Construct the concrete :class:`.Measurement` for `unit`.

        Args:
            unit (:class:`.UnitLabel`): label of the unit to construct.
            scalar (``float``): magnitude of the new measurement.

        Raises:
            :class:`.UnsupportedConversionError`: if no concrete class represents `unit`.

        Returns:
            :class:`.Measurement`: concrete measurement holding `scalar`
        """
        cls._generateRegistry()
        try:
            measurement_class = Measurement.UNIT_REGISTRY[unit]
        except KeyError as err:
            msg = f"No measurement type is defined for {unit!r}"
            astrocalcLogError(msg)
            raise UnsupportedConversionError(msg) from err

        return measurement_class(scalar)

    def __eq__(self, other):
        """Measurements are equal when they share a unit and scalar."""
        if not isinstance(other, Measurement):
            return NotImplemented
        return self.UNIT == other.UNIT and self._scalar == other._scalar

    def __hash__(self):
        """Hash on the unit label and scalar value."""
        return hash((self.UNIT, self._scalar))

    def __repr__(self):
        """Return a string representation of this :class:`.Measurement`."""
        return f"{type(self).__name__}({self._scalar})"
