from __future__ import annotations

# Standard Library Imports
import logging

# Third Party Imports
import pytest

# astrocalc Imports
from astrocalc.common.behavioral_config import BehavioralConfig
from astrocalc.common.exceptions import UnsupportedConversionError
from astrocalc.common.labels import AngularUnit, DistanceUnit, TemperatureUnit
from astrocalc.physics.units import (
    AngularMeasurement,
    ArcMinute,
    ArcSecond,
    AstronomicalUnit,
    Celsius,
    Centimeter,
    Degree,
    DistanceMeasurement,
    Fahrenheit,
    Kelvin,
    Kilometer,
    Measurement,
    Meter,
    Mile,
    Millimeter,
    Radian,
)

# Local Imports
from ... import assertClose

CONCRETE_TYPES = [
    Millimeter,
    Centimeter,
    Meter,
    Kilometer,
    Mile,
    AstronomicalUnit,
    Celsius,
    Fahrenheit,
    Kelvin,
    Degree,
    Radian,
    ArcMinute,
    ArcSecond,
]

DOMAINS = {
    DistanceUnit: [Millimeter, Centimeter, Meter, Kilometer, Mile, AstronomicalUnit],
    TemperatureUnit: [Celsius, Fahrenheit, Kelvin],
    AngularUnit: [Degree, Radian, ArcMinute, ArcSecond],
}

LINEAR_TYPES = DOMAINS[DistanceUnit] + DOMAINS[AngularUnit]

SAMPLE_SCALARS = [1.0, 10.0, -3.25, 0.0015, 42.0]


def _supportedPairs():
    for domain, types in DOMAINS.items():
        for measurement_type in types:
            for target in domain:
                yield measurement_type, target


def _foreignPairs():
    for domain, types in DOMAINS.items():
        for measurement_type in types:
            for other_domain in DOMAINS:
                if other_domain is domain:
                    continue
                for target in other_domain:
                    yield measurement_type, target


@pytest.mark.parametrize("measurement_type", CONCRETE_TYPES)
def testScalarAndUnit(measurement_type: type[Measurement]):
    """Test each type reports its scalar and its own unit."""
    measurement = measurement_type(12.5)
    assert measurement.scalar() == 12.5
    assert measurement.unit() is measurement_type.UNIT


@pytest.mark.parametrize("measurement_type", CONCRETE_TYPES)
@pytest.mark.parametrize("scalar", SAMPLE_SCALARS)
def testIdentity(measurement_type: type[Measurement], scalar: float):
    """Test that converting into a type's own unit returns the scalar."""
    measurement = measurement_type(scalar)
    assertClose(scalar, measurement.convertScalar(measurement.unit()))


@pytest.mark.parametrize("measurement_type", LINEAR_TYPES)
def testZeroInvariance(measurement_type: type[Measurement]):
    """Test that zero maps to zero for every supported target of a linear domain."""
    zero = measurement_type(0)
    for target in type(zero.unit()):
        assert zero.convertScalar(target) == 0.0


@pytest.mark.parametrize("measurement_type", LINEAR_TYPES)
def testZeroWithoutShortCircuit(measurement_type: type[Measurement], monkeypatch: pytest.MonkeyPatch):
    """Test that zero still maps to zero when the table is always consulted."""
    monkeypatch.setattr(BehavioralConfig.getConfig().conversion, "ZeroShortCircuit", False)
    zero = measurement_type(0.0)
    for target in type(zero.unit()):
        assertClose(0.0, zero.convertScalar(target))


def testZeroTemperatureIsNotShortCircuited():
    """Test that an affine domain never short-circuits zero."""
    assertClose(32.0, Celsius(0).convertScalar(TemperatureUnit.FAHRENHEIT))
    assertClose(273.15, Celsius(0).convertScalar(TemperatureUnit.KELVIN))
    assertClose(-273.15, Kelvin(0).convertScalar(TemperatureUnit.CELSIUS))


@pytest.mark.parametrize(("measurement_type", "target"), list(_supportedPairs()))
def testRoundTrip(measurement_type: type[Measurement], target):
    """Test that converting A -> B -> A returns the original scalar."""
    for scalar in SAMPLE_SCALARS:
        there = measurement_type(scalar).convert(target)
        back = there.convertScalar(measurement_type.UNIT)
        assertClose(scalar, back)


@pytest.mark.parametrize(("measurement_type", "target"), list(_foreignPairs()))
def testUnsupportedPair(measurement_type: type[Measurement], target):
    """Test that a unit from another domain raises rather than returning a value."""
    measurement = measurement_type(1.0)
    assert measurement.supports(target) is False
    with pytest.raises(UnsupportedConversionError, match=measurement_type.__name__):
        measurement.convertScalar(target)

    # Zero does not bypass the supported-pair check
    with pytest.raises(UnsupportedConversionError):
        measurement_type(0.0).convertScalar(target)


def testUnsupportedPairIsLogged(caplog: pytest.LogCaptureFixture):
    """Test that an unsupported conversion is logged as an error."""
    with pytest.raises(UnsupportedConversionError):
        Meter(3.0).convertScalar(AngularUnit.RADIAN)

    assert ("astrocalc", logging.ERROR) in [(name, level) for name, level, _ in caplog.record_tuples]


@pytest.mark.parametrize("measurement_type", CONCRETE_TYPES)
def testSupportsOwnDomain(measurement_type: type[Measurement]):
    """Test that every type supports every member of its own domain."""
    measurement = measurement_type(1.0)
    for target in type(measurement.unit()):
        assert measurement.supports(target) is True


@pytest.mark.parametrize("bad_scalar", [float("nan"), float("inf"), float("-inf")])
def testNonFiniteScalar(bad_scalar: float):
    """Test that non-finite scalars are rejected at construction."""
    with pytest.raises(ValueError, match="finite"):
        Kilometer(bad_scalar)


@pytest.mark.parametrize("abstract_type", [Measurement, DistanceMeasurement, AngularMeasurement])
def testAbstractTypes(abstract_type: type[Measurement]):
    """Test that classes without a unit cannot hold a scalar."""
    with pytest.raises(TypeError):
        abstract_type(1.0)


def testConvertReturnsConcreteType():
    """Test that :meth:`.Measurement.convert` builds the target's concrete type."""
    converted = Millimeter(10.0).convert(DistanceUnit.CENTIMETER)
    assert isinstance(converted, Centimeter)
    assertClose(1.0, converted.scalar())

    with pytest.raises(UnsupportedConversionError):
        Millimeter(10.0).convert(TemperatureUnit.KELVIN)


def testFactory():
    """Test building concrete measurements from unit labels."""
    assert Measurement.factory(DistanceUnit.MILE, 2.0) == Mile(2.0)
    assert Measurement.factory(AngularUnit.ARC_SECOND, 1.0) == ArcSecond(1.0)
    assert Measurement.factory(TemperatureUnit.KELVIN, 5.0) == Kelvin(5.0)

    with pytest.raises(UnsupportedConversionError):
        Measurement.factory("furlong", 1.0)


def testValidUnits():
    """Test that every unit label has a concrete class."""
    valid = set(Measurement.validUnits())
    for domain in DOMAINS:
        assert set(domain) <= valid
    assert len(valid) == len(CONCRETE_TYPES)


def testEqualityAndHash():
    """Test value semantics of measurements."""
    assert Meter(1.0) == Meter(1.0)
    assert Meter(1.0) != Meter(2.0)
    assert Meter(1.0) != Kilometer(1.0)
    assert Meter(1.0) != 1.0
    assert len({Meter(1.0), Meter(1.0), Kilometer(1.0)}) == 2
    assert repr(Fahrenheit(-40)) == "Fahrenheit(-40.0)"
