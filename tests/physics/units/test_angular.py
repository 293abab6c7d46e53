from __future__ import annotations

# Third Party Imports
import pytest
from numpy import pi

# astrocalc Imports
from astrocalc.common.labels import AngularUnit
from astrocalc.physics.units.angular import (
    ANGULAR_CONVERSIONS,
    ArcMinute,
    ArcSecond,
    Degree,
    Radian,
    convertAngle,
)

# Local Imports
from ... import assertClose


@pytest.mark.parametrize(
    ("measurement", "target", "expected"),
    [
        (Degree(180.0), AngularUnit.RADIAN, pi),
        (Degree(90.0), AngularUnit.RADIAN, pi / 2),
        (Degree(-45.0), AngularUnit.RADIAN, -pi / 4),
        (Radian(pi), AngularUnit.DEGREE, 180.0),
        (Radian(1.0), AngularUnit.DEGREE, 57.29577951308232),
        (Degree(1.0), AngularUnit.ARC_MINUTE, 60.0),
        (Degree(1.0), AngularUnit.ARC_SECOND, 3600.0),
        (ArcMinute(30.0), AngularUnit.DEGREE, 0.5),
        (ArcMinute(1.0), AngularUnit.ARC_SECOND, 60.0),
        (ArcSecond(3600.0), AngularUnit.RADIAN, pi / 180),
        (Radian(2 * pi), AngularUnit.ARC_MINUTE, 21600.0),
    ],
)
def testConversions(measurement, target: AngularUnit, expected: float):
    """Test angular scaling conversions."""
    assertClose(expected, measurement.convertScalar(target))


def testDegreesToRadiansFormula():
    """Test radians = degrees * pi / 180 exactly."""
    for degrees in (0.5, 12.0, 359.9):
        assert Degree(degrees).convertScalar(AngularUnit.RADIAN) == degrees * (pi / 180.0)


def testTableIsComplete():
    """Test that every angular pair has a conversion."""
    assert len(ANGULAR_CONVERSIONS) == len(AngularUnit) ** 2
    assert convertAngle(1.25, AngularUnit.RADIAN, AngularUnit.RADIAN) == 1.25
