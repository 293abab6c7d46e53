"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# astrocalc Imports
from astrocalc.physics.maths import TOLERANCE, isClose

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_PATH = Path("configs/custom_behavior.config")


def assertClose(expected: float, value: float, tolerance: float = TOLERANCE):
    """Assert `value` is within `tolerance` of `expected`, with a readable failure message."""
    assert isClose(expected, value, tolerance), (
        f"value {value} differs from {expected} more than {tolerance}"
    )
