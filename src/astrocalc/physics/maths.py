"""General mathematics helpers shared by the conversion and calendrical code.

* `numpy docs <https://numpy.org/doc/stable/>`_
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import fabs, trunc

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Final

TOLERANCE: Final[float] = 1.0e-6
"""``float``: absolute tolerance used when comparing converted values."""


def isClose(expected: float, value: float, tolerance: float = TOLERANCE) -> bool:
    r"""Check that `value` and `expected` differ by no more than `tolerance`.

    Args:
        expected (``float``): value that `value` should be.
        value (``float``): value being compared.
        tolerance (``float``, optional): allowed absolute difference. Defaults to :data:`.TOLERANCE`.

    Returns:
        ``bool``: whether :math:`|expected - value| \leq tolerance`
    """
    return bool(fabs(expected - value) <= tolerance)


def truncate(value: float) -> float:
    """Round `value` toward zero.

    Note:
        This is not ``floor``; ``truncate(-2.5) == -2.0``.
    """
    return float(trunc(value))
