from __future__ import annotations

# Standard Library Imports
import logging
import sys

# Third Party Imports
import pytest

# astrocalc Imports
from astrocalc.common.behavioral_config import BehavioralConfig


@pytest.fixture(autouse=True)
def _resetBehavioralConfig() -> None:
    """Make sure every test function starts and ends with the packaged default configuration.

    Note:
        Tests that build a :class:`.BehavioralConfig` from a custom file replace the shared
        instance, so it is rebuilt from the packaged defaults afterwards.
    """
    BehavioralConfig()
    yield
    BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
