"""Allow running astrocalc as ``python -m astrocalc``."""

from __future__ import annotations

# Standard Library Imports
import sys

# Local Imports
from . import main

if __name__ == "__main__":
    sys.exit(main())
