"""Define the command line interface for the astrocalc conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path

# Local Imports
from .labels import parseUnit
from .logger import astrocalcLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        astrocalcLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def unitChecker(token):
    """Checks for valid unit names passed to the CLI parser.

    Args:
        token (``str``): unit name given to CLI parser, e.g. ``kilometer``.

    Raises:
        ValueError: if no measurement domain defines the unit

    Returns:
        :class:`.UnitLabel`: matching unit label
    """
    try:
        return parseUnit(token)
    except ValueError:
        astrocalcLogError(f"Bad unit given to CLI: {token!r}")
        raise


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(description="astrocalc Command Line Interface")

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavior config file. DEFAULT: packaged defaults",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a value from one unit to another of the same domain",
    )
    convert_parser.add_argument("value", metavar="VALUE", type=float, help="Value to convert")
    convert_parser.add_argument(
        "from_unit",
        metavar="FROM_UNIT",
        type=unitChecker,
        help="Unit VALUE is expressed in",
    )
    convert_parser.add_argument(
        "to_unit",
        metavar="TO_UNIT",
        type=unitChecker,
        help="Unit to express the result in",
    )

    julian_parser = subparsers.add_parser(
        "julian-day",
        help="Compute the Julian Day of a calendar date & time",
    )
    julian_parser.add_argument("year", metavar="YEAR", type=int, help="Astronomical year")
    julian_parser.add_argument("month", metavar="MONTH", type=int, help="Month, 1-12")
    julian_parser.add_argument("day", metavar="DAY", type=int, help="Day of the month, 1-31")
    julian_parser.add_argument(
        "--hour",
        dest="hour",
        default=0,
        type=int,
        help="Hour of the day, 0-23. DEFAULT: 0",
    )
    julian_parser.add_argument(
        "--minute",
        dest="minute",
        default=0,
        type=int,
        help="Minute of the hour, 0-59. DEFAULT: 0",
    )
    julian_parser.add_argument(
        "--second",
        dest="second",
        default=0,
        type=int,
        help="Second of the minute, 0-59. DEFAULT: 0",
    )
    julian_parser.add_argument(
        "-z",
        "--zone",
        dest="zone",
        default=0,
        type=int,
        help="Offset from Greenwich in hours, -12 to 12. DEFAULT: 0",
    )
    julian_parser.add_argument(
        "-u",
        "--universal",
        dest="universal",
        action="store_true",
        default=False,
        help="Remove the zone offset, referring the result to Greenwich",
    )

    subparsers.add_parser("units", help="List the known units for each domain")

    return parser
