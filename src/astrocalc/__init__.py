"""Main Module Documentation.

The top-level module exposes one-liners for the common operations, converting a scalar between
two units of a measurement domain and computing the Julian Day of a calendar date, and serves
as the command line entry point.
"""

from __future__ import annotations

__version__ = "1.0.0"

DISPLAY_PRECISION = 9
"""``int``: number of decimal digits shown when displaying a converted scalar."""


def formatScalar(value: float) -> str:
    """Format `value` as fixed-point display text with :data:`.DISPLAY_PRECISION` decimals."""
    return f"{value:.{DISPLAY_PRECISION}f}"


def convertMeasurement(scalar, from_unit, to_unit) -> float:
    """Convert `scalar` expressed in `from_unit` into `to_unit`.

    Args:
        scalar (``float``): value to convert.
        from_unit (:class:`.UnitLabel` | ``str``): unit `scalar` is expressed in.
        to_unit (:class:`.UnitLabel` | ``str``): unit to express the result in.

    Raises:
        :class:`.UnsupportedConversionError`: if the pair of units cannot be converted.
        ``ValueError``: if either unit name is unknown, or `scalar` is not finite.

    Returns:
        ``float``: `scalar` expressed in `to_unit`
    """
    # Local Imports
    from .common.labels import parseUnit
    from .physics.units import Measurement

    if isinstance(from_unit, str):
        from_unit = parseUnit(from_unit)
    if isinstance(to_unit, str):
        to_unit = parseUnit(to_unit)

    return Measurement.factory(from_unit, scalar).convertScalar(to_unit)


def julianDay(year, month, day, hour=0, minute=0, second=0, zone=0) -> float:
    """Compute the Julian Day of a calendar date & time.

    Raises:
        :class:`.InvalidDateTimeError`: if any field is not an integer or is outside its
            valid range.
    """
    # Local Imports
    from .physics.time.calendar import DateTime

    return DateTime(year, month, day, hour, minute, second, zone).toJulianDay()


def main(argv=None) -> int:
    """astrocalc command line entry point.

    This is the function that the :command:`astrocalc` command points to. See :mod:`.cli` for
    details on what command line options are available.

    Returns:
        ``int``: process exit status
    """
    # Standard Library Imports
    import sys

    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import getCommandLineParser
    from .common.exceptions import UnsupportedConversionError
    from .common.labels import UNIT_DOMAINS
    from .common.logger import Logger, astrocalcLogDebug, astrocalcLogInfo
    from .physics.time.calendar import DateTime

    parser = getCommandLineParser()
    cli_args = parser.parse_args(argv)

    if cli_args.config_path:
        BehavioralConfig(config_file_path=cli_args.config_path)

    Logger("astrocalc")
    if cli_args.config_path:
        astrocalcLogInfo(f"Loaded behavior config: {cli_args.config_path}")

    try:
        if cli_args.command == "convert":
            astrocalcLogDebug(
                f"Converting {cli_args.value} from {cli_args.from_unit.value} to {cli_args.to_unit.value}",
            )
            result = convertMeasurement(cli_args.value, cli_args.from_unit, cli_args.to_unit)
            print(formatScalar(result))

        elif cli_args.command == "julian-day":
            date_time = DateTime(
                cli_args.year,
                cli_args.month,
                cli_args.day,
                cli_args.hour,
                cli_args.minute,
                cli_args.second,
                cli_args.zone,
            )
            astrocalcLogDebug(f"Computing Julian Day of {date_time!r}")
            if cli_args.universal:
                print(formatScalar(date_time.toUniversalJulianDay()))
            else:
                print(formatScalar(date_time.toJulianDay()))

        else:
            for domain in UNIT_DOMAINS:
                print(f"{domain.__name__}: {', '.join(unit.value for unit in domain)}")

    except (UnsupportedConversionError, ValueError) as error:
        print(f"astrocalc: error: {error}", file=sys.stderr)
        return 1

    return 0
