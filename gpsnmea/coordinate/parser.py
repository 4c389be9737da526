"""Coordinate parsing in DMS, GPS (NMEA) and decimal notation.

``parse_coordinate`` tries each notation in a fixed order and returns the first
success; there is no cross-validation between them:

    1. Degrees, minutes, seconds:   33° 23' 22"
    2. GPS / NMEA notation:         15113.4322 S   (value, space, hemisphere)
    3. Decimal degrees:             151.196019

The order matters. A plain decimal such as "151.196019" is not a DMS value
(no unit markers) and has no hemisphere token, so it reaches the decimal
parser. A value such as "1511.196019" is rejected by all three: its integer
part is too long to be decimal degrees, which is how decimal values are told
apart from unsigned NMEA ``DDDMM.MMMM`` text.
"""

import math
from collections.abc import Callable

from gpsnmea.coordinate.types import Coordinate
from gpsnmea.errors import CoordinateFormatError
from gpsnmea.numbers import to_float, to_int

DEGREES_MARKER = "°"
MINUTES_MARKER = "'"
SECONDS_MARKER = '"'
DECIMAL_POINT = "."

NORTH = "N"
SOUTH = "S"
EAST = "E"
WEST = "W"

# Decimal degrees never exceed 180, so at most three integer digits
_MAXIMUM_DECIMAL_INTEGER_DIGITS = 3


def parse_dms(value: str) -> Coordinate:
    """Parse a degrees/minutes/seconds coordinate, e.g. ``33° 23' 22"``.

    The string is scanned once, left to right. Digits and decimal points are
    collected into a buffer; whitespace after a number closes it; a degree,
    minute or second marker consumes the buffer as an int, int or float
    respectively. Any Unicode digit is collected, but only ASCII digits
    convert, so "٣٣°" fails at the marker. Components that never appear count
    as zero, so input without any number (such as the blank produced by empty
    NMEA fields) yields ``0.0``.

    DMS carries no hemisphere, so the result is never negative.

    Raises:
        CoordinateFormatError: On an unknown character, a digit following a
            closed number, a non-numeric buffer at a marker, or a number that
            is never closed by a marker.
    """
    degrees = 0
    minutes = 0
    seconds = 0.0
    number_ended = False
    buffer = ""

    for character in value:
        if character.isdigit() or character == DECIMAL_POINT:
            if number_ended:
                raise CoordinateFormatError("parse error (no delimiter)")
            buffer += character
        elif character.isspace():
            if buffer:
                number_ended = True
        elif character == DEGREES_MARKER:
            degrees = _consume(buffer, to_int, "degrees")
            buffer, number_ended = "", False
        elif character == MINUTES_MARKER:
            minutes = _consume(buffer, to_int, "minutes")
            buffer, number_ended = "", False
        elif character == SECONDS_MARKER:
            seconds = _consume(buffer, to_float, "seconds")
            buffer, number_ended = "", False
        else:
            raise CoordinateFormatError(
                f"parse error (unknown symbol [{ord(character)}])"
            )

    if buffer:
        raise CoordinateFormatError("parse error (no unit)")

    return Coordinate(degrees + minutes / 60.0 + seconds / 3600.0)


def _consume(
    buffer: str, convert: Callable[[str], int | float], component: str
) -> int | float:
    try:
        return convert(buffer)
    except ValueError as e:
        raise CoordinateFormatError(f"parse error ({component})") from e


def parse_gps_notation(value: str) -> Coordinate:
    """Parse an NMEA coordinate followed by its hemisphere, e.g. ``"4807.038 N"``.

    The numeric part is ``DDMM.MMMM`` (latitude) or ``DDDMM.MMMM``
    (longitude); hundreds and above are degrees, the rest are minutes:

        degrees = floor(value / 100)
        decimal_degrees = degrees + (value - degrees * 100) / 60

    N/E give a positive result, S/W a negative one.

    Raises:
        CoordinateFormatError: If the hemisphere token is missing or unknown,
            or the numeric part is not a number.
    """
    parts = value.split(" ")
    if len(parts) < 2:
        raise CoordinateFormatError("parse error (no direction)")
    number, direction = parts[0], parts[1]

    try:
        raw = to_float(number)
    except ValueError as e:
        raise CoordinateFormatError(f"parse error: {e}") from e
    if not math.isfinite(raw):
        raise CoordinateFormatError(f"parse error: non-finite value {number}")

    degrees = math.floor(raw / 100)
    minutes = raw - degrees * 100
    decimal_degrees = degrees + minutes / 60

    if direction in (NORTH, EAST):
        return Coordinate(decimal_degrees)
    if direction in (SOUTH, WEST):
        return Coordinate(-decimal_degrees)
    raise CoordinateFormatError(f"invalid direction [{direction}]")


def parse_decimal(value: str) -> Coordinate:
    """Parse a decimal-degrees coordinate, e.g. ``"151.196019"`` or ``"-33.5"``.

    Unsigned values with more than three characters before the decimal point
    are rejected: they cannot be decimal degrees and are most likely NMEA
    ``DDDMM.MMMM`` text that lost its hemisphere.

    Raises:
        CoordinateFormatError: If the value is not a number or fails the
            integer-part length check.
    """
    try:
        degrees = to_float(value)
    except ValueError as e:
        raise CoordinateFormatError("parse error (not decimal coordinate).") from e

    integer_part = value.split(DECIMAL_POINT)[0]
    if not value.startswith("-") and len(integer_part) > _MAXIMUM_DECIMAL_INTEGER_DIGITS:
        raise CoordinateFormatError("parse error (not decimal coordinate).")

    return Coordinate(degrees)


_NOTATION_PARSERS = (parse_dms, parse_gps_notation, parse_decimal)


def parse_coordinate(value: str) -> Coordinate:
    """Parse a coordinate in DMS, GPS or decimal notation.

    Notations are tried in that order and the first success wins. No range
    check is applied to the result; use ``Coordinate.valid_range`` where it
    matters.

    Args:
        value: Coordinate text, e.g. ``33° 23' 22"``, ``"15113.4322 S"`` or
            ``"151.196019"``.

    Returns:
        The parsed ``Coordinate``.

    Raises:
        CoordinateFormatError: If no notation matches.

    Example:
        >>> round(parse_coordinate("15113.4322 S").degrees, 5)
        -151.22387
        >>> parse_coordinate("1511.196019")
        Traceback (most recent call last):
        ...
        gpsnmea.errors.CoordinateFormatError: cannot parse [1511.196019], unknown format.
    """
    for parse in _NOTATION_PARSERS:
        try:
            return parse(value)
        except CoordinateFormatError:
            continue
    raise CoordinateFormatError(f"cannot parse [{value}], unknown format.")
