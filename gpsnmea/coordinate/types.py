"""Coordinate value type.

A ``Coordinate`` is a signed decimal-degrees value: positive for North/East,
negative for South/West. It carries no notion of whether it is a latitude or a
longitude; NMEA decoders know that from the field position.
"""

import math
from dataclasses import dataclass

_MINUTES_PER_DEGREE = 60
_SECONDS_PER_DEGREE = 3600
_MAXIMUM_ABSOLUTE_DEGREES = 180.0


@dataclass(frozen=True)
class Coordinate:
    """Latitude or longitude in signed decimal degrees.

    Attributes:
        degrees: Decimal degrees, positive = North/East, negative = South/West.

    Example:
        >>> from gpsnmea import parse_coordinate
        >>> coordinate = parse_coordinate("3356.4650 S")
        >>> round(coordinate.degrees, 6)
        -33.941083
        >>> coordinate.to_gps_notation()
        '3356.4650'
    """

    degrees: float

    def __float__(self) -> float:
        return self.degrees

    def _split_degrees(self) -> tuple[int, float]:
        """Return integer degrees and the remaining fraction of the absolute value."""
        value = abs(self.degrees)
        whole = math.floor(value)
        return whole, value - whole

    def to_gps_notation(self) -> str:
        """Render as NMEA ``DDMM.MMMM`` / ``DDDMM.MMMM`` without hemisphere.

        Minutes are padded to two integer digits and always carry four
        decimals. The sign is not rendered; NMEA encodes it in a separate
        hemisphere field.

        Example:
            >>> Coordinate(-0.704).to_gps_notation()
            '042.2400'
        """
        whole, fraction = self._split_degrees()
        minutes = fraction * _MINUTES_PER_DEGREE
        padding = "0" if minutes < 10 else ""
        return f"{whole}{padding}{minutes:.4f}"

    def to_dms(self) -> str:
        """Render as degrees, minutes, seconds, e.g. ``33° 23' 22.000000"``."""
        whole, fraction = self._split_degrees()
        minutes = math.floor(_MINUTES_PER_DEGREE * fraction)
        seconds = _SECONDS_PER_DEGREE * (fraction - minutes / _MINUTES_PER_DEGREE)
        return f"{whole}° {minutes}' {seconds:f}\""

    def valid_range(self) -> bool:
        """Return True if the value lies within [-180, 180] degrees."""
        return -_MAXIMUM_ABSOLUTE_DEGREES <= self.degrees <= _MAXIMUM_ABSOLUTE_DEGREES

    def is_near(self, other: "Coordinate", max_distance: float) -> bool:
        """Return True if ``other`` is at most ``max_distance`` degrees away."""
        return abs(self.degrees - other.degrees) <= max_distance
