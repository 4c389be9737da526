"""Latitude/longitude parsing in DMS, GPS (NMEA) and decimal notation."""

from gpsnmea.coordinate.parser import (
    parse_coordinate,
    parse_decimal,
    parse_dms,
    parse_gps_notation,
)
from gpsnmea.coordinate.types import Coordinate

__all__ = [
    "Coordinate",
    "parse_coordinate",
    "parse_decimal",
    "parse_dms",
    "parse_gps_notation",
]
