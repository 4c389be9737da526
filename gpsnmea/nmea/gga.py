"""GPGGA sentence decoder.

GGA (Global Positioning System Fix Data) provides the position fix, its
quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,034225.077,3356.4650,S,15124.5567,E,1,03,9.7,-25.0,M,21.0,M,,0000*51
           |          |         | |          | | |  |   |     | |    | | |
           |          |         | |          | | |  |   |     | |    | | +-- DGPS station ID
           |          |         | |          | | |  |   |     | |    | +-- DGPS age (may be empty)
           |          |         | |          | | |  |   |     | +----+-- Geoid separation + unit
           |          |         | |          | | |  |   +-----+-- Altitude + unit
           |          |         | |          | | |  +-- HDOP
           |          |         | |          | | +-- Number of satellites
           |          |         | |          | +-- Fix quality (0, 1 or 2)
           |          |         | +----------+-- Longitude + E/W
           |          +---------+-- Latitude + N/S
           +-- UTC time (HHMMSS.sss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS)
    2 = DGPS fix
Any other value is rejected.
"""

from gpsnmea.errors import InvalidFixQualityError
from gpsnmea.nmea.fields import (
    field_at,
    parse_coordinate_field,
    parse_enumerated_field,
    require_sentence_type,
)
from gpsnmea.nmea.sentence import decode_frame
from gpsnmea.nmea.types import PREFIX_GPGGA, FixQuality, Frame, GPGGAData


def decode_gpgga(frame: Frame) -> GPGGAData:
    """Decode the fields of an already-decoded GPGGA frame.

    Fields are validated in wire order; the first failure is raised.

    Raises:
        WrongSentenceTypeError: If the frame is not a GPGGA.
        CoordinateFormatError: If latitude or longitude are invalid.
        InvalidFixQualityError: If the fix quality is not 0, 1 or 2.
        FieldCountError: If the sentence is truncated.
    """
    require_sentence_type(frame, PREFIX_GPGGA)

    time = field_at(frame, 0, "time")
    latitude = parse_coordinate_field(frame, 1, 2, "latitude")
    longitude = parse_coordinate_field(frame, 3, 4, "longitude")
    fix_quality = parse_enumerated_field(
        frame, 5, "fix quality", FixQuality, InvalidFixQualityError
    )

    # 9 and 11 are the altitude/separation units, always "M"
    return GPGGAData(
        frame=frame,
        time=time,
        latitude=latitude,
        longitude=longitude,
        fix_quality=fix_quality,
        num_satellites=field_at(frame, 6, "number of satellites"),
        hdop=field_at(frame, 7, "hdop"),
        altitude=field_at(frame, 8, "altitude"),
        separation=field_at(frame, 10, "separation"),
        dgps_age=field_at(frame, 12, "dgps age"),
        dgps_id=field_at(frame, 13, "dgps id"),
    )


def parse_gpgga(sentence: str) -> GPGGAData:
    """Parse a GPGGA sentence into structured data.

    Args:
        sentence: Raw NMEA GPGGA sentence string

    Returns:
        The decoded ``GPGGAData``.

    Raises:
        NMEAError: Any frame or field error; see ``decode_frame`` and
            ``decode_gpgga``.

    Example:
        >>> gga = parse_gpgga("$GPGGA,034225.077,3356.4650,S,15124.5567,E,1,03,9.7,-25.0,M,21.0,M,,0000*51")
        >>> gga.fix_quality
        <FixQuality.GPS: '1'>
        >>> gga.latitude.to_gps_notation()
        '3356.4650'
    """
    return decode_gpgga(decode_frame(sentence))
