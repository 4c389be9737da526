"""GPRMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) carries time, date, position,
speed, course and magnetic variation in one sentence.

RMC Sentence Format:
    $GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*70
           |      | |       | |        | |     |     |      |     |
           |      | |       | |        | |     |     |      +-----+-- Magnetic variation + E/W
           |      | |       | |        | |     |     +-- Date (DDMMYY)
           |      | |       | |        | |     +-- Course over ground (degrees true)
           |      | |       | |        | +-- Speed over ground (knots)
           |      | |       | +--------+-- Longitude + E/W
           |      | +-------+-- Latitude + N/S
           |      +-- Status (A = valid, V = receiver warning)
           +-- UTC time (HHMMSS)
"""

from gpsnmea.errors import InvalidStatusError, NumericFieldError
from gpsnmea.nmea.fields import (
    field_at,
    parse_coordinate_field,
    parse_enumerated_field,
    parse_float_field,
    require_sentence_type,
)
from gpsnmea.nmea.sentence import decode_frame
from gpsnmea.nmea.types import PREFIX_GPRMC, Frame, GPRMCData, Status

_VARIATION_EAST = "E"
_VARIATION_WEST = "W"


def _decode_variation(frame: Frame) -> float:
    """Return the magnetic variation, negated when its direction is West.

    Raises:
        NumericFieldError: If the magnitude is not a number or the direction
            is neither "E" nor "W".
    """
    magnitude = parse_float_field(frame, 9, "variation")
    direction = field_at(frame, 10, "variation direction")
    if direction == _VARIATION_WEST:
        return -magnitude
    if direction != _VARIATION_EAST:
        raise NumericFieldError(frame.sentence_type, "variation", frame.raw)
    return magnitude


def decode_gprmc(frame: Frame) -> GPRMCData:
    """Decode the fields of an already-decoded GPRMC frame.

    Raises:
        WrongSentenceTypeError: If the frame is not a GPRMC.
        InvalidStatusError: If the status is not "A" or "V".
        CoordinateFormatError: If latitude or longitude are invalid.
        NumericFieldError: If speed, course or variation are invalid.
        FieldCountError: If the sentence is truncated.
    """
    require_sentence_type(frame, PREFIX_GPRMC)

    time = field_at(frame, 0, "time")
    status = parse_enumerated_field(frame, 1, "status", Status, InvalidStatusError)
    latitude = parse_coordinate_field(frame, 2, 3, "latitude")
    longitude = parse_coordinate_field(frame, 4, 5, "longitude")
    speed = parse_float_field(frame, 6, "speed")
    course = parse_float_field(frame, 7, "course")
    date = field_at(frame, 8, "date")
    variation = _decode_variation(frame)

    return GPRMCData(
        frame=frame,
        time=time,
        status=status,
        latitude=latitude,
        longitude=longitude,
        speed=speed,
        course=course,
        date=date,
        variation=variation,
    )


def parse_gprmc(sentence: str) -> GPRMCData:
    """Parse a GPRMC sentence into structured data.

    Example:
        >>> rmc = parse_gprmc("$GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*70")
        >>> rmc.variation
        -4.2
        >>> rmc.longitude.to_gps_notation()
        '042.2400'
    """
    return decode_gprmc(decode_frame(sentence))
