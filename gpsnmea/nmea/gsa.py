"""GPGSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used for the fix
and the dilution-of-precision figures.

GSA Sentence Format:
    $GPGSA,A,3,22,19,18,27,14,03,,,,,,,3.1,2.0,2.4*36
           | | |                       |   |   |
           | | |                       |   |   +-- VDOP
           | | |                       |   +-- HDOP
           | | |                       +-- PDOP
           | | +-- 12 satellite PRN slots (unused slots are empty)
           | +-- Fix type (1 = none, 2 = 2D, 3 = 3D)
           +-- Selection mode (A = automatic, M = manual)
"""

from gpsnmea.errors import InvalidFixTypeError, InvalidSelectionModeError
from gpsnmea.nmea.fields import (
    field_at,
    parse_enumerated_field,
    require_sentence_type,
)
from gpsnmea.nmea.sentence import decode_frame
from gpsnmea.nmea.types import (
    PREFIX_GPGSA,
    FixType,
    Frame,
    GPGSAData,
    SelectionMode,
)

_FIRST_SATELLITE_SLOT = 2
_SATELLITE_SLOT_COUNT = 12


def _collect_satellites(frame: Frame) -> tuple[str, ...]:
    """Return the non-empty PRNs from the twelve satellite slots, in order."""
    last = _FIRST_SATELLITE_SLOT + _SATELLITE_SLOT_COUNT
    slots = (
        field_at(frame, index, "satellite in view")
        for index in range(_FIRST_SATELLITE_SLOT, last)
    )
    return tuple(prn for prn in slots if prn)


def decode_gpgsa(frame: Frame) -> GPGSAData:
    """Decode the fields of an already-decoded GPGSA frame.

    Raises:
        WrongSentenceTypeError: If the frame is not a GPGSA.
        InvalidSelectionModeError: If the mode is not "A" or "M".
        InvalidFixTypeError: If the fix type is not "1", "2" or "3".
        FieldCountError: If the sentence is truncated.
    """
    require_sentence_type(frame, PREFIX_GPGSA)

    mode = parse_enumerated_field(
        frame, 0, "selection mode", SelectionMode, InvalidSelectionModeError
    )
    fix_type = parse_enumerated_field(
        frame, 1, "fix type", FixType, InvalidFixTypeError
    )
    sv = _collect_satellites(frame)

    return GPGSAData(
        frame=frame,
        mode=mode,
        fix_type=fix_type,
        sv=sv,
        pdop=field_at(frame, 14, "pdop"),
        hdop=field_at(frame, 15, "hdop"),
        vdop=field_at(frame, 16, "vdop"),
    )


def parse_gpgsa(sentence: str) -> GPGSAData:
    """Parse a GPGSA sentence into structured data.

    Example:
        >>> gsa = parse_gpgsa("$GPGSA,A,3,22,19,18,27,14,03,,,,,,,3.1,2.0,2.4*36")
        >>> gsa.sv
        ('22', '19', '18', '27', '14', '03')
    """
    return decode_gpgsa(decode_frame(sentence))
