"""gpsnmea package for decoding NMEA 0183 GPS sentences and coordinates."""

from gpsnmea.coordinate import (
    Coordinate,
    parse_coordinate,
    parse_decimal,
    parse_dms,
    parse_gps_notation,
)
from gpsnmea.errors import (
    ChecksumMismatchError,
    CoordinateFormatError,
    FieldCountError,
    FieldMarkerMismatchError,
    InvalidFieldValueError,
    InvalidFixQualityError,
    InvalidFixTypeError,
    InvalidSelectionModeError,
    InvalidStatusError,
    MalformedFrameError,
    NMEAError,
    NumericFieldError,
    WrongSentenceTypeError,
)
from gpsnmea.nmea import (
    FixQuality,
    FixType,
    Frame,
    GPGGAData,
    GPGSAData,
    GPRMCData,
    GPVTGData,
    PSRFTXTData,
    SelectionMode,
    Sentence,
    Status,
    calculate_checksum,
    decode_frame,
    parse_gpgga,
    parse_gpgsa,
    parse_gprmc,
    parse_gpvtg,
    parse_psrftxt,
    parse_sentence,
    validate_checksum,
)

parse = parse_sentence

__all__ = [
    "ChecksumMismatchError",
    "Coordinate",
    "CoordinateFormatError",
    "FieldCountError",
    "FieldMarkerMismatchError",
    "FixQuality",
    "FixType",
    "Frame",
    "GPGGAData",
    "GPGSAData",
    "GPRMCData",
    "GPVTGData",
    "InvalidFieldValueError",
    "InvalidFixQualityError",
    "InvalidFixTypeError",
    "InvalidSelectionModeError",
    "InvalidStatusError",
    "MalformedFrameError",
    "NMEAError",
    "NumericFieldError",
    "PSRFTXTData",
    "SelectionMode",
    "Sentence",
    "Status",
    "WrongSentenceTypeError",
    "calculate_checksum",
    "decode_frame",
    "parse",
    "parse_coordinate",
    "parse_decimal",
    "parse_dms",
    "parse_gpgga",
    "parse_gpgsa",
    "parse_gprmc",
    "parse_gps_notation",
    "parse_gpvtg",
    "parse_psrftxt",
    "parse_sentence",
    "validate_checksum",
]
