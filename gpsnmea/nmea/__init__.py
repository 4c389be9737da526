"""NMEA 0183 decoder for GPGGA, GPGSA, GPRMC, GPVTG and PSRFTXT sentences."""

from gpsnmea.nmea.checksum import calculate_checksum, validate_checksum
from gpsnmea.nmea.gga import decode_gpgga, parse_gpgga
from gpsnmea.nmea.gsa import decode_gpgsa, parse_gpgsa
from gpsnmea.nmea.parser import parse_sentence, supported_sentence_types
from gpsnmea.nmea.rmc import decode_gprmc, parse_gprmc
from gpsnmea.nmea.sentence import decode_frame
from gpsnmea.nmea.txt import decode_psrftxt, parse_psrftxt
from gpsnmea.nmea.types import (
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
)
from gpsnmea.nmea.vtg import decode_gpvtg, parse_gpvtg

__all__ = [
    "FixQuality",
    "FixType",
    "Frame",
    "GPGGAData",
    "GPGSAData",
    "GPRMCData",
    "GPVTGData",
    "PSRFTXTData",
    "SelectionMode",
    "Sentence",
    "Status",
    "calculate_checksum",
    "decode_frame",
    "decode_gpgga",
    "decode_gpgsa",
    "decode_gprmc",
    "decode_gpvtg",
    "decode_psrftxt",
    "parse_gpgga",
    "parse_gpgsa",
    "parse_gprmc",
    "parse_gpvtg",
    "parse_psrftxt",
    "parse_sentence",
    "supported_sentence_types",
    "validate_checksum",
]
