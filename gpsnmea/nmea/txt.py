"""PSRFTXT sentence decoder.

PSRFTXT is a SiRF proprietary sentence carrying free-form text, typically
firmware version and configuration banners sent at start-up:

    $PSRFTXT,Version:  GSWLT3.5.0MMT_3.5.00.00-CONFIG-CL31P2.00 *26

The text is kept verbatim, including trailing spaces.
"""

from gpsnmea.nmea.fields import field_at, require_sentence_type
from gpsnmea.nmea.sentence import decode_frame
from gpsnmea.nmea.types import PREFIX_PSRFTXT, Frame, PSRFTXTData


def decode_psrftxt(frame: Frame) -> PSRFTXTData:
    """Decode the text field of an already-decoded PSRFTXT frame."""
    require_sentence_type(frame, PREFIX_PSRFTXT)
    return PSRFTXTData(frame=frame, text=field_at(frame, 0, "text"))


def parse_psrftxt(sentence: str) -> PSRFTXTData:
    """Parse a PSRFTXT sentence into structured data."""
    return decode_psrftxt(decode_frame(sentence))
