"""Sentence type dispatch.

``parse_sentence`` is the generic entry point: it decodes the frame once,
then hands it to the decoder registered for its exact sentence type. Types
without a decoder are not an error; the generic ``Frame`` is returned.
"""

import logging
from collections.abc import Callable

from gpsnmea.nmea.gga import decode_gpgga
from gpsnmea.nmea.gsa import decode_gpgsa
from gpsnmea.nmea.rmc import decode_gprmc
from gpsnmea.nmea.sentence import decode_frame
from gpsnmea.nmea.txt import decode_psrftxt
from gpsnmea.nmea.types import (
    PREFIX_GPGGA,
    PREFIX_GPGSA,
    PREFIX_GPRMC,
    PREFIX_GPVTG,
    PREFIX_PSRFTXT,
    Frame,
    Sentence,
)
from gpsnmea.nmea.vtg import decode_gpvtg

logger = logging.getLogger(__name__)

# Exact, case-sensitive match on the sentence type
_DECODERS: dict[str, Callable[[Frame], Sentence]] = {
    PREFIX_GPGGA: decode_gpgga,
    PREFIX_GPGSA: decode_gpgsa,
    PREFIX_GPRMC: decode_gprmc,
    PREFIX_GPVTG: decode_gpvtg,
    PREFIX_PSRFTXT: decode_psrftxt,
}


def supported_sentence_types() -> tuple[str, ...]:
    """Return the sentence types that decode into a typed record."""
    return tuple(_DECODERS)


def parse_sentence(sentence: str) -> Sentence:
    """Parse an NMEA sentence into the record for its type.

    Args:
        sentence: One complete raw sentence, e.g. "$GPGSA,A,3,...*36".

    Returns:
        A ``GPGGAData``, ``GPGSAData``, ``GPRMCData``, ``GPVTGData`` or
        ``PSRFTXTData`` for supported types, or the generic ``Frame`` for
        any other type.

    Raises:
        NMEAError: The frame or variant error, unchanged.

    Example:
        >>> type(parse_sentence("$GPFOO,1,2,3.3,x,y,zz,*51")).__name__
        'Frame'
        >>> parse_sentence("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48").speed_knots
        '005.5'
    """
    frame = decode_frame(sentence)
    decoder = _DECODERS.get(frame.sentence_type)
    if decoder is None:
        logger.debug(
            "No decoder for sentence type %s, returning generic frame",
            frame.sentence_type,
        )
        return frame
    return decoder(frame)
