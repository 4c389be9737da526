"""GPVTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides heading and ground speed.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48
           |     | |     | |     | |     |
           |     | |     | |     | +-----+-- Speed in km/h + 'K'
           |     | |     | +-----+-- Speed in knots + 'N'
           |     | +-----+-- Track (magnetic north, degrees) + 'M'
           +-----+-- Track (true north, degrees) + 'T'

Each value is followed by a literal unit marker. The markers are checked;
the values are kept as sent, since they are often empty (no heading while
stationary). A trailing FAA mode field, if present, is ignored.
"""

from gpsnmea.errors import FieldMarkerMismatchError
from gpsnmea.nmea.fields import field_at, require_sentence_type
from gpsnmea.nmea.sentence import decode_frame
from gpsnmea.nmea.types import PREFIX_GPVTG, Frame, GPVTGData


def _value_with_marker(frame: Frame, index: int, name: str, marker: str) -> str:
    """Return field ``index`` after checking that field ``index + 1`` is ``marker``.

    Raises:
        FieldMarkerMismatchError: If the marker field holds another value.
    """
    value = field_at(frame, index, name)
    actual = field_at(frame, index + 1, f"{name} unit")
    if actual != marker:
        raise FieldMarkerMismatchError(marker, actual)
    return value


def decode_gpvtg(frame: Frame) -> GPVTGData:
    """Decode the fields of an already-decoded GPVTG frame.

    Raises:
        WrongSentenceTypeError: If the frame is not a GPVTG.
        FieldMarkerMismatchError: If a unit marker is not T, M, N or K in
            its respective position.
        FieldCountError: If the sentence is truncated.
    """
    require_sentence_type(frame, PREFIX_GPVTG)

    true_track = _value_with_marker(frame, 0, "true track", "T")
    magnetic_track = _value_with_marker(frame, 2, "magnetic track", "M")
    speed_knots = _value_with_marker(frame, 4, "speed (knots)", "N")
    speed_kph = _value_with_marker(frame, 6, "speed (km/h)", "K")

    return GPVTGData(
        frame=frame,
        true_track=true_track,
        magnetic_track=magnetic_track,
        speed_knots=speed_knots,
        speed_kph=speed_kph,
    )


def parse_gpvtg(sentence: str) -> GPVTGData:
    """Parse a GPVTG sentence into structured data.

    Example:
        >>> vtg = parse_gpvtg("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48")
        >>> vtg.speed_kph
        '010.2'
        >>> parse_gpvtg("$GPVTG,054.7,G,034.4,M,005.5,N,010.2,K*5B")
        Traceback (most recent call last):
        ...
        gpsnmea.errors.FieldMarkerMismatchError: field expected 'T' got 'G'
    """
    return decode_gpvtg(decode_frame(sentence))
