"""Generic sentence (frame) decoding.

Sentence Format:
    $GPFOO,1,2,3.3,x,y,zz,*51
     |     |              | |
     |     |              | +-- checksum (hex, case-insensitive, unpadded)
     |     |              +-- checksum separator (exactly one)
     |     +-- fields (comma-separated, empty fields preserved)
     +-- sentence type

Checks run in a fixed order so that a given bad input always produces the
same error:
    1. exactly one '*'              -> MalformedFrameError
    2. '$' at position 0            -> MalformedFrameError
    3. checksum matches the body    -> ChecksumMismatchError
    4. non-empty sentence type      -> MalformedFrameError
"""

from gpsnmea.errors import ChecksumMismatchError, MalformedFrameError
from gpsnmea.nmea.checksum import (
    CHECKSUM_SEPARATOR,
    SENTENCE_START,
    calculate_checksum,
)
from gpsnmea.nmea.types import Frame

FIELD_SEPARATOR = ","


def decode_frame(sentence: str) -> Frame:
    """Decode the envelope of an NMEA sentence and verify its checksum.

    The input must be one complete sentence; surrounding whitespace such as a
    trailing "\\r\\n" is not stripped and will end up in the checksum text.

    Args:
        sentence: Raw NMEA sentence, e.g. "$GPFOO,1,2,3.3,x,y,zz,*51".

    Returns:
        The decoded ``Frame``.

    Raises:
        MalformedFrameError: If the sentence does not contain exactly one '*',
            does not start with '$', or has an empty sentence type.
        ChecksumMismatchError: If the computed checksum differs from the one
            in the sentence.

    Example:
        >>> decode_frame("$GPFOO,1,2,3.3,x,y,zz,*52")
        Traceback (most recent call last):
        ...
        gpsnmea.errors.ChecksumMismatchError: Sentence checksum mismatch [51 != 52]
    """
    if sentence.count(CHECKSUM_SEPARATOR) != 1:
        raise MalformedFrameError(
            "Sentence does not contain single checksum separator"
        )
    if not sentence.startswith(SENTENCE_START):
        raise MalformedFrameError("Sentence does not start with a '$'")

    content, _, checksum = sentence[1:].partition(CHECKSUM_SEPARATOR)
    sentence_type, *fields = content.split(FIELD_SEPARATOR)
    checksum = checksum.upper()

    calculated = calculate_checksum(content)
    if calculated != checksum:
        raise ChecksumMismatchError(calculated, checksum)

    if not sentence_type:
        raise MalformedFrameError("Sentence type is empty")

    return Frame(
        raw=sentence,
        sentence_type=sentence_type,
        fields=tuple(fields),
        checksum=checksum,
    )
