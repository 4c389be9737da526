"""NMEA checksum calculation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all bytes between '$' and '*' (exclusive),
then written after the '*' as an uppercase hexadecimal number.

The checksum is rendered WITHOUT zero padding: a value of 0x0D is written
as "D", not "0D". Receivers in the field emit this form and a padded
checksum is treated as a mismatch.

Example sentence structure:
    $GPVTG,356.10,T,,M,0.55,N,1.0,K,A*D
    ^      checksum content          ^^
    start                     checksum (0x0D = 13)
"""

SENTENCE_START = "$"
CHECKSUM_SEPARATOR = "*"


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPFOO,1,2*51")

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - Missing '$' start delimiter
        - Zero or more than one '*' checksum delimiter

    Example:
        >>> _extract_checksum_parts("$GPFOO,1,2,3.3,x,y,zz,*51")
        ('GPFOO,1,2,3.3,x,y,zz,', '51')
    """
    if sentence.count(CHECKSUM_SEPARATOR) != 1:
        return None
    if not sentence.startswith(SENTENCE_START):
        return None

    content, _, provided = sentence[1:].partition(CHECKSUM_SEPARATOR)
    return content, provided


def calculate_checksum(content: str) -> str:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs every byte of the content. The result
    is formatted as uppercase hexadecimal without zero padding.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Checksum as uppercase hex, e.g. "51" or "D"

    Example:
        >>> calculate_checksum("GPFOO,1,2,3.3,x,y,zz,")
        '51'
    """
    result = 0
    for byte in content.encode("utf-8"):
        result ^= byte
    return f"{result:X}"


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Performs end-to-end validation by:
    1. Extracting the content between '$' and '*'
    2. Computing the XOR of all content bytes
    3. Comparing against the provided checksum (case-insensitive)

    Unlike ``decode_frame`` this never raises; it is meant for filtering.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.

    Returns:
        True if the checksum is valid, False if the envelope is malformed or
        the calculated checksum doesn't match the provided one.

    Example:
        >>> validate_checksum("$GPFOO,1,2,3.3,x,y,zz,*51")
        True
        >>> validate_checksum("$GPFOO,1,2,3.3,x,y,zz,*52")
        False
    """
    parts = _extract_checksum_parts(sentence)
    if parts is None:
        return False

    content, provided = parts
    return calculate_checksum(content) == provided.upper()
