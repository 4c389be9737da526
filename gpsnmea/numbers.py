"""Strict conversion of numeric field text.

NMEA numbers are plain ASCII decimals. ``int()`` and ``float()`` are more
lenient: they accept surrounding whitespace, ``_`` digit separators, non-ASCII
digits and words such as "inf". Text is matched against a pattern first so
that anything else is rejected.

Accepted forms:
    Integer:  [+-]digits                      "33", "-7"
    Decimal:  [+-]digits[.digits][e[+-]digits]  "173.8", ".5", "3.", "1e3"
"""

import re

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def to_int(text: str) -> int:
    """Convert ASCII integer text to an int.

    Raises:
        ValueError: If ``text`` is not a plain integer.
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def to_float(text: str) -> float:
    """Convert ASCII decimal text to a float.

    Raises:
        ValueError: If ``text`` is not a plain decimal number.

    Example:
        >>> to_float("173.8")
        173.8
        >>> to_float("1_73.8")
        Traceback (most recent call last):
        ...
        ValueError: invalid number: '1_73.8'
    """
    if _DECIMAL_PATTERN.fullmatch(text) is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(text)
