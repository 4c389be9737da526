"""NMEA field access utilities shared by the sentence decoders.

Decoders read fields positionally from a decoded ``Frame``. Unlike a lenient
reader, every helper here raises on bad input: a missing position raises
``FieldCountError``, and conversion failures raise the error kind the
decoders report. Fields are read in wire order, so the first invalid field
determines the error.
"""

from enum import Enum
from typing import TypeVar

from gpsnmea.coordinate import Coordinate, parse_coordinate
from gpsnmea.errors import (
    CoordinateFormatError,
    FieldCountError,
    InvalidFieldValueError,
    NumericFieldError,
    WrongSentenceTypeError,
)
from gpsnmea.nmea.types import Frame
from gpsnmea.numbers import to_float

EnumT = TypeVar("EnumT", bound=Enum)


def require_sentence_type(frame: Frame, expected: str) -> None:
    """Ensure a frame has the sentence type a decoder expects.

    Raises:
        WrongSentenceTypeError: If ``frame.sentence_type`` differs, e.g.
            "GPVTG is not a GPGSA".
    """
    if frame.sentence_type != expected:
        raise WrongSentenceTypeError(frame.sentence_type, expected)


def field_at(frame: Frame, index: int, name: str) -> str:
    """Return the raw text of field ``index``.

    Args:
        frame: Decoded frame.
        index: Zero-based position after the sentence type.
        name: Human-readable field name used in the error message.

    Raises:
        FieldCountError: If the sentence has fewer than ``index + 1`` fields.

    Example:
        >>> from gpsnmea import decode_frame
        >>> field_at(decode_frame("$GPFOO,1,2,3.3,x,y,zz,*51"), 2, "value")
        '3.3'
    """
    try:
        return frame.fields[index]
    except IndexError as e:
        raise FieldCountError(frame.sentence_type, index, name) from e


def parse_enumerated_field(
    frame: Frame,
    index: int,
    name: str,
    enumeration: type[EnumT],
    error: type[InvalidFieldValueError],
) -> EnumT:
    """Parse field ``index`` as a member of a ``str``-valued enumeration.

    Raises:
        FieldCountError: If the field is missing.
        InvalidFieldValueError: The given ``error`` subclass, carrying the
            raw token, if the value is not a member of ``enumeration``.
    """
    value = field_at(frame, index, name)
    try:
        return enumeration(value)
    except ValueError as e:
        raise error(value) from e


def parse_float_field(frame: Frame, index: int, name: str) -> float:
    """Parse field ``index`` as a float.

    Empty fields are not treated as "no data": they fail like any other
    non-numeric text.

    Raises:
        FieldCountError: If the field is missing.
        NumericFieldError: If the field is not a number. The message names
            the whole raw sentence, e.g. "GPRMC decode speed error for: $GP...".
    """
    value = field_at(frame, index, name)
    try:
        return to_float(value)
    except ValueError as e:
        raise NumericFieldError(frame.sentence_type, name, frame.raw) from e


def parse_coordinate_field(
    frame: Frame,
    value_index: int,
    hemisphere_index: int,
    name: str,
) -> Coordinate:
    """Parse a coordinate stored as a value field followed by a hemisphere field.

    The two fields are joined with a space ("3356.4650 S") and handed to
    ``parse_coordinate``, which resolves them through the GPS notation.

    Raises:
        FieldCountError: If either field is missing.
        CoordinateFormatError: If the pair is not a valid coordinate, with a
            message such as "GPRMC decode latitude error: cannot parse [...]".
    """
    value = field_at(frame, value_index, name)
    hemisphere = field_at(frame, hemisphere_index, f"{name} hemisphere")
    try:
        return parse_coordinate(f"{value} {hemisphere}")
    except CoordinateFormatError as e:
        raise CoordinateFormatError(
            f"{frame.sentence_type} decode {name} error: {e}"
        ) from e
