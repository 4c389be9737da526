"""Exceptions raised while decoding NMEA sentences and coordinates.

Every exception derives from ``NMEAError``, itself a ``ValueError``, so callers
that only care about "bad input" can catch a single type. Messages are part of
the public contract: they reproduce the exact wording consumers match against.

Hierarchy:
    NMEAError
    ├── MalformedFrameError        envelope violations ('$' / '*')
    ├── ChecksumMismatchError      computed != declared checksum
    ├── WrongSentenceTypeError     prefix does not match the requested decoder
    ├── FieldCountError            a positional field is missing
    ├── InvalidFieldValueError     enumerated field outside its allowed set
    │   ├── InvalidFixQualityError
    │   ├── InvalidSelectionModeError
    │   ├── InvalidFixTypeError
    │   └── InvalidStatusError
    ├── FieldMarkerMismatchError   unit marker (T/M/N/K) mismatch
    ├── NumericFieldError          numeric field failed to parse
    └── CoordinateFormatError      no coordinate notation matched
"""


class NMEAError(ValueError):
    """Base class for all sentence and coordinate decoding failures."""


class MalformedFrameError(NMEAError):
    """The ``$...*hh`` envelope of a sentence is invalid."""


class ChecksumMismatchError(NMEAError):
    """The XOR checksum computed over the sentence body does not match.

    Attributes:
        calculated: Checksum computed from the sentence body (uppercase hex,
            no zero padding).
        expected: Checksum declared after the ``*`` separator (uppercased).
    """

    def __init__(self, calculated: str, expected: str) -> None:
        self.calculated = calculated
        self.expected = expected
        super().__init__(f"Sentence checksum mismatch [{calculated} != {expected}]")


class WrongSentenceTypeError(NMEAError):
    """A variant decoder was handed a sentence of another type."""

    def __init__(self, actual: str, expected: str) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"{actual} is not a {expected}")


class FieldCountError(NMEAError):
    """A sentence ended before a required positional field."""

    def __init__(self, sentence_type: str, index: int, field_name: str) -> None:
        self.sentence_type = sentence_type
        self.index = index
        self.field_name = field_name
        super().__init__(
            f"{sentence_type} decode, missing field {index} ({field_name})"
        )


class InvalidFieldValueError(NMEAError):
    """An enumerated field holds a value outside its allowed set.

    Subclasses only provide ``message_format``; the offending raw token is
    kept in ``value``.
    """

    message_format = "Invalid field value [{value}]"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(self.message_format.format(value=value))


class InvalidFixQualityError(InvalidFieldValueError):
    message_format = "Invalid fix quality [{value}]"


class InvalidSelectionModeError(InvalidFieldValueError):
    message_format = "Invalid selection mode [{value}]"


class InvalidFixTypeError(InvalidFieldValueError):
    message_format = "Invalid fix type [{value}]"


class InvalidStatusError(InvalidFieldValueError):
    message_format = "GPRMC decode, invalid status '{value}'"


class FieldMarkerMismatchError(NMEAError):
    """A literal unit-marker field does not hold the expected letter."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"field expected '{expected}' got '{actual}'")


class NumericFieldError(NMEAError):
    """A field expected to be numeric could not be parsed.

    The message names the whole raw sentence, not just the field, so the
    offending input can be found in logs.
    """

    def __init__(self, sentence_type: str, field_name: str, sentence: str) -> None:
        self.sentence_type = sentence_type
        self.field_name = field_name
        self.sentence = sentence
        super().__init__(f"{sentence_type} decode {field_name} error for: {sentence}")


class CoordinateFormatError(NMEAError):
    """A coordinate string matched none of the supported notations."""
