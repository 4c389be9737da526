"""JSON formatting utilities for decoded sentences."""

import json
from functools import singledispatch
from typing import Any

from gpsnmea import (
    Coordinate,
    Frame,
    GPGGAData,
    GPGSAData,
    GPRMCData,
    GPVTGData,
    NMEAError,
    PSRFTXTData,
    Sentence,
)

__all__ = [
    "format_coordinate",
    "format_sentence_message",
    "sentence_to_dict",
    "error_to_dict",
]


def format_coordinate(coordinate: Coordinate) -> dict[str, Any]:
    """Describe a coordinate in all renderings clients use."""
    return {
        "degrees": coordinate.degrees,
        "gps": coordinate.to_gps_notation(),
        "dms": coordinate.to_dms(),
    }


@singledispatch
def _record_fields(sentence: Sentence) -> dict[str, Any]:
    raise TypeError(f"Unsupported sentence record {type(sentence).__name__}")


@_record_fields.register
def _(sentence: Frame) -> dict[str, Any]:
    return {}


@_record_fields.register
def _(sentence: GPGGAData) -> dict[str, Any]:
    return {
        "time": sentence.time,
        "latitude": format_coordinate(sentence.latitude),
        "longitude": format_coordinate(sentence.longitude),
        "fix_quality": sentence.fix_quality.value,
        "num_satellites": sentence.num_satellites,
        "hdop": sentence.hdop,
        "altitude": sentence.altitude,
        "separation": sentence.separation,
        "dgps_age": sentence.dgps_age,
        "dgps_id": sentence.dgps_id,
    }


@_record_fields.register
def _(sentence: GPGSAData) -> dict[str, Any]:
    return {
        "mode": sentence.mode.value,
        "fix_type": sentence.fix_type.value,
        "sv": list(sentence.sv),
        "pdop": sentence.pdop,
        "hdop": sentence.hdop,
        "vdop": sentence.vdop,
    }


@_record_fields.register
def _(sentence: GPRMCData) -> dict[str, Any]:
    return {
        "time": sentence.time,
        "status": sentence.status.value,
        "latitude": format_coordinate(sentence.latitude),
        "longitude": format_coordinate(sentence.longitude),
        "speed": sentence.speed,
        "course": sentence.course,
        "date": sentence.date,
        "variation": sentence.variation,
    }


@_record_fields.register
def _(sentence: GPVTGData) -> dict[str, Any]:
    return {
        "true_track": sentence.true_track,
        "magnetic_track": sentence.magnetic_track,
        "speed_knots": sentence.speed_knots,
        "speed_kph": sentence.speed_kph,
    }


@_record_fields.register
def _(sentence: PSRFTXTData) -> dict[str, Any]:
    return {"text": sentence.text}


def sentence_to_dict(sentence: Sentence) -> dict[str, Any]:
    """Convert a decoded sentence into a JSON-compatible dictionary.

    Every message carries the generic frame (``sentence_type``, ``raw``,
    ``fields``, ``checksum``); typed records add their decoded values under
    ``data``, which is empty for sentence types without a decoder.
    """
    frame = sentence if isinstance(sentence, Frame) else sentence.frame
    return {
        "type": "sentence",
        "sentence_type": frame.sentence_type,
        "raw": frame.raw,
        "fields": list(frame.fields),
        "checksum": frame.checksum,
        "data": _record_fields(sentence),
    }


def error_to_dict(raw: str, error: NMEAError) -> dict[str, Any]:
    """Describe a decode failure; ``error`` holds the exact exception message."""
    return {
        "type": "error",
        "raw": raw,
        "kind": type(error).__name__,
        "error": str(error),
    }


def format_sentence_message(sentence: Sentence) -> str:
    """Serialize a decoded sentence into a JSON string for WebSocket transmission."""
    return json.dumps(sentence_to_dict(sentence))
