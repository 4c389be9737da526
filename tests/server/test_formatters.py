"""Tests for JSON formatting of decoded sentences."""

import json

import pytest

from gpsnmea import ChecksumMismatchError, Coordinate, parse_sentence
from server.formatters import (
    error_to_dict,
    format_coordinate,
    format_sentence_message,
    sentence_to_dict,
)
from tests.server.helpers import FOO_VALID, GSA_VALID, RMC_VALID


def test_format_coordinate() -> None:
    assert format_coordinate(Coordinate(-33.5)) == {
        "degrees": -33.5,
        "gps": "3330.0000",
        "dms": "33° 30' 0.000000\"",
    }


def test_rmc_to_dict() -> None:
    result = sentence_to_dict(parse_sentence(RMC_VALID))
    assert result["sentence_type"] == "GPRMC"
    assert result["checksum"] == "70"
    data = result["data"]
    assert data["status"] == "A"
    assert data["speed"] == pytest.approx(173.8)
    assert data["date"] == "130694"
    assert data["longitude"]["gps"] == "042.2400"


def test_gsa_enums_use_wire_values() -> None:
    data = sentence_to_dict(parse_sentence(GSA_VALID))["data"]
    assert data["mode"] == "A"
    assert data["fix_type"] == "3"


def test_frame_to_dict() -> None:
    result = sentence_to_dict(parse_sentence(FOO_VALID))
    assert result == {
        "type": "sentence",
        "sentence_type": "GPFOO",
        "raw": FOO_VALID,
        "fields": ["1", "2", "3.3", "x", "y", "zz", ""],
        "checksum": "51",
        "data": {},
    }


def test_error_to_dict() -> None:
    error = ChecksumMismatchError("51", "52")
    assert error_to_dict("$bad", error) == {
        "type": "error",
        "raw": "$bad",
        "kind": "ChecksumMismatchError",
        "error": "Sentence checksum mismatch [51 != 52]",
    }


def test_sentence_message_is_json() -> None:
    message = format_sentence_message(parse_sentence(GSA_VALID))
    assert json.loads(message)["data"]["sv"] == ["22", "19", "18", "27", "14", "03"]
