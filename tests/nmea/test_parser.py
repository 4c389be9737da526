"""Tests for sentence type dispatch."""

import logging
import re

import pytest

import gpsnmea
from gpsnmea import (
    ChecksumMismatchError,
    FieldMarkerMismatchError,
    Frame,
    GPGGAData,
    GPGSAData,
    GPRMCData,
    GPVTGData,
    InvalidFixQualityError,
    MalformedFrameError,
    PSRFTXTData,
    decode_frame,
    parse_gpgga,
    parse_gpgsa,
    parse_gprmc,
    parse_gpvtg,
    parse_psrftxt,
    parse_sentence,
)
from gpsnmea.nmea import supported_sentence_types

GGA_VALID = "$GPGGA,034225.077,3356.4650,S,15124.5567,E,1,03,9.7,-25.0,M,21.0,M,,0000*51"
GSA_VALID = "$GPGSA,A,3,22,19,18,27,14,03,,,,,,,3.1,2.0,2.4*36"
RMC_VALID = "$GPRMC,220516,A,5133.82,N,00042.24,W,173.8,231.8,130694,004.2,W*70"
VTG_VALID = "$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K*48"
TXT_VALID = "$PSRFTXT,Version:  GSWLT3.5.0MMT_3.5.00.00-CONFIG-CL31P2.00 *26"
FOO_VALID = "$GPFOO,1,2,3.3,x,y,zz,*51"


class TestParseSentence:
    """Tests for parse_sentence function."""

    def test_dispatches_by_sentence_type(self):
        for sentence, record_type in [
            (GGA_VALID, GPGGAData),
            (GSA_VALID, GPGSAData),
            (RMC_VALID, GPRMCData),
            (VTG_VALID, GPVTGData),
            (TXT_VALID, PSRFTXTData),
        ]:
            assert isinstance(parse_sentence(sentence), record_type), sentence

    def test_matches_direct_decoders(self):
        assert parse_sentence(GGA_VALID) == parse_gpgga(GGA_VALID)
        assert parse_sentence(GSA_VALID) == parse_gpgsa(GSA_VALID)
        assert parse_sentence(RMC_VALID) == parse_gprmc(RMC_VALID)
        assert parse_sentence(VTG_VALID) == parse_gpvtg(VTG_VALID)
        assert parse_sentence(TXT_VALID) == parse_psrftxt(TXT_VALID)

    def test_unknown_type_returns_frame(self):
        result = parse_sentence(FOO_VALID)
        assert type(result) is Frame
        assert result == decode_frame(FOO_VALID)

    def test_type_match_is_case_sensitive(self):
        result = parse_sentence("$gpgga,1*6B")
        assert type(result) is Frame
        assert result.sentence_type == "gpgga"

    def test_repeated_parse_is_equal(self):
        assert parse_sentence(RMC_VALID) == parse_sentence(RMC_VALID)

    def test_frame_errors_propagate(self):
        with pytest.raises(
            ChecksumMismatchError, match=re.escape("Sentence checksum mismatch [51 != 52]")
        ):
            parse_sentence("$GPFOO,1,2,3.3,x,y,zz,*52")
        with pytest.raises(MalformedFrameError):
            parse_sentence("GPFOO,1,2")

    def test_variant_errors_propagate(self):
        with pytest.raises(InvalidFixQualityError):
            parse_sentence(
                "$GPGGA,034225.077,3356.4650,S,15124.5567,E,5,03,9.7,-25.0,M,21.0,M,,0000*55"
            )
        with pytest.raises(FieldMarkerMismatchError):
            parse_sentence("$GPVTG,054.7,G,034.4,M,005.5,N,010.2,K*5B")

    def test_unknown_type_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="gpsnmea.nmea.parser"):
            parse_sentence(FOO_VALID)
        assert "GPFOO" in caplog.text

    def test_parse_alias(self):
        assert gpsnmea.parse is parse_sentence


class TestSupportedSentenceTypes:
    """Tests for supported_sentence_types function."""

    def test_lists_decoded_types(self):
        assert supported_sentence_types() == ("GPGGA", "GPGSA", "GPRMC", "GPVTG", "PSRFTXT")
