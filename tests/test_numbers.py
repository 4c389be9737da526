"""Tests for strict numeric text conversion."""

import pytest

from gpsnmea.numbers import to_float, to_int


class TestToInt:
    """Tests for to_int function."""

    def test_plain_integers(self):
        assert to_int("33") == 33
        assert to_int("-7") == -7
        assert to_int("007") == 7

    def test_lenient_forms_rejected(self):
        for text in ["", " 33", "33 ", "3_3", "٣٣", "33.0"]:
            with pytest.raises(ValueError):
                to_int(text)


class TestToFloat:
    """Tests for to_float function."""

    def test_plain_decimals(self):
        assert to_float("173.8") == pytest.approx(173.8)
        assert to_float("-25.0") == pytest.approx(-25.0)
        assert to_float(".5") == pytest.approx(0.5)
        assert to_float("3.") == pytest.approx(3.0)
        assert to_float("1e3") == pytest.approx(1000.0)

    def test_lenient_forms_rejected(self):
        for text in ["", ".", " 231.8", "231.8\n", "1_73.8", "١٧٣.٨", "inf", "nan", "1e"]:
            with pytest.raises(ValueError):
                to_float(text)
