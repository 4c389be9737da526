"""Tests that the examples in module docstrings run as written."""

import doctest
import importlib

import pytest

MODULES_WITH_EXAMPLES = [
    "gpsnmea.numbers",
    "gpsnmea.coordinate.parser",
    "gpsnmea.coordinate.types",
    "gpsnmea.nmea.checksum",
    "gpsnmea.nmea.fields",
    "gpsnmea.nmea.gga",
    "gpsnmea.nmea.gsa",
    "gpsnmea.nmea.parser",
    "gpsnmea.nmea.rmc",
    "gpsnmea.nmea.sentence",
    "gpsnmea.nmea.types",
    "gpsnmea.nmea.vtg",
]


class TestDocstringExamples:
    """Runs each module's ``>>>`` examples through doctest."""

    @pytest.mark.parametrize("module_name", MODULES_WITH_EXAMPLES)
    def test_examples_pass(self, module_name):
        module = importlib.import_module(module_name)
        result = doctest.testmod(module, verbose=False, report=False)
        assert result.attempted > 0
        assert result.failed == 0
