"""Tests for NMEA checksum calculation and validation."""

from gpsnmea import calculate_checksum, validate_checksum

FOO_VALID = "$GPFOO,1,2,3.3,x,y,zz,*51"
GGA_VALID = "$GPGGA,034225.077,3356.4650,S,15124.5567,E,1,03,9.7,-25.0,M,21.0,M,,0000*51"
VTG_UNPADDED = "$GPVTG,356.10,T,,M,0.55,N,1.0,K,A*D"


class TestCalculateChecksum:
    """Tests for calculate_checksum function."""

    def test_two_digit_checksum(self):
        assert calculate_checksum("GPFOO,1,2,3.3,x,y,zz,") == "51"

    def test_single_digit_checksum_is_not_padded(self):
        assert calculate_checksum("GPVTG,356.10,T,,M,0.55,N,1.0,K,A") == "D"

    def test_uppercase_hex(self):
        assert calculate_checksum("GPGSA,A,3,,,,,,16,18,,22,24,,,3.6,2.1,2.2") == "3C"

    def test_empty_content(self):
        assert calculate_checksum("") == "0"


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_checksum(self):
        assert validate_checksum(FOO_VALID) is True

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_VALID) is True

    def test_lowercase_checksum(self):
        assert validate_checksum("$GPGSA,A,3,,,,,,16,18,,22,24,,,3.6,2.1,2.2*3c") is True

    def test_unpadded_checksum(self):
        assert validate_checksum(VTG_UNPADDED) is True

    def test_padded_checksum_is_rejected(self):
        assert validate_checksum(VTG_UNPADDED[:-1] + "0D") is False

    def test_invalid_checksum(self):
        assert validate_checksum(FOO_VALID[:-2] + "52") is False

    def test_missing_dollar_sign(self):
        assert validate_checksum(FOO_VALID[1:]) is False

    def test_missing_asterisk(self):
        assert validate_checksum(FOO_VALID.replace("*", "")) is False

    def test_two_asterisks(self):
        assert validate_checksum("$GPFOO*1*51") is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_trailing_newline_is_not_ignored(self):
        assert validate_checksum(FOO_VALID + "\r\n") is False
