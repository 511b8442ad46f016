"""Unit tests for airport code validation."""

import pytest

from metar_decoder.exceptions import (
    AirportCodeException,
    ErrorCode,
    InvalidAirportCodeException,
    MissingAirportCodeException,
)
from metar_decoder.validation import normalize_airport_code, validate_airport_code


class TestValidateAirportCode:
    """Tests for validate_airport_code."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("KJFK", "KJFK"),
            ("kjfk", "KJFK"),
            ("  egll  ", "EGLL"),
            ("SYD", "SYD"),
            ("k1x", "K1X"),
            ("1234", "1234"),
            ("\tYsSy\n", "YSSY"),
        ],
    )
    def test_accepts_three_to_four_alphanumerics(self, raw, expected):
        """Test valid codes are trimmed and uppercased."""
        assert validate_airport_code(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
    def test_missing_code(self, raw):
        """Test absent or blank codes raise MissingAirportCodeException."""
        with pytest.raises(MissingAirportCodeException) as exc_info:
            validate_airport_code(raw)

        assert exc_info.value.code == ErrorCode.MISSING_PARAMETER
        assert exc_info.value.airport_code == ""
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Airport code is required."

    @pytest.mark.parametrize("raw", ["K", "KJ", "KJFKX", "EGLL1", "KJ!K", "KJ-F", "K JF", "KJF.", "ÉGLL"])
    def test_invalid_format(self, raw):
        """Test wrong length or punctuation raises InvalidAirportCodeException."""
        with pytest.raises(InvalidAirportCodeException) as exc_info:
            validate_airport_code(raw)

        assert exc_info.value.code == ErrorCode.INVALID_FORMAT
        assert "Invalid airport code format" in exc_info.value.message

    def test_invalid_format_echoes_normalized_code(self):
        """Test the rejected code is echoed back trimmed and uppercased."""
        with pytest.raises(InvalidAirportCodeException) as exc_info:
            validate_airport_code(" kj!k ")

        assert exc_info.value.airport_code == "KJ!K"
        assert exc_info.value.details == {"airport_code": "KJ!K"}

    def test_validation_errors_share_base_class(self):
        """Test both validation errors can be caught as AirportCodeException."""
        for raw in (None, "KJFKX"):
            with pytest.raises(AirportCodeException):
                validate_airport_code(raw)


class TestNormalizeAirportCode:
    """Tests for normalize_airport_code."""

    @pytest.mark.parametrize("raw", ["kjfk", " Egll ", "SYD", "k1x\n"])
    def test_normalization_is_idempotent(self, raw):
        """Test normalizing twice equals normalizing once."""
        once = normalize_airport_code(raw)

        assert normalize_airport_code(once) == once
        assert once == once.strip().upper()


class TestUppercaseExpansion:
    """Tests for characters whose uppercase form is longer."""

    def test_expanding_characters_are_checked_after_uppercasing(self):
        """Test "ßß" uppercases to "SSSS" and is accepted as four letters."""
        assert validate_airport_code("ßß") == "SSSS"

    def test_expansion_past_four_characters_is_rejected(self):
        """Test "ßßß" uppercases to six letters and is rejected."""
        with pytest.raises(InvalidAirportCodeException) as exc_info:
            validate_airport_code("ßßß")

        assert exc_info.value.airport_code == "SSSSSS"
