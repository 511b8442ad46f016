"""Airport code validation, run before any outbound request."""

import re

from metar_decoder.exceptions import InvalidAirportCodeException, MissingAirportCodeException

AIRPORT_CODE_PATTERN = re.compile(r"[A-Z0-9]{3,4}")


def normalize_airport_code(airport_code: str) -> str:
    """Trim and uppercase an airport code. Idempotent."""
    return airport_code.strip().upper()


def validate_airport_code(airport_code: str | None) -> str:
    """Validate a raw airport code from the query string.

    Args:
        airport_code: Raw value of the ``airport`` query parameter, possibly None

    Returns:
        The normalized code (trimmed, uppercase, 3-4 letters or digits)

    Raises:
        MissingAirportCodeException: If the value is absent or blank
        InvalidAirportCodeException: If the normalized value does not match the ICAO format
    """
    if airport_code is None or not airport_code.strip():
        raise MissingAirportCodeException()

    # upper() can lengthen text ("ß" -> "SS"), so the length check runs on the uppercased form
    code = normalize_airport_code(airport_code)
    if not AIRPORT_CODE_PATTERN.fullmatch(code):
        raise InvalidAirportCodeException(code)

    return code
