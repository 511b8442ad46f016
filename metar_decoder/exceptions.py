"""Custom exceptions for the METAR decoder with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses and report classification."""

    # Generic errors
    METAR_ERROR = "METAR_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Client input errors (never touch the network)
    MISSING_PARAMETER = "MISSING_PARAMETER"
    INVALID_FORMAT = "INVALID_FORMAT"

    # Pipeline errors
    UPSTREAM_FETCH_FAILURE = "UPSTREAM_FETCH_FAILURE"
    NO_DATA_FOUND = "NO_DATA_FOUND"
    DECODE_FAILURE = "DECODE_FAILURE"


class MetarException(Exception):
    """Base exception for METAR decoder errors with HTTP status code support.

    All custom exceptions inherit from this class so the error handlers
    can render them consistently.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.METAR_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize METAR exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class AirportCodeException(MetarException):
    """The airport code supplied by the client was rejected."""

    def __init__(
        self,
        message: str,
        airport_code: str = "",
        code: ErrorCode = ErrorCode.INVALID_FORMAT,
    ):
        super().__init__(message, code=code, status_code=400, details={"airport_code": airport_code})
        self.airport_code = airport_code


class MissingAirportCodeException(AirportCodeException):
    """No airport code was supplied, or it was blank."""

    def __init__(self, message: str = "Airport code is required."):
        super().__init__(message, airport_code="", code=ErrorCode.MISSING_PARAMETER)


class InvalidAirportCodeException(AirportCodeException):
    """The airport code is not 3-4 letters or digits."""

    def __init__(
        self,
        airport_code: str,
        message: str = "Invalid airport code format. Use a 3-4 character ICAO code like KJFK or EGLL.",
    ):
        super().__init__(message, airport_code=airport_code, code=ErrorCode.INVALID_FORMAT)


class WeatherFetchException(MetarException):
    """The Aviation Weather Center request failed."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.UPSTREAM_FETCH_FAILURE,
            status_code=status_code,
            details=details,
        )


class MetarDecodeException(MetarException):
    """The language model request failed."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.DECODE_FAILURE,
            status_code=status_code,
            details=details,
        )
