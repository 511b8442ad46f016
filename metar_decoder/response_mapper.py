"""Mapping of weather reports and validation errors to HTTP responses."""

from fastapi import status
from fastapi.responses import JSONResponse

from metar_decoder.exceptions import AirportCodeException, ErrorCode
from metar_decoder.models.weather import WeatherReport

# Every report classification maps to exactly one status code
STATUS_BY_ERROR_CODE: dict[ErrorCode | None, int] = {
    None: status.HTTP_200_OK,
    ErrorCode.MISSING_PARAMETER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UPSTREAM_FETCH_FAILURE: status.HTTP_404_NOT_FOUND,
    ErrorCode.NO_DATA_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DECODE_FAILURE: status.HTTP_404_NOT_FOUND,
}


def status_code_for(report: WeatherReport) -> int:
    """Return the HTTP status code for a report's classification."""
    return STATUS_BY_ERROR_CODE[report.error_code]


def report_from_validation_error(exc: AirportCodeException) -> WeatherReport:
    """Build the failure report echoed back for a rejected airport code."""
    return WeatherReport.failure(exc.airport_code, exc.message, exc.code)


def build_report_response(report: WeatherReport) -> JSONResponse:
    """Render a report as a JSON response with camelCase field names."""
    return JSONResponse(
        status_code=status_code_for(report),
        content=report.model_dump(mode="json", by_alias=True),
    )


def build_validation_error_response(exc: AirportCodeException) -> JSONResponse:
    """Render a rejected airport code as a 400 report response."""
    return build_report_response(report_from_validation_error(exc))
