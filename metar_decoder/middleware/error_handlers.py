"""Exception handlers for the application."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from metar_decoder.exceptions import AirportCodeException, ErrorCode, MetarException
from metar_decoder.logging_config import get_logger, log_with_context
from metar_decoder.response_mapper import build_validation_error_response

logger = get_logger(__name__)


async def airport_code_exception_handler(request: Request, exc: AirportCodeException) -> JSONResponse:
    """Answer a rejected airport code with a 400 report body."""
    log_with_context(
        logger,
        "warning",
        "Airport code rejected",
        error_code=exc.code.value,
        airport_code=exc.airport_code,
        method=request.method,
        url=str(request.url),
        event_type="validation_error",
    )
    return build_validation_error_response(exc)


async def metar_exception_handler(request: Request, exc: MetarException) -> JSONResponse:
    """Handle METAR decoder exceptions that escape a route.

    Returns structured JSON error responses with the exception's status code,
    error code, message and details.
    """
    log_with_context(
        logger,
        "warning",
        "METAR decoder error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="metar_error",
    )

    error_content: dict[str, Any] = {"code": exc.code.value, "message": exc.message, "details": exc.details}

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error_content},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=True)

    # Internal details stay in the logs
    return JSONResponse(
        status_code=500,
        content={"error": {"code": ErrorCode.INTERNAL_ERROR.value, "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AirportCodeException, airport_code_exception_handler)
    app.add_exception_handler(MetarException, metar_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
