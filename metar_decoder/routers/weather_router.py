"""Weather API routes."""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from metar_decoder.dependencies import get_metar_service
from metar_decoder.response_mapper import build_report_response
from metar_decoder.services.metar_service import MetarService
from metar_decoder.validation import validate_airport_code

router = APIRouter()

RAW_METAR_EXAMPLE = "KJFK 191551Z 27015KT 10SM FEW055 BKN250 12/M01 A2992 RMK AO2"


async def get_airport_code(
    airport: str | None = Query(default=None, description="ICAO airport code, e.g. KJFK"),
) -> str:
    """Validate the airport query parameter before any outbound client is built."""
    return validate_airport_code(airport)


@router.get(
    "",
    summary="Get decoded weather for an airport",
    description="""
    Fetches the latest METAR for an ICAO airport code and returns it together
    with a plain-English summary written by an OpenAI model.

    The code must be 3-4 letters or digits (e.g. KJFK, EGLL, YSSY) and is
    case-insensitive.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "airportCode": "KJFK",
                        "rawMetar": RAW_METAR_EXAMPLE,
                        "friendlyReport": "It's a cool, mostly clear afternoon at JFK with a moderate westerly breeze.",
                        "error": None,
                    }
                }
            },
        },
        400: {"description": "Airport code missing or malformed"},
        404: {"description": "No METAR data could be retrieved or decoded"},
    },
)
async def get_weather(
    airport_code: str = Depends(get_airport_code),
    service: MetarService = Depends(get_metar_service),
) -> JSONResponse:
    """Return a plain-English weather report for an airport.

    Args:
        airport_code: Normalized code from the ``airport`` query parameter
        service: Fetch-and-decode pipeline from dependency injection

    Returns:
        200 with the full report, or 404 with an error report

    Raises:
        AirportCodeException: If the code is missing or malformed (rendered as 400)
    """
    report = await service.get_weather_report(airport_code)
    return build_report_response(report)
