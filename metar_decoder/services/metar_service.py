"""Fetch-then-decode pipeline for airport weather reports."""

from metar_decoder.exceptions import ErrorCode
from metar_decoder.logging_config import get_logger, log_with_context
from metar_decoder.models.weather import WeatherReport
from metar_decoder.protocols import MetarDecoderProtocol, MetarFetcherProtocol
from metar_decoder.validation import normalize_airport_code

FETCH_FAILED_MESSAGE = "Could not reach the aviation weather service. Please try again later."
NO_DATA_MESSAGE = (
    "No METAR data found for airport code '{airport_code}'. "
    "Please verify this is a valid ICAO code (4 letters, e.g. KJFK, EGLL, YSSY)."
)
DECODE_FAILED_MESSAGE = "Retrieved the METAR but could not decode it. Raw data: {raw_metar}"

logger = get_logger(__name__)


class MetarService:
    """Orchestrates METAR retrieval and AI decoding.

    Each call:

    1. Fetches the raw METAR from the weather source.
    2. Sends the trimmed METAR to the decoder.
    3. Wraps the outcome in a WeatherReport.

    Failures at either stage end the pipeline and are returned as failure
    reports rather than raised. Nothing is retried.
    """

    def __init__(self, fetcher: MetarFetcherProtocol, decoder: MetarDecoderProtocol):
        self._fetcher = fetcher
        self._decoder = decoder

    async def get_weather_report(self, airport_code: str) -> WeatherReport:
        """Fetch and decode the METAR report for an airport.

        Args:
            airport_code: A valid ICAO airport code (normalized again here)

        Returns:
            A success report with raw METAR and summary, or a failure report
            classified as UPSTREAM_FETCH_FAILURE, NO_DATA_FOUND or DECODE_FAILURE
        """
        code = normalize_airport_code(airport_code)

        try:
            raw_metar = (await self._fetcher.fetch_metar(code)).strip()
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Failed to fetch METAR",
                airport_code=code,
                error=str(e),
                error_type=type(e).__name__,
                event_type="metar_fetch_failed",
            )
            return WeatherReport.failure(code, FETCH_FAILED_MESSAGE, ErrorCode.UPSTREAM_FETCH_FAILURE)

        if not raw_metar:
            log_with_context(
                logger,
                "info",
                "No METAR data for airport",
                airport_code=code,
                event_type="metar_not_found",
            )
            return WeatherReport.failure(
                code,
                NO_DATA_MESSAGE.format(airport_code=code),
                ErrorCode.NO_DATA_FOUND,
            )

        try:
            friendly_report = await self._decoder.decode(raw_metar)
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "METAR decoding failed",
                airport_code=code,
                error=str(e),
                error_type=type(e).__name__,
                event_type="metar_decode_failed",
            )
            logger.error("Exception traceback:", exc_info=True)
            return WeatherReport.failure(
                code,
                DECODE_FAILED_MESSAGE.format(raw_metar=raw_metar),
                ErrorCode.DECODE_FAILURE,
            )

        log_with_context(
            logger,
            "info",
            "METAR decoded",
            airport_code=code,
            event_type="metar_decoded",
        )
        return WeatherReport.success(code, raw_metar, friendly_report)
