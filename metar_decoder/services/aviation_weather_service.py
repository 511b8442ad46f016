"""Aviation Weather Center client for raw METAR observations."""

import httpx

from metar_decoder.config import Settings, get_settings
from metar_decoder.exceptions import WeatherFetchException
from metar_decoder.logging_config import get_logger, log_with_context

METAR_PATH = "/api/data/metar"

logger = get_logger(__name__)


class AviationWeatherClient:
    """Fetches raw METAR strings from aviationweather.gov.

    The endpoint answers ``text/plain``; a station without a current
    observation yields an empty body with a success status.
    """

    def __init__(self, client: httpx.AsyncClient, settings: Settings | None = None):
        """Initialize the client.

        Args:
            client: Shared HTTP client for making requests
            settings: Settings instance (defaults to singleton)
        """
        if settings is None:
            settings = get_settings()
        self._client = client
        self._url = f"{settings.aviation_weather_base_url}{METAR_PATH}"

    async def fetch_metar(self, airport_code: str) -> str:
        """Retrieve the latest METAR observation for an airport.

        Args:
            airport_code: Normalized ICAO airport code (e.g. KJFK, EGLL)

        Returns:
            The raw METAR text, or an empty string if no data is available

        Raises:
            WeatherFetchException: If the request fails or returns an error status
        """
        try:
            response = await self._client.get(self._url, params={"ids": airport_code})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise WeatherFetchException(
                f"Aviation weather request failed (HTTP {e.response.status_code})",
                status_code=e.response.status_code,
                details={"airport_code": airport_code, "api_response": e.response.text},
            ) from e
        except httpx.HTTPError as e:
            raise WeatherFetchException(
                f"Failed to fetch METAR data: {str(e)}",
                details={"airport_code": airport_code, "error_type": "network_error"},
            ) from e

        log_with_context(
            logger,
            "debug",
            "METAR fetched",
            airport_code=airport_code,
            length=len(response.text),
            event_type="metar_fetched",
        )
        return response.text
