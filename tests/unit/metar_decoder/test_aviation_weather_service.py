"""Unit tests for the Aviation Weather Center client."""

import httpx
import pytest

from metar_decoder.exceptions import ErrorCode, WeatherFetchException
from metar_decoder.services.aviation_weather_service import AviationWeatherClient

METAR_URL = "https://aviationweather.test/api/data/metar"


def metar_response(status_code: int, text: str = "") -> httpx.Response:
    """Build an httpx response for the METAR endpoint."""
    return httpx.Response(status_code, text=text, request=httpx.Request("GET", METAR_URL))


@pytest.mark.asyncio
async def test_fetch_metar_success(mock_http_client, mock_settings, kjfk_raw):
    """Test the raw METAR text is returned unchanged."""
    mock_http_client.get.return_value = metar_response(200, kjfk_raw + "\n")

    client = AviationWeatherClient(mock_http_client, mock_settings)
    result = await client.fetch_metar("KJFK")

    assert result == kjfk_raw + "\n"
    mock_http_client.get.assert_awaited_once()
    call_args = mock_http_client.get.call_args
    assert call_args.args[0] == METAR_URL
    assert call_args.kwargs["params"] == {"ids": "KJFK"}


@pytest.mark.asyncio
async def test_fetch_metar_empty_body_is_not_an_error(mock_http_client, mock_settings):
    """Test an unknown station yields an empty string."""
    mock_http_client.get.return_value = metar_response(200, "")

    client = AviationWeatherClient(mock_http_client, mock_settings)

    assert await client.fetch_metar("ZZZZ") == ""


@pytest.mark.asyncio
async def test_fetch_metar_no_content_status(mock_http_client, mock_settings):
    """Test a 204 response yields an empty string."""
    mock_http_client.get.return_value = metar_response(204)

    client = AviationWeatherClient(mock_http_client, mock_settings)

    assert await client.fetch_metar("ZZZZ") == ""


@pytest.mark.asyncio
async def test_fetch_metar_http_error(mock_http_client, mock_settings):
    """Test an error status raises WeatherFetchException with the status code."""
    mock_http_client.get.return_value = metar_response(503, "Service Unavailable")

    client = AviationWeatherClient(mock_http_client, mock_settings)

    with pytest.raises(WeatherFetchException) as exc_info:
        await client.fetch_metar("KJFK")

    assert exc_info.value.status_code == 503
    assert exc_info.value.code == ErrorCode.UPSTREAM_FETCH_FAILURE
    assert "503" in str(exc_info.value)
    assert exc_info.value.details["api_response"] == "Service Unavailable"


@pytest.mark.asyncio
async def test_fetch_metar_network_error(mock_http_client, mock_settings):
    """Test a network error raises WeatherFetchException."""
    mock_http_client.get.side_effect = httpx.ConnectError("Connection failed")

    client = AviationWeatherClient(mock_http_client, mock_settings)

    with pytest.raises(WeatherFetchException) as exc_info:
        await client.fetch_metar("KJFK")

    assert exc_info.value.details["error_type"] == "network_error"
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_fetch_metar_timeout(mock_http_client, mock_settings):
    """Test a timeout raises WeatherFetchException."""
    mock_http_client.get.side_effect = httpx.ReadTimeout("Request timed out")

    client = AviationWeatherClient(mock_http_client, mock_settings)

    with pytest.raises(WeatherFetchException) as exc_info:
        await client.fetch_metar("KJFK")

    assert "Failed to fetch METAR data" in str(exc_info.value)


def test_base_url_trailing_slash_is_stripped(mock_http_client, mock_settings):
    """Test the configured base URL joins cleanly with the METAR path."""
    client = AviationWeatherClient(mock_http_client, mock_settings)

    assert client._url == METAR_URL
