"""Pytest configuration and shared fixtures."""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

# Settings require an API key; set one before the app module is imported
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

from metar_decoder.config import Settings  # noqa: E402

KJFK_RAW = "KJFK 191551Z 27015KT 10SM FEW055 BKN250 12/M01 A2992 RMK AO2"
DECODED_KJFK = "It's a cool, mostly clear afternoon at JFK with a moderate westerly breeze."


@pytest.fixture
def kjfk_raw():
    """Raw METAR observation for JFK."""
    return KJFK_RAW


@pytest.fixture
def decoded_kjfk():
    """Decoded summary for the JFK observation."""
    return DECODED_KJFK


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        api_host="127.0.0.1",
        api_port=8000,
        openai_api_key="test-openai-key",
        openai_base_url="https://openai.test/v1",
        openai_model="gpt-4o",
        openai_max_completion_tokens=1024,
        aviation_weather_base_url="https://aviationweather.test/",
    )


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for the Aviation Weather Center."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_openai_client():
    """Mock AsyncOpenAI client returning a decoded KJFK summary."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(
        return_value=SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=DECODED_KJFK))])
    )
    return client


@pytest.fixture
def mock_fetcher():
    """Mock METAR fetcher returning the KJFK observation."""
    fetcher = MagicMock()
    fetcher.fetch_metar = AsyncMock(return_value=KJFK_RAW)
    return fetcher


@pytest.fixture
def mock_decoder():
    """Mock METAR decoder returning a friendly summary."""
    decoder = MagicMock()
    decoder.decode = AsyncMock(return_value=DECODED_KJFK)
    return decoder

