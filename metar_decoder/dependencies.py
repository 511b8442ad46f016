"""FastAPI dependencies for dependency injection."""

import httpx
from fastapi import Depends, Request
from openai import AsyncOpenAI

from metar_decoder.config import Settings, get_settings
from metar_decoder.protocols import MetarDecoderProtocol, MetarFetcherProtocol
from metar_decoder.services.ai_decoder import AiDecoder
from metar_decoder.services.aviation_weather_service import AviationWeatherClient
from metar_decoder.services.metar_service import MetarService


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    Raises:
        RuntimeError: If HTTP client is not initialized.
    """
    client: httpx.AsyncClient | None = getattr(request.app.state, "http_client", None)

    if client is None:
        raise RuntimeError("HTTP client not initialized. This should never happen.")

    return client


async def get_openai_client(request: Request) -> AsyncOpenAI:
    """
    Get the shared OpenAI client from app state.

    Raises:
        RuntimeError: If OpenAI client is not initialized.
    """
    client: AsyncOpenAI | None = getattr(request.app.state, "openai_client", None)

    if client is None:
        raise RuntimeError("OpenAI client not initialized.")

    return client


async def get_metar_fetcher(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> MetarFetcherProtocol:
    """Build the Aviation Weather Center fetcher for this request."""
    return AviationWeatherClient(client, settings)


async def get_metar_decoder(
    client: AsyncOpenAI = Depends(get_openai_client),
    settings: Settings = Depends(get_settings),
) -> MetarDecoderProtocol:
    """Build the OpenAI decoder for this request."""
    return AiDecoder(client, settings)


async def get_metar_service(
    fetcher: MetarFetcherProtocol = Depends(get_metar_fetcher),
    decoder: MetarDecoderProtocol = Depends(get_metar_decoder),
) -> MetarService:
    """Assemble the fetch-and-decode pipeline."""
    return MetarService(fetcher, decoder)
