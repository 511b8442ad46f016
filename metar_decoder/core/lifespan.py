"""Application lifespan management."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI
from openai import AsyncOpenAI

from metar_decoder import __version__
from metar_decoder.config import Settings, get_settings
from metar_decoder.logging_config import get_logger, log_with_context
from metar_decoder.middleware.logging_middleware import redact_sensitive_data

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log responses with redacted sensitive data."""
    await response.aread()
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared HTTP client for the Aviation Weather Center."""
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=settings.http_connect_timeout_seconds,
            read=settings.http_read_timeout_seconds,
            write=5.0,
            pool=5.0,
        ),
        limits=httpx.Limits(
            max_keepalive_connections=5,
            max_connections=10,
            keepalive_expiry=30.0,
        ),
        headers={"Accept": "text/plain"},
        follow_redirects=True,
        event_hooks=event_hooks,
    )


def create_openai_client(settings: Settings) -> AsyncOpenAI:
    """Create the shared OpenAI client. Retries are disabled."""
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.openai_timeout_seconds,
        max_retries=0,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - create and close the outbound clients.

    Exceptions after yield are re-raised so cleanup still runs.
    """
    settings = get_settings()

    log_with_context(
        logger,
        "info",
        "Starting METAR decoder application",
        version=__version__,
        model=settings.openai_model,
        event_type="app_startup",
    )

    client = create_http_client(settings)
    app.state.http_client = client
    openai_client = create_openai_client(settings)
    app.state.openai_client = openai_client
    log_with_context(
        logger,
        "info",
        "Outbound clients initialized",
        aviation_weather_base_url=settings.aviation_weather_base_url,
        event_type="clients_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down METAR decoder application",
            event_type="app_shutdown",
        )
        await client.aclose()
        await openai_client.close()
        log_with_context(
            logger,
            "info",
            "Outbound clients closed",
            event_type="clients_cleanup",
        )
