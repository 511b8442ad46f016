"""Middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from metar_decoder.config import Settings
from metar_decoder.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    log_with_context(
        logger,
        "info",
        "Configuring CORS middleware",
        event_type="security_config",
        origins=settings.cors_allowed_origins,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
