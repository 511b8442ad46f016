"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from metar_decoder import __version__
from metar_decoder.config import get_settings
from metar_decoder.core.lifespan import lifespan
from metar_decoder.core.middleware import setup_middleware
from metar_decoder.middleware.error_handlers import register_error_handlers
from metar_decoder.routers import health_router, weather_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="METAR Decoder API",
        description="""
        Plain-English airport weather.

        `GET /api/weather?airport=KJFK` fetches the latest METAR from the
        Aviation Weather Center and returns it alongside an AI-written summary.

        - `/health` - Basic health check
        """,
        version=__version__,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(weather_router.router, prefix="/api/weather", tags=["weather"])

    return app
