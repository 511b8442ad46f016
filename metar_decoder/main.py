"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from metar_decoder.core.app_factory import create_app
from metar_decoder.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

setup_logging(os.getenv("LOG_LEVEL", "INFO"))

app = create_app()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "METAR Decoder API", "docs": "/docs", "weather": "/api/weather?airport=KJFK"}


if __name__ == "__main__":
    import uvicorn

    from metar_decoder.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "metar_decoder.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
