"""Health endpoints."""

from fastapi import APIRouter

from metar_decoder import __version__
from metar_decoder.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    Returns simple status for container healthchecks. Does not call the
    weather source or the language model.
    """
    return HealthResponse(status="ok", version=__version__)
