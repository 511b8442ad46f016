"""METAR decoder models"""

from metar_decoder.models.base_models import HealthResponse
from metar_decoder.models.weather import WeatherReport

__all__ = [
    "HealthResponse",
    "WeatherReport",
]
