"""Concrete repository implementations."""

from .in_memory_cache_repository import InMemoryCacheRepository
from .open_meteo_location_repository import OpenMeteoLocationRepository
from .open_meteo_weather_repository import OpenMeteoWeatherRepository

__all__ = [
    "InMemoryCacheRepository",
    "OpenMeteoLocationRepository",
    "OpenMeteoWeatherRepository",
]
