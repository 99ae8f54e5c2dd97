"""Repository interfaces."""

from .location_repository import LocationRepository
from .weather_repository import WeatherRepository
from .cache_repository import CacheRepository

__all__ = [
    "LocationRepository",
    "WeatherRepository",
    "CacheRepository",
]
