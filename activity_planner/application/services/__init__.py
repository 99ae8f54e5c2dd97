"""Application services."""

from .location_search_service import LocationSearchService
from .weather_data_service import WeatherDataService
from .activity_ranking_service import ActivityRankingService

__all__ = [
    "LocationSearchService",
    "WeatherDataService",
    "ActivityRankingService",
]
