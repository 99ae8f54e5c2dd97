"""Use cases - core business operations."""

from .search_city import SearchCityUseCase
from .collect_weather_data import CollectWeatherDataUseCase
from .rank_activities import RankActivitiesUseCase

__all__ = [
    "SearchCityUseCase",
    "CollectWeatherDataUseCase",
    "RankActivitiesUseCase",
]
