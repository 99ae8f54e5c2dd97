"""Domain entities."""

from .city import City
from .weather_observation import Temperature, WeatherObservation, CurrentWeather
from .weather_factor import WeatherFactor
from .activity_type import ActivityType
from .activity_criteria import FactorWeight, ActivityCriteria
from .activity_score import ActivityScore, ActivityRankingDay, ActivityRankingResult
from .recommendation_tier import RecommendationTier

__all__ = [
    "City",
    "Temperature",
    "WeatherObservation",
    "CurrentWeather",
    "WeatherFactor",
    "ActivityType",
    "FactorWeight",
    "ActivityCriteria",
    "ActivityScore",
    "ActivityRankingDay",
    "ActivityRankingResult",
    "RecommendationTier",
]
