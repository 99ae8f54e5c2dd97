"""Main service orchestrating the activity ranking workflow."""

import logging
from typing import Optional

from ...domain.entities.activity_score import ActivityRankingResult
from ...domain.exceptions import ActivityPlannerError, ActivityRankingError, CityNotFoundError
from ...domain.use_cases.rank_activities import RankActivitiesUseCase
from .location_search_service import LocationSearchService
from .weather_data_service import WeatherDataService

logger = logging.getLogger(__name__)


class ActivityRankingService:
    """Ranks activities for a city: geocode, fetch forecast, score each day."""

    def __init__(
        self,
        location_search_service: LocationSearchService,
        weather_data_service: WeatherDataService,
        rank_activities_uc: Optional[RankActivitiesUseCase] = None,
    ):
        self.location_search_service = location_search_service
        self.weather_data_service = weather_data_service
        self.rank_activities_uc = rank_activities_uc or RankActivitiesUseCase()

    def get_activity_rankings(
        self, city_name: str, days: Optional[int] = None
    ) -> ActivityRankingResult:
        """
        Get activity rankings for a city based on its weather forecast.

        Args:
            city_name: Name of the city to rank
            days: Number of forecast days (service default when omitted)

        Returns:
            ActivityRankingResult with one entry per forecast day

        Raises:
            CityNotFoundError: If no city matches the name
            ActivityRankingError: If geocoding or the forecast fails
            ValueError: If days is outside the range the provider serves
        """
        try:
            city = self.location_search_service.get_city(city_name)
            observations = self.weather_data_service.get_weather_data(city, days)
            result = self.rank_activities_uc.execute(city, observations)
        except CityNotFoundError:
            raise
        except ActivityPlannerError as e:
            logger.error(f"Error ranking activities for {city_name}: {e}", exc_info=True)
            raise ActivityRankingError(
                f"Failed to calculate activity rankings for {city_name}"
            ) from e

        logger.info(f"Ranked {len(result.days)} days for {city.name}")
        return result
