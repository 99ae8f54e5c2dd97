"""Use case for ranking activities over a forecast."""

import logging
from typing import List, Mapping
from ..criteria import ACTIVITY_CRITERIA
from ..entities.activity_criteria import ActivityCriteria
from ..entities.activity_score import ActivityRankingResult
from ..entities.activity_type import ActivityType
from ..entities.city import City
from ..entities.weather_observation import WeatherObservation
from ..scoring import build_ranking

logger = logging.getLogger(__name__)


class RankActivitiesUseCase:
    """Use case to score every activity for each forecast day."""

    def __init__(
        self,
        criteria: Mapping[ActivityType, ActivityCriteria] = ACTIVITY_CRITERIA,
    ):
        """
        Initialize use case.

        Args:
            criteria: Criteria table, defaults to the built-in one
        """
        self.criteria = criteria

    def execute(
        self,
        city: City,
        observations: List[WeatherObservation],
    ) -> ActivityRankingResult:
        """
        Execute the use case.

        Args:
            city: City the forecast belongs to
            observations: Daily observations in date order

        Returns:
            ActivityRankingResult with one ranked day per observation
        """
        logger.info(f"Ranking activities for {city.name} over {len(observations)} days")
        result = build_ranking(city, observations, self.criteria)

        for day in result.days:
            logger.debug(f"{city.name} {day.date}: best activity {day.best_activity().value}")

        return result
