"""Tests for use cases."""

from datetime import date

import pytest
from activity_planner.domain.criteria import ACTIVITY_CRITERIA
from activity_planner.domain.entities.activity_criteria import ActivityCriteria, FactorWeight
from activity_planner.domain.entities.activity_type import ActivityType
from activity_planner.domain.entities.weather_factor import WeatherFactor
from activity_planner.domain.exceptions import CityNotFoundError
from activity_planner.domain.use_cases.collect_weather_data import CollectWeatherDataUseCase
from activity_planner.domain.use_cases.rank_activities import RankActivitiesUseCase
from activity_planner.domain.use_cases.search_city import SearchCityUseCase


def test_search_city_found(location_repo, london):
    """Test SearchCityUseCase returns the geocoded city."""
    use_case = SearchCityUseCase(location_repo)
    assert use_case.execute("london") == london


def test_search_city_not_found(location_repo):
    """Test SearchCityUseCase raises for unknown cities."""
    use_case = SearchCityUseCase(location_repo)
    with pytest.raises(CityNotFoundError) as exc_info:
        use_case.execute("Atlantis")
    assert exc_info.value.city_name == "Atlantis"
    assert "Atlantis" in str(exc_info.value)


def test_collect_weather_data(weather_repo):
    """Test CollectWeatherDataUseCase returns daily and marine frames."""
    use_case = CollectWeatherDataUseCase(weather_repo)
    daily, marine = use_case.execute(51.5, -0.12, 3)
    assert len(daily) == 3
    assert len(marine) == 2
    assert weather_repo.requested_days == [3]


def test_collect_weather_data_without_marine(weather_repo):
    """Test marine failures yield an empty marine frame."""
    weather_repo.fail_marine = True
    use_case = CollectWeatherDataUseCase(weather_repo)
    daily, marine = use_case.execute(51.5, -0.12, 3)
    assert len(daily) == 3
    assert marine.empty
    assert list(marine.columns) == ["date", "wave_height"]


def test_rank_activities(london, make_observation):
    """Test RankActivitiesUseCase ranks each observation."""
    observations = [make_observation(day=date(2023, 1, d)) for d in (1, 2)]
    result = RankActivitiesUseCase().execute(london, observations)
    assert result.city == london
    assert len(result.days) == 2


def test_rank_activities_custom_criteria(london, make_observation):
    """Test RankActivitiesUseCase honours an injected criteria table."""
    criteria = dict(ACTIVITY_CRITERIA)
    criteria[ActivityType.SKIING] = ActivityCriteria(
        min_score=10,
        max_score=90,
        factors=(FactorWeight(WeatherFactor.CLOUD_COVER, weight=1.0, ideal_value=0, is_bad_when_above=True),),
    )
    result = RankActivitiesUseCase(criteria).execute(london, [make_observation(cloud_cover=0)])
    assert result.days[0].activities[ActivityType.SKIING].score == 90
