"""Tests for ActivityRankingService."""

import pytest
from activity_planner.application.services.activity_ranking_service import ActivityRankingService
from activity_planner.application.services.location_search_service import LocationSearchService
from activity_planner.application.services.weather_data_service import WeatherDataService
from activity_planner.domain.entities.activity_type import ActivityType
from activity_planner.domain.exceptions import (
    ActivityRankingError,
    CityNotFoundError,
    WeatherProviderError,
)
from activity_planner.domain.repositories.location_repository import LocationRepository


@pytest.fixture
def service(location_repo, weather_repo):
    return ActivityRankingService(
        LocationSearchService(location_repo),
        WeatherDataService(weather_repo),
    )


def test_get_activity_rankings(service, london, location_repo):
    """Test rankings for a known city."""
    result = service.get_activity_rankings("London", days=3)

    assert result.city == london
    assert len(result.days) == 3
    assert location_repo.calls == ["London"]
    for day in result.days:
        assert set(day.activities) == set(ActivityType)
        for score in day.activities.values():
            assert 0 <= score.score <= 100
            assert score.recommendation


def test_snowy_day_favours_skiing(service):
    """Test the cold snowy day ranks skiing above outdoor sightseeing."""
    result = service.get_activity_rankings("London", days=3)
    snowy = result.days[2]
    assert snowy.activities[ActivityType.SKIING].score > snowy.activities[ActivityType.OUTDOOR_SIGHTSEEING].score


def test_city_not_found(service):
    """Test an unknown city raises CityNotFoundError."""
    with pytest.raises(CityNotFoundError):
        service.get_activity_rankings("NonExistentCity")


def test_weather_unavailable(service, weather_repo):
    """Test forecast failures are reported as ranking failures."""
    weather_repo.fail_daily = True
    with pytest.raises(ActivityRankingError) as exc_info:
        service.get_activity_rankings("London")
    assert "Failed to calculate activity rankings" in str(exc_info.value)


def test_location_search_service(location_repo, london):
    """Test LocationSearchService search and get."""
    location_service = LocationSearchService(location_repo)
    assert location_service.search_city("LONDON") == london
    assert location_service.search_city("Nowhere") is None
    with pytest.raises(CityNotFoundError):
        location_service.get_city("Nowhere")


class FailingGeocoder(LocationRepository):
    def search_city(self, name):
        raise WeatherProviderError("Failed to geocode location")


def test_geocoding_failure(weather_repo):
    """Test geocoding provider failures are reported as ranking failures."""
    service = ActivityRankingService(
        LocationSearchService(FailingGeocoder()),
        WeatherDataService(weather_repo),
    )
    with pytest.raises(ActivityRankingError) as exc_info:
        service.get_activity_rankings("London")
    assert isinstance(exc_info.value.__cause__, WeatherProviderError)
    assert weather_repo.requested_days == []
