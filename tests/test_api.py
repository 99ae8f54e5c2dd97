"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient
from activity_planner.application.services.activity_ranking_service import ActivityRankingService
from activity_planner.application.services.location_search_service import LocationSearchService
from activity_planner.application.services.weather_data_service import WeatherDataService
from activity_planner.presentation.api.main import (
    app,
    get_location_service,
    get_ranking_service,
    get_weather_service,
)


@pytest.fixture
def client(location_repo, weather_repo):
    location_service = LocationSearchService(location_repo)
    weather_service = WeatherDataService(weather_repo)
    ranking_service = ActivityRankingService(location_service, weather_service)

    app.dependency_overrides[get_location_service] = lambda: location_service
    app.dependency_overrides[get_weather_service] = lambda: weather_service
    app.dependency_overrides[get_ranking_service] = lambda: ranking_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "activity_ranking" in response.json()["endpoints"]


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_activity_ranking(client):
    """Test rankings for a known city."""
    response = client.get("/activity-ranking", params={"city": "London", "days": 3})
    assert response.status_code == 200

    data = response.json()
    assert data["city"]["name"] == "London"
    assert data["city"]["country_code"] == "GB"
    assert [d["date"] for d in data["days"]] == ["2023-01-01", "2023-01-02", "2023-01-03"]
    activities = data["days"][0]["activities"]
    assert set(activities) == {"skiing", "surfing", "outdoor_sightseeing", "indoor_sightseeing"}
    assert 0 <= activities["skiing"]["score"] <= 100
    assert activities["indoor_sightseeing"]["score"] >= 40
    assert data["weatherForecast"] is None


def test_activity_ranking_with_forecast(client):
    """Test the weather forecast is attached on request."""
    response = client.get(
        "/activity-ranking", params={"city": "London", "days": 3, "include_forecast": True}
    )
    assert response.status_code == 200

    forecast = response.json()["weatherForecast"]
    assert len(forecast) == 3
    assert forecast[0]["temperature_avg"] == 7.5
    assert forecast[0]["waveHeight"] == 1.5
    assert forecast[2]["waveHeight"] is None


def test_activity_ranking_city_not_found(client):
    """Test unknown cities return 404."""
    response = client.get("/activity-ranking", params={"city": "Nowhere"})
    assert response.status_code == 404
    assert response.json()["detail"] == 'City "Nowhere" not found'


def test_activity_ranking_weather_failure(client, weather_repo):
    """Test forecast failures return 502."""
    weather_repo.fail_daily = True
    response = client.get("/activity-ranking", params={"city": "London"})
    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to get activity rankings"


def test_activity_ranking_validation(client):
    """Test query parameter validation."""
    assert client.get("/activity-ranking", params={"city": "L"}).status_code == 422
    assert client.get("/activity-ranking").status_code == 422
    assert client.get("/activity-ranking", params={"city": "London", "days": 17}).status_code == 422
    assert client.get("/activity-ranking", params={"city": "London", "days": 0}).status_code == 422


def test_city(client):
    """Test city lookup with current weather."""
    response = client.get("/city", params={"city": "london"})
    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "London"
    assert data["latitude"] == 51.5074
    assert data["current_weather"]["temperature"] == 7.2
    assert data["current_weather"]["visibility"] == 10000


def test_city_not_found(client):
    response = client.get("/city", params={"city": "Nowhere"})
    assert response.status_code == 404
