"""Shared fixtures and in-memory fakes for the test suite."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

import pandas as pd
import pytest

from activity_planner.domain.entities.city import City
from activity_planner.domain.entities.weather_observation import Temperature, WeatherObservation
from activity_planner.domain.exceptions import WeatherProviderError
from activity_planner.domain.repositories.location_repository import LocationRepository
from activity_planner.domain.repositories.weather_repository import WeatherRepository


class FakeLocationRepository(LocationRepository):
    """Location repository backed by a dict of known cities."""

    def __init__(self, cities: Dict[str, City]):
        self.cities = {name.lower(): city for name, city in cities.items()}
        self.calls: List[str] = []

    def search_city(self, name: str) -> Optional[City]:
        self.calls.append(name)
        return self.cities.get(name.lower())


class FakeWeatherRepository(WeatherRepository):
    """Weather repository returning canned frames, optionally failing."""

    def __init__(
        self,
        daily: pd.DataFrame,
        marine: Optional[pd.DataFrame] = None,
        current: Optional[Dict[str, Any]] = None,
        fail_daily: bool = False,
        fail_marine: bool = False,
        fail_current: bool = False,
    ):
        self.daily = daily
        self.marine = marine if marine is not None else pd.DataFrame(columns=["date", "wave_height"])
        self.current = current
        self.fail_daily = fail_daily
        self.fail_marine = fail_marine
        self.fail_current = fail_current
        self.requested_days: List[int] = []

    def get_daily_forecast(self, latitude: float, longitude: float, days: int) -> pd.DataFrame:
        self.requested_days.append(days)
        if self.fail_daily:
            raise WeatherProviderError("Failed to fetch weather forecast")
        return self.daily.copy()

    def get_marine_forecast(self, latitude: float, longitude: float, days: int) -> pd.DataFrame:
        if self.fail_marine:
            raise WeatherProviderError("Failed to fetch marine forecast")
        return self.marine.copy()

    def get_current_weather(self, latitude: float, longitude: float) -> Dict[str, Any]:
        if self.fail_current or self.current is None:
            raise WeatherProviderError("Failed to fetch current weather")
        return dict(self.current)


@pytest.fixture
def london() -> City:
    return City(name="London", latitude=51.5074, longitude=-0.1278, country_code="GB")


@pytest.fixture
def daily_forecast() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "date": [date(2023, 1, 1), date(2023, 1, 2), date(2023, 1, 3)],
            "temperature_min": [5.0, 6.0, -8.0],
            "temperature_max": [10.0, 12.0, -2.0],
            "precipitation": [0.0, 5.0, 0.0],
            "snow_depth": [0.0, 0.0, 40.0],
            "wind_speed": [10.0, 12.0, 4.0],
            "cloud_cover": [50.0, 70.0, 5.0],
            "visibility": [10000.0, float("nan"), 9000.0],
        }
    )


@pytest.fixture
def marine_forecast() -> pd.DataFrame:
    return pd.DataFrame({"date": [date(2023, 1, 1), date(2023, 1, 2)], "wave_height": [1.5, 2.0]})


@pytest.fixture
def current_conditions() -> Dict[str, Any]:
    return {
        "time": datetime(2023, 1, 1, 12, 0),
        "temperature": 7.2,
        "precipitation": 0.4,
        "snowfall": 0.0,
        "wind_speed": 14.0,
        "cloud_cover": 80.0,
        "visibility": None,
    }


@pytest.fixture
def location_repo(london) -> FakeLocationRepository:
    return FakeLocationRepository({"London": london})


@pytest.fixture
def weather_repo(daily_forecast, marine_forecast, current_conditions) -> FakeWeatherRepository:
    return FakeWeatherRepository(daily_forecast, marine_forecast, current_conditions)


@pytest.fixture
def make_observation():
    """Factory for observations with mild, dry defaults."""

    def _make(
        avg: float = 10.0,
        precipitation: float = 0.0,
        snow_depth: float = 0.0,
        wind_speed: float = 5.0,
        cloud_cover: float = 0.0,
        visibility: float = 10000.0,
        wave_height: Optional[float] = None,
        day: date = date(2023, 1, 1),
    ) -> WeatherObservation:
        return WeatherObservation(
            date=day,
            temperature=Temperature(min=avg - 2.5, max=avg + 2.5, avg=avg),
            precipitation=precipitation,
            snow_depth=snow_depth,
            wind_speed=wind_speed,
            cloud_cover=cloud_cover,
            visibility=visibility,
            wave_height=wave_height,
        )

    return _make
