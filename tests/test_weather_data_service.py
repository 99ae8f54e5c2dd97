"""Tests for WeatherDataService."""

from datetime import date

import pandas as pd
import pytest
from activity_planner.application.services.weather_data_service import WeatherDataService
from activity_planner.domain.exceptions import WeatherDataUnavailableError


def test_get_weather_data(weather_repo, london):
    """Test observations are built from daily and marine frames."""
    service = WeatherDataService(weather_repo)
    observations = service.get_weather_data(london, days=3)

    assert [o.date for o in observations] == [date(2023, 1, 1), date(2023, 1, 2), date(2023, 1, 3)]
    first = observations[0]
    assert first.temperature.min == 5
    assert first.temperature.max == 10
    assert first.temperature.avg == 7.5
    assert first.precipitation == 0
    assert first.wind_speed == 10
    assert first.cloud_cover == 50
    assert first.visibility == 10000
    assert first.wave_height == 1.5


def test_missing_visibility_defaults(weather_repo, london):
    """Test days without visibility use the default visibility."""
    service = WeatherDataService(weather_repo, default_visibility=12000)
    observations = service.get_weather_data(london, days=3)
    assert observations[1].visibility == 12000
    assert observations[2].visibility == 9000


def test_days_without_marine_data_have_no_wave_height(weather_repo, london):
    """Test wave height stays None for days the marine forecast lacks."""
    service = WeatherDataService(weather_repo)
    observations = service.get_weather_data(london, days=3)
    assert observations[1].wave_height == 2.0
    assert observations[2].wave_height is None


def test_marine_failure_is_not_fatal(weather_repo, london):
    """Test the forecast survives a marine provider failure."""
    weather_repo.fail_marine = True
    service = WeatherDataService(weather_repo)
    observations = service.get_weather_data(london, days=3)
    assert len(observations) == 3
    assert all(o.wave_height is None for o in observations)


def test_forecast_failure_raises(weather_repo, london):
    """Test a daily forecast failure surfaces as unavailable data."""
    weather_repo.fail_daily = True
    service = WeatherDataService(weather_repo)
    with pytest.raises(WeatherDataUnavailableError):
        service.get_weather_data(london)


def test_incomplete_days_are_dropped(weather_repo, london):
    """Test days with missing required values are skipped."""
    weather_repo.daily.loc[1, "precipitation"] = float("nan")
    service = WeatherDataService(weather_repo)
    observations = service.get_weather_data(london, days=3)
    assert [o.date for o in observations] == [date(2023, 1, 1), date(2023, 1, 3)]


def test_no_usable_days_raises(weather_repo, london):
    """Test a forecast with no complete day is unavailable."""
    weather_repo.daily["temperature_max"] = float("nan")
    service = WeatherDataService(weather_repo)
    with pytest.raises(WeatherDataUnavailableError):
        service.get_weather_data(london)


def test_default_and_invalid_days(weather_repo, london):
    """Test the default forecast length and the allowed range."""
    service = WeatherDataService(weather_repo, default_days=8, max_days=16)
    service.get_weather_data(london)
    assert weather_repo.requested_days == [8]

    with pytest.raises(ValueError):
        service.get_weather_data(london, days=17)
    with pytest.raises(ValueError):
        service.get_weather_data(london, days=-1)
    with pytest.raises(ValueError):
        service.get_weather_data(london, days=0)


def test_get_current_weather(weather_repo, london):
    """Test current conditions conversion."""
    service = WeatherDataService(weather_repo)
    current = service.get_current_weather(london)
    assert current.temperature == 7.2
    assert current.wind_speed == 14.0
    assert current.visibility == 10000


def test_get_current_weather_failure(weather_repo, london):
    """Test current weather provider failures."""
    weather_repo.fail_current = True
    service = WeatherDataService(weather_repo)
    with pytest.raises(WeatherDataUnavailableError):
        service.get_current_weather(london)


def test_get_current_weather_without_temperature(weather_repo, london):
    """Test a missing current temperature is reported as unavailable data."""
    weather_repo.current["temperature"] = None
    service = WeatherDataService(weather_repo)
    with pytest.raises(WeatherDataUnavailableError):
        service.get_current_weather(london)


def test_get_weather_forecast(weather_repo, london):
    """Test the flat forecast shape."""
    service = WeatherDataService(weather_repo)
    forecast = service.get_weather_forecast(london, days=3)
    assert len(forecast) == 3
    assert forecast[0]["date"] == "2023-01-01"
    assert forecast[0]["temperature_avg"] == 7.5
    assert forecast[0]["waveHeight"] == 1.5
    assert forecast[2]["snowDepth"] == 40.0


def test_empty_marine_frame(weather_repo, london):
    """Test an inland location with no marine rows."""
    weather_repo.marine = pd.DataFrame(columns=["date", "wave_height"])
    observations = WeatherDataService(weather_repo).get_weather_data(london, days=3)
    assert all(o.wave_height is None for o in observations)
