"""Service converting provider forecasts into weather observations."""

import logging
from typing import Any, Dict, List, Optional
import pandas as pd

from ...domain.entities.city import City
from ...domain.entities.weather_observation import (
    CurrentWeather,
    Temperature,
    WeatherObservation,
)
from ...domain.exceptions import WeatherDataUnavailableError, WeatherProviderError
from ...domain.repositories.weather_repository import WeatherRepository
from ...domain.use_cases.collect_weather_data import CollectWeatherDataUseCase

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [
    "temperature_min",
    "temperature_max",
    "precipitation",
    "snow_depth",
    "wind_speed",
    "cloud_cover",
]


class WeatherDataService:
    """Builds domain weather observations from the weather repository."""

    def __init__(
        self,
        weather_repo: WeatherRepository,
        default_days: int = 8,
        max_days: int = 16,
        default_visibility: float = 10000,
    ):
        """
        Initialize service.

        Args:
            weather_repo: Repository for forecast data
            default_days: Forecast length when none is requested
            max_days: Longest forecast the provider serves
            default_visibility: Visibility in meters used when the model has none
        """
        self.weather_repo = weather_repo
        self.default_days = default_days
        self.max_days = max_days
        self.default_visibility = default_visibility
        self.collect_weather_uc = CollectWeatherDataUseCase(weather_repo)

    def _resolve_days(self, days: Optional[int]) -> int:
        days = self.default_days if days is None else days
        if not 1 <= days <= self.max_days:
            raise ValueError(f"Forecast days must be between 1 and {self.max_days}, got {days}")
        return days

    def _to_observations(
        self, daily: pd.DataFrame, marine: pd.DataFrame
    ) -> List[WeatherObservation]:
        """Join daily and marine frames by date and build observations."""
        if not marine.empty:
            df = daily.merge(marine[["date", "wave_height"]], on="date", how="left")
        else:
            df = daily.assign(wave_height=float("nan"))

        df["visibility"] = df["visibility"].fillna(self.default_visibility)

        incomplete = df[REQUIRED_COLUMNS].isna().any(axis=1)
        if incomplete.any():
            logger.warning(
                f"Dropping {int(incomplete.sum())} forecast days with missing values: "
                f"{[d.isoformat() for d in df.loc[incomplete, 'date']]}"
            )
            df = df[~incomplete]

        result = []
        for _, row in df.iterrows():
            observation = WeatherObservation(
                date=row["date"],
                temperature=Temperature.from_min_max(
                    float(row["temperature_min"]), float(row["temperature_max"])
                ),
                precipitation=float(row["precipitation"]),
                snow_depth=float(row["snow_depth"]),
                wind_speed=float(row["wind_speed"]),
                cloud_cover=float(row["cloud_cover"]),
                visibility=float(row["visibility"]),
                wave_height=(
                    float(row["wave_height"]) if pd.notna(row["wave_height"]) else None
                ),
            )
            result.append(observation)

        return result

    def get_weather_data(self, city: City, days: Optional[int] = None) -> List[WeatherObservation]:
        """
        Get daily weather observations for a city.

        Args:
            city: City to forecast
            days: Number of forecast days (defaults to default_days)

        Returns:
            Observations in date order

        Raises:
            WeatherDataUnavailableError: If the forecast has no usable days
        """
        days = self._resolve_days(days)
        try:
            daily, marine = self.collect_weather_uc.execute(city.latitude, city.longitude, days)
        except WeatherProviderError as e:
            raise WeatherDataUnavailableError(f"Failed to retrieve weather data for {city.name}") from e

        observations = self._to_observations(daily, marine)
        if not observations:
            raise WeatherDataUnavailableError(f"Weather data not available for {city.name}")

        logger.info(f"Built {len(observations)} weather observations for {city.name}")
        return observations

    def get_current_weather(self, city: City) -> CurrentWeather:
        """Get current conditions for a city."""
        try:
            current = self.weather_repo.get_current_weather(city.latitude, city.longitude)
        except WeatherProviderError as e:
            raise WeatherDataUnavailableError(f"Current weather not available for {city.name}") from e

        if current.get("temperature") is None:
            raise WeatherDataUnavailableError(f"Current temperature not available for {city.name}")

        visibility = current.get("visibility")
        return CurrentWeather(
            time=current["time"],
            temperature=float(current["temperature"]),
            precipitation=float(current.get("precipitation") or 0.0),
            snowfall=float(current.get("snowfall") or 0.0),
            wind_speed=float(current.get("wind_speed") or 0.0),
            cloud_cover=float(current.get("cloud_cover") or 0.0),
            visibility=float(visibility if visibility is not None else self.default_visibility),
        )

    def get_weather_forecast(self, city: City, days: Optional[int] = None) -> List[Dict[str, Any]]:
        """Get the forecast as flat per-day dictionaries."""
        return [obs.to_forecast_day() for obs in self.get_weather_data(city, days)]
