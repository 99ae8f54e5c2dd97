"""Weather repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict
import pandas as pd


class WeatherRepository(ABC):
    """Abstract repository for weather forecast access."""

    @abstractmethod
    def get_daily_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int,
    ) -> pd.DataFrame:
        """
        Retrieve the daily weather forecast for a location.

        Args:
            latitude: Location latitude
            longitude: Location longitude
            days: Number of forecast days

        Returns:
            DataFrame with one row per day and columns date, temperature_min,
            temperature_max, precipitation, snow_depth, wind_speed,
            cloud_cover, visibility
        """
        pass

    @abstractmethod
    def get_marine_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int,
    ) -> pd.DataFrame:
        """
        Retrieve the daily marine forecast for a location.

        Args:
            latitude: Location latitude
            longitude: Location longitude
            days: Number of forecast days

        Returns:
            DataFrame with columns date, wave_height
        """
        pass

    @abstractmethod
    def get_current_weather(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """
        Retrieve current conditions for a location.

        Args:
            latitude: Location latitude
            longitude: Location longitude

        Returns:
            Dictionary with keys time, temperature, precipitation, snowfall,
            wind_speed, cloud_cover, visibility
        """
        pass
