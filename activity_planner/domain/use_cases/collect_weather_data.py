"""Use case for collecting weather data."""

import logging
from typing import Tuple
import pandas as pd
from ..repositories.weather_repository import WeatherRepository
from ..exceptions import WeatherProviderError

logger = logging.getLogger(__name__)


class CollectWeatherDataUseCase:
    """Use case to collect the daily and marine forecast from repository."""

    def __init__(self, repository: WeatherRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for weather data access
        """
        self.repository = repository

    def execute(
        self,
        latitude: float,
        longitude: float,
        days: int,
    ) -> Tuple[pd.DataFrame, pd.DataFrame]:
        """
        Execute the use case.

        The marine forecast is optional: inland locations and provider
        failures yield an empty marine frame.

        Args:
            latitude: Location latitude
            longitude: Location longitude
            days: Number of forecast days

        Returns:
            Tuple of (daily_forecast_df, marine_forecast_df)
        """
        logger.info(
            f"Collecting weather data: lat={latitude}, lon={longitude}, days={days}"
        )
        daily = self.repository.get_daily_forecast(latitude, longitude, days)

        try:
            marine = self.repository.get_marine_forecast(latitude, longitude, days)
        except WeatherProviderError as e:
            logger.warning(f"Marine data not available, continuing without it: {e}")
            marine = pd.DataFrame(columns=["date", "wave_height"])

        logger.info(f"Collected {len(daily)} forecast days, {len(marine)} marine days")
        return daily, marine
