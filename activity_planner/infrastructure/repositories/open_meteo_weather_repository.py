"""Open-Meteo forecast and marine API weather repository implementation."""

import logging
from datetime import datetime
from typing import Any, Dict, Optional
import httpx
import pandas as pd
from ...domain.exceptions import WeatherProviderError
from ...domain.repositories.cache_repository import CacheRepository
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

FORECAST_BASE_URL = "https://api.open-meteo.com/v1/forecast"
MARINE_BASE_URL = "https://marine-api.open-meteo.com/v1/marine"

# Open-Meteo daily variable -> forecast column
DAILY_VARIABLES = {
    "temperature_2m_max": "temperature_max",
    "temperature_2m_min": "temperature_min",
    "precipitation_sum": "precipitation",
    "snowfall_sum": "snow_depth",
    "wind_speed_10m_max": "wind_speed",
    "cloud_cover_mean": "cloud_cover",
    "visibility_mean": "visibility",
}

MARINE_VARIABLES = {
    "wave_height_max": "wave_height",
}

# Open-Meteo current variable -> current weather key
CURRENT_VARIABLES = {
    "temperature_2m": "temperature",
    "precipitation": "precipitation",
    "snowfall": "snowfall",
    "wind_speed_10m": "wind_speed",
    "cloud_cover": "cloud_cover",
    "visibility": "visibility",
}


class OpenMeteoWeatherRepository(WeatherRepository):
    """Repository for weather data from the Open-Meteo forecast and marine APIs."""

    def __init__(
        self,
        cache: Optional[CacheRepository] = None,
        client: Optional[httpx.Client] = None,
        forecast_url: str = FORECAST_BASE_URL,
        marine_url: str = MARINE_BASE_URL,
        timeout: float = 10.0,
        cache_ttls: Optional[Dict[str, int]] = None,
    ):
        """
        Initialize repository.

        Args:
            cache: Cache for API responses (no caching when omitted)
            client: HTTP client to reuse, a new one is created (and owned) when omitted
            forecast_url: Forecast API endpoint
            marine_url: Marine API endpoint
            timeout: Request timeout in seconds
            cache_ttls: TTLs in seconds keyed forecast_ttl, marine_ttl, current_ttl
        """
        self.cache = cache
        self._owns_client = client is None
        self.client = client or httpx.Client()
        self.forecast_url = forecast_url
        self.marine_url = marine_url
        self.timeout = timeout
        self.cache_ttls = {
            "forecast_ttl": 3600,
            "marine_ttl": 3600,
            "current_ttl": 3600,
            **(cache_ttls or {}),
        }

    def close(self) -> None:
        """Close the HTTP client if this repository created it."""
        if self._owns_client:
            self.client.close()

    def _fetch(self, url: str, params: Dict[str, Any], what: str) -> Dict[str, Any]:
        """GET an Open-Meteo endpoint and decode its JSON body."""
        try:
            resp = self.client.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Open-Meteo HTTP {e.response.status_code} fetching {what} "
                f"for ({params['latitude']},{params['longitude']})"
            )
            raise WeatherProviderError(f"Failed to fetch {what}") from e
        except httpx.RequestError as e:
            logger.warning(
                f"Open-Meteo network error fetching {what} "
                f"for ({params['latitude']},{params['longitude']}): {e}"
            )
            raise WeatherProviderError(f"Failed to fetch {what}") from e

    def _cached(self, key: str) -> Optional[Any]:
        if self.cache is None:
            return None
        return self.cache.get(key)

    def _store(self, key: str, value: Any, ttl_name: str) -> None:
        if self.cache is not None:
            self.cache.set(key, value, self.cache_ttls[ttl_name])

    @staticmethod
    def _daily_frame(payload: Dict[str, Any], variables: Dict[str, str], what: str) -> pd.DataFrame:
        """Turn an Open-Meteo 'daily' block into a DataFrame keyed by date."""
        daily = payload.get("daily")
        if not daily or not daily.get("time"):
            raise WeatherProviderError(f"No daily data in {what} response")

        df = pd.DataFrame(daily).rename(columns={"time": "date", **variables})
        df["date"] = pd.to_datetime(df["date"]).dt.date

        # Variables the model does not provide are missing from the payload
        for column in variables.values():
            if column not in df.columns:
                df[column] = float("nan")
            df[column] = pd.to_numeric(df[column], errors="coerce")

        return df[["date", *variables.values()]]

    def get_daily_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int,
    ) -> pd.DataFrame:
        """Retrieve the daily forecast from the Open-Meteo forecast API."""
        cache_key = f"weather:{latitude},{longitude}:{days}"
        cached = self._cached(cache_key)
        if cached is not None:
            return cached.copy()

        logger.info(f"Fetching {days}-day forecast for ({latitude},{longitude})")
        payload = self._fetch(
            self.forecast_url,
            {
                "latitude": latitude,
                "longitude": longitude,
                "daily": ",".join(DAILY_VARIABLES),
                "timezone": "auto",
                "forecast_days": days,
            },
            "weather forecast",
        )
        df = self._daily_frame(payload, DAILY_VARIABLES, "weather forecast")

        self._store(cache_key, df, "forecast_ttl")
        return df.copy()

    def get_marine_forecast(
        self,
        latitude: float,
        longitude: float,
        days: int,
    ) -> pd.DataFrame:
        """Retrieve wave heights from the Open-Meteo marine API."""
        cache_key = f"marine:{latitude},{longitude}:{days}"
        cached = self._cached(cache_key)
        if cached is not None:
            return cached.copy()

        logger.info(f"Fetching {days}-day marine forecast for ({latitude},{longitude})")
        payload = self._fetch(
            self.marine_url,
            {
                "latitude": latitude,
                "longitude": longitude,
                "daily": ",".join(MARINE_VARIABLES),
                "timezone": "auto",
                "forecast_days": days,
            },
            "marine forecast",
        )
        df = self._daily_frame(payload, MARINE_VARIABLES, "marine forecast")

        self._store(cache_key, df, "marine_ttl")
        return df.copy()

    def get_current_weather(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Retrieve current conditions from the Open-Meteo forecast API."""
        cache_key = f"current:{latitude},{longitude}"
        cached = self._cached(cache_key)
        if cached is not None:
            return dict(cached)

        payload = self._fetch(
            self.forecast_url,
            {
                "latitude": latitude,
                "longitude": longitude,
                "current": ",".join(CURRENT_VARIABLES),
                "timezone": "auto",
            },
            "current weather",
        )
        current = payload.get("current")
        if not current:
            raise WeatherProviderError("No current data in current weather response")

        result: Dict[str, Any] = {"time": datetime.fromisoformat(current["time"])}
        for variable, key in CURRENT_VARIABLES.items():
            result[key] = current.get(variable)

        self._store(cache_key, result, "current_ttl")
        return dict(result)
