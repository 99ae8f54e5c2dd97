"""Open-Meteo geocoding repository implementation."""

import logging
from typing import Optional
import httpx
from ...domain.entities.city import City
from ...domain.exceptions import WeatherProviderError
from ...domain.repositories.cache_repository import CacheRepository
from ...domain.repositories.location_repository import LocationRepository

logger = logging.getLogger(__name__)

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com/v1/search"


class OpenMeteoLocationRepository(LocationRepository):
    """Repository resolving city names through the Open-Meteo geocoding API."""

    def __init__(
        self,
        cache: Optional[CacheRepository] = None,
        client: Optional[httpx.Client] = None,
        base_url: str = GEOCODING_BASE_URL,
        timeout: float = 10.0,
        cache_ttl: int = 60 * 60 * 24,
    ):
        """
        Initialize repository.

        Args:
            cache: Cache for geocoding results (no caching when omitted)
            client: HTTP client to reuse, a new one is created (and owned) when omitted
            base_url: Geocoding endpoint
            timeout: Request timeout in seconds
            cache_ttl: Time to live of cached results in seconds
        """
        self.cache = cache
        self._owns_client = client is None
        self.client = client or httpx.Client()
        self.base_url = base_url
        self.timeout = timeout
        self.cache_ttl = cache_ttl

    def close(self) -> None:
        """Close the HTTP client if this repository created it."""
        if self._owns_client:
            self.client.close()

    def search_city(self, name: str) -> Optional[City]:
        """Geocode a city name, returning the first match."""
        cache_key = f"geocode:{name.lower()}"
        if self.cache is not None:
            cached = self.cache.get(cache_key)
            if cached is not None:
                return cached

        params = {"name": name, "count": 1, "format": "json", "language": "en"}
        try:
            resp = self.client.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Open-Meteo geocoding HTTP {e.response.status_code} for '{name}'")
            raise WeatherProviderError("Failed to geocode location") from e
        except httpx.RequestError as e:
            logger.warning(f"Open-Meteo geocoding network error for '{name}': {e}")
            raise WeatherProviderError("Failed to geocode location") from e

        results = data.get("results") or []
        if not results:
            logger.info(f"No geocoding match for '{name}'")
            return None

        city = City.from_dict(results[0])
        if self.cache is not None:
            self.cache.set(cache_key, city, self.cache_ttl)
        return city
