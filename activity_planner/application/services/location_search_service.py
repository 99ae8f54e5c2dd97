"""Service resolving city names to coordinates."""

import logging
from typing import Optional

from ...domain.entities.city import City
from ...domain.repositories.location_repository import LocationRepository
from ...domain.use_cases.search_city import SearchCityUseCase

logger = logging.getLogger(__name__)


class LocationSearchService:
    """Looks up cities through a location repository."""

    def __init__(self, location_repo: LocationRepository):
        self.location_repo = location_repo
        self.search_city_uc = SearchCityUseCase(location_repo)

    def search_city(self, city_name: str) -> Optional[City]:
        """Return the best matching city, or None."""
        return self.location_repo.search_city(city_name)

    def get_city(self, city_name: str) -> City:
        """Return the best matching city, raising CityNotFoundError if none."""
        return self.search_city_uc.execute(city_name)
