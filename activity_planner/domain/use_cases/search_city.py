"""Use case for resolving a city name to coordinates."""

import logging
from ..entities.city import City
from ..exceptions import CityNotFoundError
from ..repositories.location_repository import LocationRepository

logger = logging.getLogger(__name__)


class SearchCityUseCase:
    """Use case to geocode a city name."""

    def __init__(self, repository: LocationRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for geocoding
        """
        self.repository = repository

    def execute(self, city_name: str) -> City:
        """
        Execute the use case.

        Args:
            city_name: City name to look up

        Returns:
            The matching City

        Raises:
            CityNotFoundError: If no city matches
        """
        logger.info(f"Searching city: {city_name}")
        city = self.repository.search_city(city_name)
        if city is None:
            raise CityNotFoundError(city_name)
        logger.info(f"Resolved {city_name} to {city.name} ({city.latitude}, {city.longitude})")
        return city
