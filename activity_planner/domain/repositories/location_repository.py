"""Location repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from ..entities.city import City


class LocationRepository(ABC):
    """Abstract repository for geocoding city names."""

    @abstractmethod
    def search_city(self, name: str) -> Optional[City]:
        """
        Find the best match for a city name.

        Args:
            name: City name as typed by the user

        Returns:
            City with coordinates, or None if nothing matches
        """
        pass
