"""Domain exceptions."""


class ActivityPlannerError(Exception):
    """Base class for planner failures."""


class CityNotFoundError(ActivityPlannerError, LookupError):
    """Raised when geocoding returns no match for a city name."""

    def __init__(self, city_name: str):
        super().__init__(f'City "{city_name}" not found')
        self.city_name = city_name


class WeatherProviderError(ActivityPlannerError):
    """Raised when the upstream weather provider fails or answers badly."""


class WeatherDataUnavailableError(ActivityPlannerError):
    """Raised when a forecast has no usable days."""


class ActivityRankingError(ActivityPlannerError):
    """Raised when rankings cannot be computed for a city."""
