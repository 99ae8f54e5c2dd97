"""Weather factor enumeration."""

from enum import Enum


class WeatherFactor(str, Enum):
    """Weather variable a scoring rule reads from an observation."""

    TEMPERATURE = "temperature"
    SNOW_DEPTH = "snow_depth"
    WIND_SPEED = "wind_speed"
    PRECIPITATION = "precipitation"
    CLOUD_COVER = "cloud_cover"
    WAVE_HEIGHT = "wave_height"  # For surfing
    VISIBILITY = "visibility"  # For sightseeing
