"""Weather observation entities."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Temperature:
    """Daily temperature summary in Celsius."""

    min: float
    max: float
    avg: float

    @classmethod
    def from_min_max(cls, minimum: float, maximum: float) -> "Temperature":
        """Build a summary whose average is the midpoint of min and max."""
        return cls(min=minimum, max=maximum, avg=(maximum + minimum) / 2)


@dataclass(frozen=True)
class WeatherObservation:
    """Represents one day of forecast weather for a location."""

    date: date
    temperature: Temperature
    precipitation: float  # mm
    snow_depth: float  # cm
    wind_speed: float  # km/h
    cloud_cover: float  # percentage
    visibility: float  # meters
    wave_height: Optional[float] = None  # meters, None inland

    def to_forecast_day(self) -> Dict[str, Any]:
        """Flatten into the forecast-day shape served alongside rankings."""
        return {
            "date": self.date.isoformat(),
            "temperature_min": self.temperature.min,
            "temperature_max": self.temperature.max,
            "temperature_avg": self.temperature.avg,
            "precipitation": self.precipitation,
            "snowDepth": self.snow_depth,
            "windSpeed": self.wind_speed,
            "cloudCover": self.cloud_cover,
            "visibility": self.visibility,
            "waveHeight": self.wave_height,
        }


@dataclass(frozen=True)
class CurrentWeather:
    """Represents the weather right now at a location."""

    time: datetime
    temperature: float  # Celsius
    precipitation: float  # mm
    snowfall: float  # cm
    wind_speed: float  # km/h
    cloud_cover: float  # percentage
    visibility: float  # meters

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.time.isoformat(),
            "temperature": self.temperature,
            "precipitation": self.precipitation,
            "snowDepth": self.snowfall,
            "windSpeed": self.wind_speed,
            "cloudCover": self.cloud_cover,
            "visibility": self.visibility,
            "waveHeight": 0.0,
        }
