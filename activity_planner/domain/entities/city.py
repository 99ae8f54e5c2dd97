"""City entity."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class City:
    """Represents a geocoded city."""

    name: str
    latitude: float
    longitude: float
    country_code: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "City":
        """Create City from a geocoding result."""
        return cls(
            name=data["name"],
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            country_code=data.get("country_code", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "country_code": self.country_code,
        }

    def __str__(self) -> str:
        return self.name
