"""Activity type enumeration."""

from enum import Enum


class ActivityType(str, Enum):
    """Enumeration of the activities that can be ranked."""

    SKIING = "skiing"
    SURFING = "surfing"
    OUTDOOR_SIGHTSEEING = "outdoor_sightseeing"
    INDOOR_SIGHTSEEING = "indoor_sightseeing"

    def to_label(self) -> str:
        """Convert to a human readable label."""
        return self.value.replace("_", " ").title()
