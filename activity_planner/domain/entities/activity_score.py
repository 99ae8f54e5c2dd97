"""Activity ranking result entities."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .activity_type import ActivityType
from .city import City


@dataclass(frozen=True)
class ActivityScore:
    """Score and recommendation for one activity on one day."""

    score: int
    recommendation: str

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "recommendation": self.recommendation}


@dataclass(frozen=True)
class ActivityRankingDay:
    """Scores of every activity for a single forecast day."""

    date: str  # ISO-8601
    activities: Dict[ActivityType, ActivityScore]

    def best_activity(self) -> ActivityType:
        """Activity with the highest score (first in declaration order on ties)."""
        return max(ActivityType, key=lambda a: self.activities[a].score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "activities": {
                activity.value: score.to_dict()
                for activity, score in self.activities.items()
            },
        }


@dataclass(frozen=True)
class ActivityRankingResult:
    """Multi-day activity ranking for a city."""

    city: City
    days: List[ActivityRankingDay] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "city": self.city.to_dict(),
            "days": [day.to_dict() for day in self.days],
        }
