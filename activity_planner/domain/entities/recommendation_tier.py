"""Recommendation tier enumeration."""

from enum import IntEnum


class RecommendationTier(IntEnum):
    """Score band used to pick a recommendation; higher is better."""

    TERRIBLE = 0  # below 20
    POOR = 1  # 20-39
    MEDIOCRE = 2  # 40-59
    GOOD = 3  # 60-79
    EXCELLENT = 4  # 80 and above

    @classmethod
    def from_score(cls, score: float) -> "RecommendationTier":
        if score >= 80:
            return cls.EXCELLENT
        if score >= 60:
            return cls.GOOD
        if score >= 40:
            return cls.MEDIOCRE
        if score >= 20:
            return cls.POOR
        return cls.TERRIBLE
