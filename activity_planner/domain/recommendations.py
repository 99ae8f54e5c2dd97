"""Recommendation sentences per activity and score tier."""

from types import MappingProxyType
from typing import Mapping, Tuple

from .entities.activity_type import ActivityType
from .entities.recommendation_tier import RecommendationTier

FALLBACK_RECOMMENDATION = "Unable to provide a recommendation for this activity."

RECOMMENDATIONS: Mapping[Tuple[ActivityType, RecommendationTier], str] = MappingProxyType(
    {
        # Excellent (>= 80)
        (ActivityType.SKIING, RecommendationTier.EXCELLENT):
            "Perfect conditions for skiing! Grab your skis and enjoy the slopes.",
        (ActivityType.SURFING, RecommendationTier.EXCELLENT):
            "Excellent surfing conditions! Head to the beach and catch some waves.",
        (ActivityType.OUTDOOR_SIGHTSEEING, RecommendationTier.EXCELLENT):
            "Ideal day for outdoor sightseeing. Get out and explore!",
        (ActivityType.INDOOR_SIGHTSEEING, RecommendationTier.EXCELLENT):
            "Great day for indoor activities, but outdoor options are also excellent.",
        # Good (60-79)
        (ActivityType.SKIING, RecommendationTier.GOOD):
            "Good skiing conditions. Should be an enjoyable day on the slopes.",
        (ActivityType.SURFING, RecommendationTier.GOOD):
            "Good surfing conditions. Worth heading to the beach.",
        (ActivityType.OUTDOOR_SIGHTSEEING, RecommendationTier.GOOD):
            "Nice day for outdoor sightseeing. Bring appropriate clothing.",
        (ActivityType.INDOOR_SIGHTSEEING, RecommendationTier.GOOD):
            "Good day for indoor activities, but outdoor options are also reasonable.",
        # Mediocre (40-59)
        (ActivityType.SKIING, RecommendationTier.MEDIOCRE):
            "Mediocre skiing conditions. You might want to check other activities.",
        (ActivityType.SURFING, RecommendationTier.MEDIOCRE):
            "Average surfing conditions. Could be challenging.",
        (ActivityType.OUTDOOR_SIGHTSEEING, RecommendationTier.MEDIOCRE):
            "Acceptable day for outdoor activities. Be prepared for varying conditions.",
        (ActivityType.INDOOR_SIGHTSEEING, RecommendationTier.MEDIOCRE):
            "Consider indoor sightseeing as weather conditions are mixed.",
        # Poor (20-39)
        (ActivityType.SKIING, RecommendationTier.POOR):
            "Poor skiing conditions. Not recommended today.",
        (ActivityType.SURFING, RecommendationTier.POOR):
            "Poor surfing conditions. Consider alternative activities.",
        (ActivityType.OUTDOOR_SIGHTSEEING, RecommendationTier.POOR):
            "Not the best day for outdoor activities. Consider indoor alternatives.",
        (ActivityType.INDOOR_SIGHTSEEING, RecommendationTier.POOR):
            "Good day to explore indoor attractions due to poor outdoor conditions.",
        # Terrible (< 20)
        (ActivityType.SKIING, RecommendationTier.TERRIBLE):
            "Terrible skiing conditions. Definitely avoid today.",
        (ActivityType.SURFING, RecommendationTier.TERRIBLE):
            "Dangerous surfing conditions. Avoid water activities.",
        (ActivityType.OUTDOOR_SIGHTSEEING, RecommendationTier.TERRIBLE):
            "Stay indoors. Outdoor activities not recommended at all.",
        (ActivityType.INDOOR_SIGHTSEEING, RecommendationTier.TERRIBLE):
            "Perfect day for indoor activities. Enjoy museums, galleries, and other indoor attractions.",
    }
)


def generate_recommendation(activity_type: ActivityType, score: float) -> str:
    """
    Pick the recommendation sentence for an activity's score.

    Args:
        activity_type: Activity being recommended
        score: Activity score (0-100)

    Returns:
        Recommendation text, or a fallback sentence for unknown activities
    """
    try:
        activity = ActivityType(activity_type)
    except ValueError:
        return FALLBACK_RECOMMENDATION
    return RECOMMENDATIONS[(activity, RecommendationTier.from_score(score))]
