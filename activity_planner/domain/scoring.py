"""Weather-based activity scoring.

Each activity is scored from a day's weather by combining weighted factor
scores from its criteria. A factor score starts at 100 and loses a penalty
proportional to how far the observed value strays from the ideal, but only
in the directions the rule marks as bad.
"""

import math
from typing import Callable, Dict, Mapping, Optional, Sequence

from .criteria import ACTIVITY_CRITERIA
from .entities.activity_criteria import ActivityCriteria, FactorWeight
from .entities.activity_score import ActivityRankingDay, ActivityRankingResult, ActivityScore
from .entities.activity_type import ActivityType
from .entities.city import City
from .entities.weather_factor import WeatherFactor
from .entities.weather_observation import WeatherObservation
from .recommendations import generate_recommendation

PERFECT_SCORE = 100.0
NEUTRAL_SCORE = 50.0

_FACTOR_READERS: Dict[WeatherFactor, Callable[[WeatherObservation], float]] = {
    WeatherFactor.TEMPERATURE: lambda obs: obs.temperature.avg,
    WeatherFactor.SNOW_DEPTH: lambda obs: obs.snow_depth,
    WeatherFactor.WIND_SPEED: lambda obs: obs.wind_speed,
    WeatherFactor.PRECIPITATION: lambda obs: obs.precipitation,
    WeatherFactor.CLOUD_COVER: lambda obs: obs.cloud_cover,
    WeatherFactor.VISIBILITY: lambda obs: obs.visibility,
    WeatherFactor.WAVE_HEIGHT: lambda obs: obs.wave_height if obs.wave_height is not None else 0.0,
}


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def _penalty(deviation: float, scale: float) -> float:
    """Deviation as a percentage of scale, capped to 0-100."""
    if scale == 0:
        # A zero scale saturates on any deviation
        return PERFECT_SCORE if deviation > 0 else 0.0
    return _clamp(deviation / scale * 100, 0.0, 100.0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def read_factor(factor: WeatherFactor, observation: WeatherObservation) -> Optional[float]:
    """Return the observation value a factor reads, or None for unknown factors."""
    try:
        reader = _FACTOR_READERS[WeatherFactor(factor)]
    except ValueError:
        return None
    return reader(observation)


def score_factor(rule: FactorWeight, observation: WeatherObservation) -> float:
    """
    Score a single weather factor for one day.

    Args:
        rule: Factor rule with its ideal value or range and bad directions
        observation: Weather for the day

    Returns:
        Factor score between 0 and 100 (50 for unknown factors)
    """
    actual = read_factor(rule.factor, observation)
    if actual is None:
        return NEUTRAL_SCORE

    score = PERFECT_SCORE

    if rule.ideal_value is not None:
        ideal = rule.ideal_value
        deviation = abs(actual - ideal)
        # The ideal value itself is the 100% deviation reference
        max_deviation = ideal

        penalty = 0.0
        if (rule.is_bad_when_above and actual > ideal) or (
            rule.is_bad_when_below and actual < ideal
        ):
            penalty = _penalty(deviation, max_deviation)

        score = _clamp(PERFECT_SCORE - penalty, 0.0, PERFECT_SCORE)

    elif rule.ideal_range is not None:
        low, high = rule.ideal_range
        if low <= actual <= high:
            return PERFECT_SCORE

        deviation = low - actual if actual < low else actual - high
        range_size = high - low

        if (
            (rule.is_bad_when_above and actual > high)
            or (rule.is_bad_when_below and actual < low)
            or (rule.is_bad_when_above and rule.is_bad_when_below)
        ):
            penalty = _penalty(deviation, range_size)
            score = _clamp(PERFECT_SCORE - penalty, 0.0, PERFECT_SCORE)

    return score


def rank_activity(
    activity_type: ActivityType,
    observation: WeatherObservation,
    criteria: Mapping[ActivityType, ActivityCriteria] = ACTIVITY_CRITERIA,
) -> ActivityScore:
    """
    Score an activity for one day's weather.

    Args:
        activity_type: Activity to score
        observation: Weather for the day
        criteria: Criteria table to score against

    Returns:
        ActivityScore with an integer score within the activity's bounds
    """
    activity_criteria = criteria[activity_type]

    total_score = sum(
        score_factor(rule, observation) * rule.weight
        for rule in activity_criteria.factors
    )
    normalized = _clamp(total_score, activity_criteria.min_score, activity_criteria.max_score)
    score = _round_half_up(normalized)

    return ActivityScore(
        score=score,
        recommendation=generate_recommendation(activity_type, score),
    )


def rank_day(
    observation: WeatherObservation,
    criteria: Mapping[ActivityType, ActivityCriteria] = ACTIVITY_CRITERIA,
) -> ActivityRankingDay:
    """Score every activity type independently for one day."""
    return ActivityRankingDay(
        date=observation.date.isoformat(),
        activities={
            activity: rank_activity(activity, observation, criteria)
            for activity in ActivityType
        },
    )


def build_ranking(
    city: City,
    observations: Sequence[WeatherObservation],
    criteria: Mapping[ActivityType, ActivityCriteria] = ACTIVITY_CRITERIA,
) -> ActivityRankingResult:
    """
    Rank activities for every forecast day of a city.

    Args:
        city: City the forecast belongs to
        observations: Daily observations in date order

    Returns:
        ActivityRankingResult with one day per observation, order preserved

    Raises:
        ValueError: If there are no observations
    """
    if not observations:
        raise ValueError(f"No weather observations to rank for {city.name}")

    return ActivityRankingResult(
        city=city,
        days=[rank_day(observation, criteria) for observation in observations],
    )
