"""Activity criteria entities."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .weather_factor import WeatherFactor


@dataclass(frozen=True)
class FactorWeight:
    """A weighted scoring rule for one weather factor.

    A rule scores either against a single ``ideal_value`` or an inclusive
    ``ideal_range``; exactly one of the two is expected to be set. Deviations
    are only penalised in the directions flagged by ``is_bad_when_above`` and
    ``is_bad_when_below``.
    """

    factor: WeatherFactor
    weight: float  # 0-1, weights of one activity should sum to 1
    ideal_value: Optional[float] = None
    ideal_range: Optional[Tuple[float, float]] = None
    is_bad_when_above: bool = False
    is_bad_when_below: bool = False


@dataclass(frozen=True)
class ActivityCriteria:
    """Weighted factors and score bounds for one activity."""

    min_score: float
    max_score: float
    factors: Tuple[FactorWeight, ...]

    @property
    def total_weight(self) -> float:
        return sum(f.weight for f in self.factors)
