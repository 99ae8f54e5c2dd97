"""Activity ranking criteria for each activity type."""

from types import MappingProxyType
from typing import Mapping

from .entities.activity_criteria import ActivityCriteria, FactorWeight
from .entities.activity_type import ActivityType
from .entities.weather_factor import WeatherFactor

ACTIVITY_CRITERIA: Mapping[ActivityType, ActivityCriteria] = MappingProxyType(
    {
        ActivityType.SKIING: ActivityCriteria(
            min_score=0,
            max_score=100,
            factors=(
                FactorWeight(
                    WeatherFactor.TEMPERATURE,
                    weight=0.3,
                    ideal_range=(-10, 5),
                    is_bad_when_above=True,
                ),
                FactorWeight(
                    WeatherFactor.SNOW_DEPTH,
                    weight=0.4,
                    ideal_value=50,
                    is_bad_when_below=True,
                ),
                FactorWeight(
                    WeatherFactor.PRECIPITATION,
                    weight=0.1,
                    ideal_value=0,
                    is_bad_when_above=True,
                ),
                FactorWeight(
                    WeatherFactor.VISIBILITY,
                    weight=0.2,
                    ideal_value=10000,
                    is_bad_when_below=True,
                ),
            ),
        ),
        ActivityType.SURFING: ActivityCriteria(
            min_score=0,
            max_score=100,
            factors=(
                FactorWeight(
                    WeatherFactor.TEMPERATURE,
                    weight=0.2,
                    ideal_range=(18, 30),
                    is_bad_when_below=True,
                ),
                FactorWeight(
                    WeatherFactor.WIND_SPEED,
                    weight=0.3,
                    ideal_range=(10, 30),
                    is_bad_when_above=True,
                ),
                FactorWeight(
                    WeatherFactor.WAVE_HEIGHT,
                    weight=0.4,
                    ideal_range=(1, 3),
                    is_bad_when_below=True,
                ),
                FactorWeight(
                    WeatherFactor.PRECIPITATION,
                    weight=0.1,
                    ideal_value=0,
                    is_bad_when_above=True,
                ),
            ),
        ),
        ActivityType.OUTDOOR_SIGHTSEEING: ActivityCriteria(
            min_score=0,
            max_score=100,
            factors=(
                FactorWeight(
                    WeatherFactor.TEMPERATURE,
                    weight=0.3,
                    ideal_range=(15, 28),
                    is_bad_when_above=True,
                    is_bad_when_below=True,
                ),
                FactorWeight(
                    WeatherFactor.PRECIPITATION,
                    weight=0.3,
                    ideal_value=0,
                    is_bad_when_above=True,
                ),
                FactorWeight(
                    WeatherFactor.CLOUD_COVER,
                    weight=0.2,
                    ideal_value=0,
                    is_bad_when_above=True,
                ),
                FactorWeight(
                    WeatherFactor.VISIBILITY,
                    weight=0.2,
                    ideal_value=10000,
                    is_bad_when_below=True,
                ),
            ),
        ),
        # Indoor activities stay viable in any weather, hence the floor of 40
        ActivityType.INDOOR_SIGHTSEEING: ActivityCriteria(
            min_score=40,
            max_score=100,
            factors=(
                FactorWeight(
                    WeatherFactor.PRECIPITATION,
                    weight=0.6,
                    ideal_value=100,  # Heavy rain favours indoor activities
                    is_bad_when_below=True,
                ),
                FactorWeight(
                    WeatherFactor.TEMPERATURE,
                    weight=0.2,
                    ideal_range=(-40, 15),
                    is_bad_when_above=True,
                ),
                FactorWeight(
                    WeatherFactor.VISIBILITY,
                    weight=0.2,
                    ideal_value=0,  # Poor visibility favours indoor activities
                    is_bad_when_above=True,
                ),
            ),
        ),
    }
)
