"""Example usage of the weather activity planner."""

import logging
from datetime import date, timedelta
from activity_planner.application.services.activity_ranking_service import ActivityRankingService
from activity_planner.application.services.location_search_service import LocationSearchService
from activity_planner.application.services.weather_data_service import WeatherDataService
from activity_planner.domain.entities.city import City
from activity_planner.domain.entities.weather_observation import Temperature, WeatherObservation
from activity_planner.domain.exceptions import ActivityPlannerError
from activity_planner.domain.scoring import build_ranking
from activity_planner.infrastructure.repositories.in_memory_cache_repository import InMemoryCacheRepository
from activity_planner.infrastructure.repositories.open_meteo_location_repository import OpenMeteoLocationRepository
from activity_planner.infrastructure.repositories.open_meteo_weather_repository import OpenMeteoWeatherRepository
from config.settings import CACHE_SETTINGS, OPEN_METEO_SETTINGS

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    # Example 1: Score hand-written observations, no network involved
    print("=" * 60)
    print("Example 1: Ranking a hand-made forecast")
    print("=" * 60)
    chamonix = City(name="Chamonix", latitude=45.92, longitude=6.87, country_code="FR")
    start = date.today()
    observations = [
        WeatherObservation(
            date=start,
            temperature=Temperature.from_min_max(-5, 0),
            precipitation=0,
            snow_depth=50,
            wind_speed=5,
            cloud_cover=0,
            visibility=10000,
        ),
        WeatherObservation(
            date=start + timedelta(days=1),
            temperature=Temperature.from_min_max(20, 25),
            precipitation=10,
            snow_depth=0,
            wind_speed=30,
            cloud_cover=100,
            visibility=1000,
        ),
    ]
    result = build_ranking(chamonix, observations)
    for day in result.days:
        print(f"\n{day.date}")
        for activity, score in day.activities.items():
            print(f"  {activity.to_label():<20} {score.score:>3}  {score.recommendation}")

    # Example 2: Live forecast from Open-Meteo
    print("\n" + "=" * 60)
    print("Example 2: Ranking a live forecast")
    print("=" * 60)
    cache_repo = InMemoryCacheRepository(default_ttl=CACHE_SETTINGS["default_ttl"])
    location_repo = OpenMeteoLocationRepository(cache=cache_repo)
    weather_repo = OpenMeteoWeatherRepository(cache=cache_repo, cache_ttls=CACHE_SETTINGS)
    location_service = LocationSearchService(location_repo)
    weather_service = WeatherDataService(
        weather_repo,
        default_days=OPEN_METEO_SETTINGS["default_days"],
    )
    service = ActivityRankingService(location_service, weather_service)

    try:
        live = service.get_activity_rankings("Biarritz", days=3)
        for day in live.days:
            best = day.best_activity()
            print(f"{day.date}: best activity is {best.to_label()} ({day.activities[best].score})")
    except ActivityPlannerError as e:
        logger.error(f"Live ranking failed: {e}", exc_info=True)
    finally:
        location_repo.close()
        weather_repo.close()


if __name__ == "__main__":
    main()
