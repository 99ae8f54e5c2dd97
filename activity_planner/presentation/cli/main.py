"""CLI interface for weather activity rankings."""

import argparse
import json
import logging
import sys

import pandas as pd

from ...application.services.activity_ranking_service import ActivityRankingService
from ...application.services.location_search_service import LocationSearchService
from ...application.services.weather_data_service import WeatherDataService
from ...domain.entities.activity_score import ActivityRankingResult
from ...domain.entities.activity_type import ActivityType
from ...domain.exceptions import ActivityPlannerError, CityNotFoundError
from ...infrastructure.repositories.in_memory_cache_repository import InMemoryCacheRepository
from ...infrastructure.repositories.open_meteo_location_repository import OpenMeteoLocationRepository
from ...infrastructure.repositories.open_meteo_weather_repository import OpenMeteoWeatherRepository

from config.settings import (
    CACHE_SETTINGS,
    OPEN_METEO_SETTINGS,
    SERVER_SETTINGS,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)


def build_services():
    """Wire repositories and services from settings, returning the repositories to close."""
    cache_repo = InMemoryCacheRepository(default_ttl=CACHE_SETTINGS["default_ttl"])
    location_repo = OpenMeteoLocationRepository(
        cache=cache_repo,
        base_url=OPEN_METEO_SETTINGS["geocoding_url"],
        timeout=OPEN_METEO_SETTINGS["timeout"],
        cache_ttl=CACHE_SETTINGS["geocode_ttl"],
    )
    weather_repo = OpenMeteoWeatherRepository(
        cache=cache_repo,
        forecast_url=OPEN_METEO_SETTINGS["forecast_url"],
        marine_url=OPEN_METEO_SETTINGS["marine_url"],
        timeout=OPEN_METEO_SETTINGS["timeout"],
        cache_ttls=CACHE_SETTINGS,
    )
    location_service = LocationSearchService(location_repo)
    weather_service = WeatherDataService(
        weather_repo,
        default_days=OPEN_METEO_SETTINGS["default_days"],
        max_days=OPEN_METEO_SETTINGS["max_days"],
        default_visibility=OPEN_METEO_SETTINGS["default_visibility"],
    )
    ranking_service = ActivityRankingService(location_service, weather_service)
    return (location_service, weather_service, ranking_service), (location_repo, weather_repo)


def format_ranking(result: ActivityRankingResult) -> str:
    """Render a ranking as a plain text table."""
    city = result.city
    table = pd.DataFrame(
        [
            {
                "Date": day.date,
                **{a.to_label(): day.activities[a].score for a in ActivityType},
            }
            for day in result.days
        ]
    )
    lines = [
        "=" * 90,
        f" ACTIVITY RANKING: {city.name} ({city.country_code}) "
        f"{city.latitude:.2f}, {city.longitude:.2f}",
        "=" * 90,
        table.to_string(index=False),
        "-" * 90,
    ]
    if result.days:
        best = result.days[0].best_activity()
        lines.append(f" Today: {result.days[0].activities[best].recommendation}")
    lines.append("=" * 90)
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(description="Weather Activity Planner")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === rank: score activities for each forecast day ===
    rank_parser = subparsers.add_parser("rank", help="Rank activities for a city's forecast")
    rank_parser.add_argument("--city", type=str, required=True, help="e.g. 'Chamonix'")
    rank_parser.add_argument(
        "--days",
        type=int,
        default=None,
        help=f"Forecast days (default: {OPEN_METEO_SETTINGS['default_days']})",
    )
    rank_parser.add_argument("--json", action="store_true", help="Print the ranking as JSON")

    # === city: geocode and show current weather ===
    city_parser = subparsers.add_parser("city", help="Show a city's location and current weather")
    city_parser.add_argument("--city", type=str, required=True, help="e.g. 'Lisbon'")

    # === serve: run the HTTP API ===
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, default=SERVER_SETTINGS["host"])
    serve_parser.add_argument("--port", type=int, default=SERVER_SETTINGS["port"])

    args = parser.parse_args()

    # === Command: serve ===
    if args.command == "serve":
        import uvicorn

        logger.info(f"Server environment: {SERVER_SETTINGS['environment']}")
        uvicorn.run(
            "activity_planner.presentation.api.main:app", host=args.host, port=args.port
        )
        return

    (location_service, weather_service, ranking_service), repos = build_services()
    try:
        run_command(args, location_service, weather_service, ranking_service)
    finally:
        for repo in repos:
            repo.close()


def run_command(args, location_service, weather_service, ranking_service):
    """Run the rank or city command."""
    # === Command: rank ===
    if args.command == "rank":
        try:
            result = ranking_service.get_activity_rankings(args.city, args.days)
        except CityNotFoundError as e:
            logger.error(str(e))
            sys.exit(1)
        except (ActivityPlannerError, ValueError) as e:
            logger.error(f"Ranking failed: {e}", exc_info=True)
            sys.exit(1)

        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print(format_ranking(result))

    # === Command: city ===
    elif args.command == "city":
        try:
            city = location_service.get_city(args.city)
            current = weather_service.get_current_weather(city)
        except CityNotFoundError as e:
            logger.error(str(e))
            sys.exit(1)
        except ActivityPlannerError as e:
            logger.error(f"City lookup failed: {e}", exc_info=True)
            sys.exit(1)

        print("\n" + "=" * 50)
        print(f" {city.name} ({city.country_code})  {city.latitude:.4f}, {city.longitude:.4f}")
        print("=" * 50)
        print(f" Time:          {current.time.isoformat()}")
        print(f" Temperature:   {current.temperature:.1f} °C")
        print(f" Precipitation: {current.precipitation:.1f} mm")
        print(f" Snowfall:      {current.snowfall:.1f} cm")
        print(f" Wind speed:    {current.wind_speed:.1f} km/h")
        print(f" Cloud cover:   {current.cloud_cover:.0f} %")
        print(f" Visibility:    {current.visibility:.0f} m")
        print("=" * 50)


if __name__ == "__main__":
    main()
