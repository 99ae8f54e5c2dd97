"""FastAPI main application."""

import logging
from contextlib import asynccontextmanager
from typing import Dict, List, Optional
from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from ...application.services.activity_ranking_service import ActivityRankingService
from ...application.services.location_search_service import LocationSearchService
from ...application.services.weather_data_service import WeatherDataService
from ...domain.exceptions import ActivityPlannerError, CityNotFoundError
from ...infrastructure.repositories.in_memory_cache_repository import InMemoryCacheRepository
from ...infrastructure.repositories.open_meteo_location_repository import OpenMeteoLocationRepository
from ...infrastructure.repositories.open_meteo_weather_repository import OpenMeteoWeatherRepository
from config.settings import (
    API_SETTINGS,
    CACHE_SETTINGS,
    OPEN_METEO_SETTINGS,
    SERVER_SETTINGS,
)

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Initialize repositories and services
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


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    location_repo.close()
    weather_repo.close()
    logger.info("Open-Meteo clients closed")


# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[SERVER_SETTINGS["cors_origin"]],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    allow_credentials=True,
)


def get_location_service() -> LocationSearchService:
    return location_service


def get_weather_service() -> WeatherDataService:
    return weather_service


def get_ranking_service() -> ActivityRankingService:
    return ranking_service


# Response models
class CurrentWeatherResponse(BaseModel):
    """Current conditions at a city."""

    date: str
    temperature: float
    precipitation: float
    snowDepth: float
    windSpeed: float
    cloudCover: float
    visibility: float
    waveHeight: float


class CityResponse(BaseModel):
    """Geocoded city with its current weather."""

    name: str
    latitude: float
    longitude: float
    country_code: str
    current_weather: Optional[CurrentWeatherResponse] = None


class ActivityScoreResponse(BaseModel):
    score: int = Field(..., description="Suitability score (0-100)")
    recommendation: str


class DailyActivitiesResponse(BaseModel):
    skiing: ActivityScoreResponse
    surfing: ActivityScoreResponse
    outdoor_sightseeing: ActivityScoreResponse
    indoor_sightseeing: ActivityScoreResponse


class ActivityRankingDayResponse(BaseModel):
    date: str
    activities: DailyActivitiesResponse


class CityIdentityResponse(BaseModel):
    name: str
    latitude: float
    longitude: float
    country_code: str


class WeatherForecastDayResponse(BaseModel):
    date: str
    temperature_min: float
    temperature_max: float
    temperature_avg: float
    precipitation: float
    snowDepth: float
    windSpeed: float
    cloudCover: float
    visibility: float
    waveHeight: Optional[float] = None


class ActivityRankingResponse(BaseModel):
    """Response model for activity rankings."""

    city: CityIdentityResponse
    days: List[ActivityRankingDayResponse]
    weatherForecast: Optional[List[WeatherForecastDayResponse]] = None


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": API_SETTINGS["title"],
        "version": API_SETTINGS["version"],
        "endpoints": {
            "city": "/city",
            "activity_ranking": "/activity-ranking",
            "health": "/health",
        },
    }


@app.get("/health")
async def health() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/city", response_model=CityResponse)
async def city(
    city: str = Query(..., min_length=2, max_length=50, description="City name"),
    location_service: LocationSearchService = Depends(get_location_service),
    weather_service: WeatherDataService = Depends(get_weather_service),
) -> CityResponse:
    """
    Geocode a city and report its current weather.

    Args:
        city: City name

    Returns:
        City identity and current conditions
    """
    try:
        found = location_service.get_city(city)
        current = weather_service.get_current_weather(found)
        return CityResponse(**found.to_dict(), current_weather=current.to_dict())

    except CityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ActivityPlannerError as e:
        logger.error(f"City lookup error: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"City lookup error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/activity-ranking", response_model=ActivityRankingResponse)
async def activity_ranking(
    city: str = Query(
        ...,
        min_length=2,
        max_length=50,
        description="City name to get activity rankings for",
    ),
    days: Optional[int] = Query(
        None,
        ge=1,
        le=OPEN_METEO_SETTINGS["max_days"],
        description="Number of forecast days",
    ),
    include_forecast: bool = Query(False, description="Include the daily weather forecast"),
    ranking_service: ActivityRankingService = Depends(get_ranking_service),
    weather_service: WeatherDataService = Depends(get_weather_service),
) -> ActivityRankingResponse:
    """
    Rank skiing, surfing and sightseeing for each forecast day of a city.

    Args:
        city: City name
        days: Number of forecast days
        include_forecast: Whether to attach the weather forecast

    Returns:
        Activity rankings per day
    """
    try:
        result = ranking_service.get_activity_rankings(city, days)
        response = result.to_dict()

        if include_forecast:
            response["weatherForecast"] = weather_service.get_weather_forecast(result.city, days)

        return ActivityRankingResponse(**response)

    except CityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ActivityPlannerError as e:
        logger.error(f"Activity ranking error: {e}", exc_info=True)
        raise HTTPException(status_code=502, detail="Failed to get activity rankings")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Activity ranking error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=SERVER_SETTINGS["host"], port=SERVER_SETTINGS["port"])
