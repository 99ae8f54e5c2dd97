"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Named cache durations (seconds)
CACHE_TTL = {
    "one_minute": 60,
    "one_hour": 60 * 60,
    "one_day": 60 * 60 * 24,
    "one_week": 60 * 60 * 24 * 7,
}

# Cache settings
CACHE_SETTINGS = {
    "default_ttl": int(os.getenv("CACHE_TTL", "3600")),
    "geocode_ttl": CACHE_TTL["one_day"],
    "forecast_ttl": CACHE_TTL["one_hour"],
    "marine_ttl": CACHE_TTL["one_hour"],
    "current_ttl": CACHE_TTL["one_hour"],
}

# Open-Meteo settings
OPEN_METEO_SETTINGS = {
    "geocoding_url": os.getenv(
        "OPEN_METEO_GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
    ),
    "forecast_url": os.getenv(
        "OPEN_METEO_FORECAST_URL", "https://api.open-meteo.com/v1/forecast"
    ),
    "marine_url": os.getenv(
        "OPEN_METEO_MARINE_URL", "https://marine-api.open-meteo.com/v1/marine"
    ),
    "timeout": float(os.getenv("OPEN_METEO_TIMEOUT", "10")),
    "default_days": 8,
    "max_days": 16,
    "default_visibility": 10000,  # meters, when the model has no visibility
}

# Server settings
SERVER_SETTINGS = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "4000")),
    "environment": os.getenv("ENVIRONMENT", "development"),
    "cors_origin": os.getenv("CORS_ORIGIN", "*"),
}

# API settings
API_SETTINGS = {
    "title": "Weather Activity Planner API",
    "description": "API for ranking skiing, surfing and sightseeing by weather forecast",
    "version": "1.0.0",
}
