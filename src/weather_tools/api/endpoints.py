"""HTTP endpoints mirroring the weather tools."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from weather_tools.config import (
    DEFAULT_FORECAST_DAYS, MAX_FORECAST_DAYS, MAX_SAMPLES_PER_DAY, MCP_SERVER_NAME
)
from weather_tools.weather.service import WeatherToolService

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["weather"])


def get_weather_service(request: Request) -> WeatherToolService:
    """Dependency returning the application's shared weather service."""
    return request.app.state.weather_service


@router.get("/current", response_class=PlainTextResponse)
async def get_current_weather(
    city: str = Query(..., description="Name of the city to get current weather for"),
    service: WeatherToolService = Depends(get_weather_service)
) -> str:
    """Get current weather conditions for a city."""
    return await service.get_current_weather(city)


@router.get("/forecast", response_class=PlainTextResponse)
async def get_weather_forecast(
    city: str = Query(..., description="Name of the city to get weather forecast for"),
    days: int = Query(
        DEFAULT_FORECAST_DAYS,
        description="Number of days to forecast (1-5); other values return an error message"
    ),
    service: WeatherToolService = Depends(get_weather_service)
) -> str:
    """Get the weather forecast for a city.

    Out-of-range ``days`` is answered with the tool's error text rather than
    a 4xx, matching what MCP callers receive.
    """
    return await service.get_weather_forecast(city, days)


@router.get("/alerts", response_class=PlainTextResponse)
async def get_weather_alerts(
    city: str = Query(..., description="Name of the city to get weather alerts for"),
    service: WeatherToolService = Depends(get_weather_service)
) -> str:
    """Get active weather alerts for a city."""
    return await service.get_weather_alerts(city)


@router.get("/health")
async def health_check() -> dict:
    """Health check endpoint.

    Returns:
        Health status response
    """
    return {"status": "healthy", "service": MCP_SERVER_NAME}


@router.get("/info")
async def get_service_info() -> dict:
    """Get service information.

    Returns:
        Service information including tools and limits
    """
    return {
        "service": "Weather Tools",
        "version": "0.1.0",
        "tools": ["get_current_weather", "get_weather_forecast", "get_weather_alerts"],
        "forecast": {
            "default_days": DEFAULT_FORECAST_DAYS,
            "max_days": MAX_FORECAST_DAYS,
            "samples_per_day": MAX_SAMPLES_PER_DAY
        },
        "data_source": "OpenWeather API"
    }
