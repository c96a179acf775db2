"""MCP server exposing the weather tools to LLM clients."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, AsyncIterator

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from weather_tools.config import DEFAULT_FORECAST_DAYS, MCP_SERVER_NAME, MCP_TRANSPORT
from weather_tools.logging_config import configure_logging
from weather_tools.weather.service import WeatherToolService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_server: FastMCP) -> AsyncIterator[WeatherToolService]:
    """Own one weather service (and its connection pool) for the server lifetime."""
    logger.info("Starting weather tool server")
    async with WeatherToolService() as service:
        yield service
    logger.info("Weather tool server stopped")


mcp = FastMCP(MCP_SERVER_NAME, lifespan=lifespan)


def _service(ctx: Context) -> WeatherToolService:
    return ctx.request_context.lifespan_context


@mcp.tool()
async def get_current_weather(
    city: Annotated[str, Field(description="Name of the city to get current weather for")],
    ctx: Context
) -> str:
    """Get current weather conditions for a specific city or location."""
    return await _service(ctx).get_current_weather(city)


@mcp.tool()
async def get_weather_forecast(
    city: Annotated[str, Field(description="Name of the city to get weather forecast for")],
    ctx: Context,
    days: Annotated[int, Field(description="Number of days to forecast (1-5, default: 3)")] = DEFAULT_FORECAST_DAYS
) -> str:
    """Get weather forecast for a specific city (5-day forecast with 3-hour intervals)."""
    return await _service(ctx).get_weather_forecast(city, days)


@mcp.tool()
async def get_weather_alerts(
    city: Annotated[str, Field(description="Name of the city to get weather alerts for")],
    ctx: Context
) -> str:
    """Get weather alerts and warnings for a specific location."""
    return await _service(ctx).get_weather_alerts(city)


def main() -> None:
    """Entry point for the MCP server."""
    configure_logging()
    logger.info(f"Running MCP server '{MCP_SERVER_NAME}' over {MCP_TRANSPORT}")
    mcp.run(transport=MCP_TRANSPORT)


if __name__ == "__main__":
    main()
