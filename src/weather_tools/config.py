"""Configuration settings for the weather tool server."""

import os
from typing import Final, Optional
from dotenv import load_dotenv

load_dotenv()

# Provider configuration
OPENWEATHER_API_KEY: Optional[str] = os.getenv("OPENWEATHER_API_KEY")
OPENWEATHER_BASE_URL: str = os.getenv("OPENWEATHER_BASE_URL", "https://api.openweathermap.org")
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))
USER_AGENT: Final[str] = "WeatherTools/0.1"

# Forecast limits (provider horizon is 5 days at 3-hour resolution)
DEFAULT_FORECAST_DAYS: Final[int] = 3
MIN_FORECAST_DAYS: Final[int] = 1
MAX_FORECAST_DAYS: Final[int] = 5
MAX_SAMPLES_PER_DAY: Final[int] = 4

# MCP server configuration
MCP_SERVER_NAME: str = os.getenv("MCP_SERVER_NAME", "weather-tools")
MCP_TRANSPORT: str = os.getenv("MCP_TRANSPORT", "stdio")

# HTTP server configuration
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
