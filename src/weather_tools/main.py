"""FastAPI application serving the weather tools over HTTP."""

import logging
import traceback
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI

from weather_tools.api.endpoints import router as weather_router
from weather_tools.config import HOST, PORT, DEBUG
from weather_tools.logging_config import configure_logging
from weather_tools.weather.service import WeatherToolService

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    try:
        app.state.weather_service = WeatherToolService()
        logger.info("Starting Weather Tools HTTP service")
        yield
    except Exception as e:
        logger.error(f"Startup error: {e}")
        logger.error(traceback.format_exc())
        raise
    finally:
        service = getattr(app.state, "weather_service", None)
        if service is not None:
            await service.aclose()
        logger.info("Shutting down Weather Tools HTTP service")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Tools",
        description="Current conditions, forecasts and alerts from the OpenWeather API as plain-text reports",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.include_router(weather_router)

    @app.get("/api", tags=["root"])
    async def api_info() -> dict:
        """API information endpoint.

        Returns:
            Basic service information
        """
        return {
            "message": "Weather Tools",
            "docs": "/docs",
            "current": "/weather/current",
            "forecast": "/weather/forecast",
            "alerts": "/weather/alerts",
            "health": "/weather/health"
        }

    return app


# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Main entry point for the HTTP server."""
    logger.info(f"Starting server on {HOST}:{PORT}")
    uvicorn.run(
        "weather_tools.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
        log_level="info" if not DEBUG else "debug"
    )


if __name__ == "__main__":
    main()
