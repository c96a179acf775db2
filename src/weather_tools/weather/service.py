"""Weather tool service: the three operations exposed to tool callers."""

import logging
from datetime import date, datetime, timezone
from typing import Callable, Optional

from weather_tools.config import DEFAULT_FORECAST_DAYS, MAX_FORECAST_DAYS, MIN_FORECAST_DAYS
from weather_tools.weather import report
from weather_tools.weather.bucketing import bucket_by_day
from weather_tools.weather.client import AuthError, OpenWeatherClient, TransportError
from weather_tools.weather.models import Location
from weather_tools.weather.normalizer import (
    to_alert_records, to_condition_sample, to_forecast_samples, to_location
)

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


class WeatherToolService:
    """Service turning tool calls into provider lookups and text reports.

    Every public method returns a string, including on failure; nothing is
    raised past this class.
    """

    def __init__(
        self,
        client: Optional[OpenWeatherClient] = None,
        today: Callable[[], date] = utc_today
    ):
        """Initialize the weather tool service.

        Args:
            client: Provider client (creates default if None)
            today: Clock returning the current UTC date, used as the
                forecast window start
        """
        self.client = client or OpenWeatherClient()
        self.today = today

    def _precondition_error(self, city: str) -> Optional[str]:
        """Return the guard message for a call that must not reach the provider."""
        if not self.client.api_key or not self.client.api_key.strip():
            logger.error(
                "OpenWeather API key not configured. "
                "Set OPENWEATHER_API_KEY environment variable."
            )
            return report.CONFIG_ERROR

        if not city or not city.strip():
            logger.warning("Rejected tool call with empty city name")
            return report.EMPTY_CITY_ERROR

        return None

    async def get_current_weather(self, city: str) -> str:
        """Get current conditions for a city.

        Args:
            city: City name

        Returns:
            One-line report or a user-facing error message
        """
        rejection = self._precondition_error(city)
        if rejection:
            return rejection
        city = city.strip()

        try:
            payload = await self.client.fetch_current(city)
            sample = to_condition_sample(payload)
            if sample is None:
                logger.info(f"No current weather data for {city}")
                return report.no_data(report.CURRENT_SUBJECT, city)

            return report.render_current(payload.name or city, sample)

        except TransportError as e:
            logger.error(f"get_current_weather failed for city={city!r}: {e}")
            return report.transport_error(report.CURRENT_SUBJECT, city)
        except Exception:
            logger.exception(f"Unexpected error in get_current_weather for city={city!r}")
            return report.unexpected_error(report.CURRENT_SUBJECT, city)

    async def get_weather_forecast(self, city: str, days: int = DEFAULT_FORECAST_DAYS) -> str:
        """Get a multi-day forecast for a city.

        Args:
            city: City name
            days: Number of days, 1 to 5

        Returns:
            Per-day report or a user-facing error message
        """
        rejection = self._precondition_error(city)
        if rejection:
            return rejection
        if not MIN_FORECAST_DAYS <= days <= MAX_FORECAST_DAYS:
            logger.warning(f"Rejected forecast request with days={days}")
            return report.DAYS_RANGE_ERROR
        city = city.strip()

        try:
            payload = await self.client.fetch_forecast(city)
            samples = to_forecast_samples(payload)
            if not samples:
                logger.info(f"No forecast data for {city}")
                return report.no_data(report.FORECAST_SUBJECT, city)

            buckets = bucket_by_day(samples, days, self.today())
            if not buckets:
                logger.info(f"Forecast for {city} has no samples in the next {days} day(s)")
                return report.empty_forecast_window(city, days)

            resolved_city = (payload.city.name if payload.city else None) or city
            return report.render_forecast(resolved_city, buckets)

        except TransportError as e:
            logger.error(f"get_weather_forecast failed for city={city!r}: {e}")
            return report.transport_error(report.FORECAST_SUBJECT, city)
        except Exception:
            logger.exception(f"Unexpected error in get_weather_forecast for city={city!r}")
            return report.unexpected_error(report.FORECAST_SUBJECT, city)

    async def get_weather_alerts(self, city: str) -> str:
        """Get active weather alerts for a city.

        Resolves the city to coordinates first, then looks up alerts there.

        Args:
            city: City name

        Returns:
            Alert report, a no-alerts sentence, or a user-facing error message
        """
        rejection = self._precondition_error(city)
        if rejection:
            return rejection
        city = city.strip()

        try:
            location = await self._resolve_location(city)
            if location is None:
                logger.info(f"Geocoding returned no match for {city}")
                return report.location_not_found(city)

            payload = await self.client.fetch_alerts(location.latitude, location.longitude)
            return report.render_alerts(city, to_alert_records(payload))

        except AuthError as e:
            logger.error(f"Unauthorized access to weather alerts API for city={city!r}: {e}")
            return report.ALERTS_REQUIRE_UPGRADE
        except TransportError as e:
            logger.error(f"get_weather_alerts failed for city={city!r}: {e}")
            return report.transport_error(report.ALERTS_SUBJECT, city)
        except Exception:
            logger.exception(f"Unexpected error in get_weather_alerts for city={city!r}")
            return report.unexpected_error(report.ALERTS_SUBJECT, city)

    async def _resolve_location(self, city: str) -> Optional[Location]:
        matches = await self.client.geocode(city)
        if not matches:
            return None
        location = to_location(matches[0])
        logger.info(
            f"Resolved {city!r} to ({location.latitude}, {location.longitude})"
        )
        return location

    async def aclose(self):
        """Close the provider client."""
        if self.client:
            try:
                await self.client.aclose()
            except Exception as e:
                logger.error(f"Error closing weather client: {e}")

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
