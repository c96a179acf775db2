"""Mapping from OpenWeather payloads to domain records."""

from datetime import datetime, timezone
from typing import List, Optional

from weather_tools.weather.models import (
    AlertRecord, ConditionSample, CurrentWeatherResponse, ForecastResponse,
    ForecastSample, GeocodeEntry, Location, MainMetrics, OneCallResponse,
    WeatherCondition
)


def from_unix(seconds: Optional[int]) -> Optional[datetime]:
    """Convert provider unix seconds to an aware UTC datetime."""
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def to_location(entry: GeocodeEntry) -> Location:
    return Location(name=entry.name, latitude=entry.lat, longitude=entry.lon)


def _condition(main: MainMetrics, weather: List[WeatherCondition]) -> ConditionSample:
    return ConditionSample(
        description=weather[0].description if weather else None,
        temperature_c=main.temp,
        feels_like_c=main.feels_like,
        humidity=main.humidity,
        pressure_hpa=main.pressure
    )


def to_condition_sample(payload: CurrentWeatherResponse) -> Optional[ConditionSample]:
    """Build the current observation.

    Returns:
        ConditionSample, or None when the payload carries no condition entry
        or no main-metrics block
    """
    if not payload.weather or payload.main is None:
        return None
    return _condition(payload.main, payload.weather)


def to_forecast_samples(payload: ForecastResponse) -> List[ForecastSample]:
    """Build forecast samples in provider order.

    Entries without a main-metrics block have nothing to report and are skipped.
    """
    return [
        ForecastSample(
            timestamp=from_unix(entry.dt),
            condition=_condition(entry.main, entry.weather)
        )
        for entry in payload.entries
        if entry.main is not None
    ]


def to_alert_records(payload: OneCallResponse) -> List[AlertRecord]:
    """Build alert records; an absent alerts field means no active alerts."""
    return [
        AlertRecord(
            sender_name=alert.sender_name,
            event=alert.event,
            start=from_unix(alert.start),
            end=from_unix(alert.end),
            description=alert.description
        )
        for alert in payload.alerts or []
    ]
