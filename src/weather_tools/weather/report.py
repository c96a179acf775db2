"""Plain-text reports and user-facing messages returned by the tools."""

from datetime import datetime
from typing import Optional, Sequence

from weather_tools.config import MAX_FORECAST_DAYS, MIN_FORECAST_DAYS
from weather_tools.weather.models import AlertRecord, ConditionSample, DailyBucket

PLACEHOLDER = "n/a"
UNKNOWN_TIME = "unknown"

CONFIG_ERROR = (
    "Error: Weather API key not configured. "
    "Please set the OPENWEATHER_API_KEY environment variable."
)
EMPTY_CITY_ERROR = "Error: City name must not be empty."
DAYS_RANGE_ERROR = (
    f"Error: Days parameter must be between {MIN_FORECAST_DAYS} and {MAX_FORECAST_DAYS}."
)
ALERTS_REQUIRE_UPGRADE = (
    "Error: Weather alerts require a premium API key. "
    "Current alerts feature is not available."
)

# Subjects used in per-operation messages
CURRENT_SUBJECT = "weather data"
FORECAST_SUBJECT = "forecast data"
ALERTS_SUBJECT = "weather alerts"


def _text(value: Optional[str]) -> str:
    return value if value else PLACEHOLDER


def _utc(moment: Optional[datetime]) -> str:
    if moment is None:
        return UNKNOWN_TIME
    return f"{moment:%Y-%m-%d %H:%M} UTC"


def transport_error(subject: str, city: str) -> str:
    return (
        f"Error: Unable to fetch {subject} for {city}. "
        "Please check the city name and try again."
    )


def unexpected_error(subject: str, city: str) -> str:
    return f"Error: An unexpected error occurred while fetching {subject} for {city}."


def no_data(subject: str, city: str) -> str:
    return f"Unable to get {subject} for {city}"


def empty_forecast_window(city: str, days: int) -> str:
    return f"No forecast data available for {city} in the next {days} day(s)."


def location_not_found(city: str) -> str:
    return f"Error: Could not find location coordinates for {city}."


def render_current(city: str, sample: ConditionSample) -> str:
    return (
        f"Current weather in {city}: {_text(sample.description)} "
        f"(Temperature: {sample.temperature_c:.1f}°C, "
        f"Feels like: {sample.feels_like_c:.1f}°C, "
        f"Humidity: {sample.humidity}%, "
        f"Pressure: {sample.pressure_hpa:.0f} hPa)"
    )


def render_forecast(city: str, buckets: Sequence[DailyBucket]) -> str:
    """Render one block per day, separated by a blank line.

    Day headings use the weekday and month names, sample times are UTC.
    """
    blocks = []
    for bucket in buckets:
        lines = [f"{bucket.day:%A, %B %d}:"]
        for sample in bucket.samples:
            condition = sample.condition
            lines.append(
                f"  {sample.timestamp:%H:%M}: {_text(condition.description)}, "
                f"{condition.temperature_c:.1f}°C "
                f"(feels like {condition.feels_like_c:.1f}°C)"
            )
        blocks.append("\n".join(lines))

    return f"Weather forecast for {city}:\n\n" + "\n\n".join(blocks)


def render_alerts(city: str, alerts: Sequence[AlertRecord]) -> str:
    if not alerts:
        return f"No weather alerts currently active for {city}."

    blocks = [
        "\n".join([
            f"🚨 {_text(alert.event)}",
            f"   From: {_utc(alert.start)}",
            f"   To: {_utc(alert.end)}",
            f"   Source: {_text(alert.sender_name)}",
            f"   Description: {_text(alert.description)}",
        ])
        for alert in alerts
    ]
    return f"Weather alerts for {city}:\n\n" + "\n\n".join(blocks)
