"""Data models for the weather tool server.

Provider payloads are modelled as one closed record per OpenWeather response
shape. Domain records are what the normalizer produces and the renderer
consumes; they live only for the duration of one tool call.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# Provider payloads

class WeatherCondition(BaseModel):
    """Entry of the provider's ``weather`` array."""
    main: Optional[str] = Field(None, description="Condition group, e.g. 'Clouds'")
    description: Optional[str] = Field(None, description="Human readable condition")


class MainMetrics(BaseModel):
    """The provider's ``main`` block (metric units)."""
    temp: float = Field(..., description="Temperature in Celsius")
    feels_like: float = Field(..., description="Perceived temperature in Celsius")
    humidity: int = Field(..., ge=0, le=100, description="Relative humidity in percent")
    pressure: float = Field(..., description="Atmospheric pressure in hPa")


class CurrentWeatherResponse(BaseModel):
    """Raw response from the current-weather-by-name endpoint."""
    name: Optional[str] = Field(None, description="Resolved city name")
    weather: List[WeatherCondition] = Field(default_factory=list)
    main: Optional[MainMetrics] = None


class ForecastEntry(BaseModel):
    """One 3-hour point of the forecast-by-name response."""
    dt: int = Field(..., description="Unix timestamp in seconds (UTC)")
    main: Optional[MainMetrics] = None
    weather: List[WeatherCondition] = Field(default_factory=list)


class CityInfo(BaseModel):
    """City block of the forecast response."""
    name: Optional[str] = None


class ForecastResponse(BaseModel):
    """Raw response from the forecast-by-name endpoint."""
    entries: List[ForecastEntry] = Field(default_factory=list, alias="list")
    city: Optional[CityInfo] = None


class GeocodeEntry(BaseModel):
    """One match from the direct geocoding endpoint."""
    name: Optional[str] = None
    lat: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    lon: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class AlertEntry(BaseModel):
    """One alert from the One Call endpoint."""
    sender_name: Optional[str] = None
    event: Optional[str] = None
    start: Optional[int] = Field(None, description="Unix timestamp in seconds (UTC)")
    end: Optional[int] = Field(None, description="Unix timestamp in seconds (UTC)")
    description: Optional[str] = None


class OneCallResponse(BaseModel):
    """Raw response from the alerts-by-coordinate endpoint."""
    alerts: Optional[List[AlertEntry]] = None


# Domain records

class Location(BaseModel):
    """A resolved place."""
    name: Optional[str] = Field(None, description="Place name if known")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")


class ConditionSample(BaseModel):
    """One instantaneous observation."""
    description: Optional[str] = Field(None, description="Condition description")
    temperature_c: float = Field(..., description="Temperature in Celsius")
    feels_like_c: float = Field(..., description="Perceived temperature in Celsius")
    humidity: int = Field(..., ge=0, le=100, description="Relative humidity in percent")
    pressure_hpa: float = Field(..., description="Atmospheric pressure in hPa")


class ForecastSample(BaseModel):
    """One forecast point."""
    timestamp: datetime = Field(..., description="UTC instant")
    condition: ConditionSample


class DailyBucket(BaseModel):
    """Forecast samples sharing one UTC calendar date, in chronological order."""
    day: date
    samples: List[ForecastSample] = Field(default_factory=list)


class AlertRecord(BaseModel):
    """One active warning."""
    sender_name: Optional[str] = None
    event: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    description: Optional[str] = None
