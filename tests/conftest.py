"""Shared fixtures: canned OpenWeather payloads and a recording mock transport."""

from datetime import date, datetime, timezone
from typing import Callable, Dict, List

import httpx
import pytest

from weather_tools.weather.client import OpenWeatherClient
from weather_tools.weather.models import ConditionSample, ForecastSample
from weather_tools.weather.service import WeatherToolService

API_KEY = "test-key"
BASE_URL = "https://api.test"
REFERENCE_DATE = date(2024, 1, 1)
# 2024-01-01T00:00:00Z
DAY_START = 1704067200
HOUR = 3600

CURRENT_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"
GEOCODE_PATH = "/geo/1.0/direct"
ONE_CALL_PATH = "/data/3.0/onecall"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport:
    """Routes requests by URL path and remembers every request it served."""

    def __init__(self, routes: Dict[str, Handler]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get(request.url.path)
        if handler is None:
            return httpx.Response(404, json={"cod": "404", "message": "not found"})
        return handler(request)

    @property
    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]


def json_response(payload, status_code: int = 200) -> Handler:
    return lambda request: httpx.Response(status_code, json=payload)


def status_response(status_code: int) -> Handler:
    return lambda request: httpx.Response(status_code, json={"cod": status_code})


def connection_refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


def make_sample(dt: int, description: str = "clear sky", temp: float = 10.0) -> ForecastSample:
    return ForecastSample(
        timestamp=datetime.fromtimestamp(dt, tz=timezone.utc),
        condition=ConditionSample(
            description=description,
            temperature_c=temp,
            feels_like_c=temp - 1,
            humidity=70,
            pressure_hpa=1010
        )
    )


def forecast_entry(dt: int, description: str = "light rain", temp: float = 7.5) -> dict:
    return {
        "dt": dt,
        "main": {"temp": temp, "feels_like": temp - 2, "humidity": 81, "pressure": 1008},
        "weather": [{"main": "Rain", "description": description}],
    }


@pytest.fixture
def current_payload() -> dict:
    return {
        "name": "London",
        "weather": [{"main": "Clear", "description": "clear sky"}],
        "main": {"temp": 18.3, "feels_like": 17.9, "humidity": 60, "pressure": 1012},
    }


@pytest.fixture
def forecast_payload() -> dict:
    """Ten samples, six hours apart, spanning 2024-01-01 to 2024-01-03 (UTC)."""
    start = DAY_START + 12 * HOUR
    return {
        "list": [forecast_entry(start + i * 6 * HOUR, temp=5.0 + i) for i in range(10)],
        "city": {"name": "London"},
    }


@pytest.fixture
def geocode_payload() -> list:
    return [{"name": "Miami", "lat": 25.7743, "lon": -80.1937, "country": "US"}]


@pytest.fixture
def alerts_payload() -> dict:
    return {
        "lat": 25.7743,
        "lon": -80.1937,
        "alerts": [
            {
                "sender_name": "NWS Miami",
                "event": "Heat Advisory",
                "start": DAY_START + 10 * HOUR,
                "end": DAY_START + 20 * HOUR,
                "description": "Heat index values up to 108 expected.",
                "tags": ["Extreme temperature value"],
            }
        ],
    }


@pytest.fixture
def make_service():
    """Factory building a service whose provider traffic goes to a RecordingTransport."""

    def factory(routes: Dict[str, Handler], api_key=API_KEY):
        recorder = RecordingTransport(routes)
        client = OpenWeatherClient(
            api_key=api_key,
            base_url=BASE_URL,
            transport=httpx.MockTransport(recorder)
        )
        service = WeatherToolService(client=client, today=lambda: REFERENCE_DATE)
        return service, recorder

    return factory


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE
