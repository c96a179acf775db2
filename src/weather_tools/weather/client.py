"""HTTP client for the OpenWeather API."""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from weather_tools.config import (
    OPENWEATHER_API_KEY, OPENWEATHER_BASE_URL, HTTP_TIMEOUT_SECONDS, USER_AGENT
)
from weather_tools.weather.models import (
    CurrentWeatherResponse, ForecastResponse, GeocodeEntry, OneCallResponse
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

CURRENT_WEATHER_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"
GEOCODE_PATH = "/geo/1.0/direct"
ONE_CALL_PATH = "/data/3.0/onecall"

_geocode_adapter = TypeAdapter(List[GeocodeEntry])


class TransportError(Exception):
    """Raised when a provider request fails at the network or payload level."""
    pass


class AuthError(TransportError):
    """Raised when the provider rejects the credential (HTTP 401)."""
    pass


class OpenWeatherClient:
    """Async client for fetching weather data from the OpenWeather API.

    One instance holds one ``httpx.AsyncClient`` whose connection pool is
    shared by every concurrent call made through it.
    """

    def __init__(
        self,
        api_key: Optional[str] = OPENWEATHER_API_KEY,
        base_url: str = OPENWEATHER_BASE_URL,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """Initialize the weather client.

        Args:
            api_key: OpenWeather API key (``appid``)
            base_url: Root URL of the OpenWeather API
            timeout: Transport timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
            transport=transport
        )

    async def fetch_current(self, city: str) -> CurrentWeatherResponse:
        """Fetch current weather for a city name.

        Raises:
            AuthError: If the provider answers 401
            TransportError: On any other network or payload failure
        """
        data = await self._get_json(
            CURRENT_WEATHER_PATH,
            {"q": city, "appid": self.api_key, "units": "metric"}
        )
        return self._validate(CurrentWeatherResponse, data)

    async def fetch_forecast(self, city: str) -> ForecastResponse:
        """Fetch the 5 day / 3 hour forecast for a city name.

        Raises:
            AuthError: If the provider answers 401
            TransportError: On any other network or payload failure
        """
        data = await self._get_json(
            FORECAST_PATH,
            {"q": city, "appid": self.api_key, "units": "metric"}
        )
        forecast = self._validate(ForecastResponse, data)
        logger.info(f"Fetched forecast with {len(forecast.entries)} entries")
        return forecast

    async def geocode(self, city: str) -> List[GeocodeEntry]:
        """Resolve a city name to at most one coordinate match.

        Returns:
            List of matches, empty when the name is unknown

        Raises:
            AuthError: If the provider answers 401
            TransportError: On any other network or payload failure
        """
        data = await self._get_json(
            GEOCODE_PATH,
            {"q": city, "limit": 1, "appid": self.api_key}
        )
        try:
            return _geocode_adapter.validate_python(data)
        except ValidationError as e:
            raise TransportError(f"Invalid geocoding response: {e}") from e

    async def fetch_alerts(self, lat: float, lon: float) -> OneCallResponse:
        """Fetch active alerts for coordinates.

        Raises:
            AuthError: If the provider answers 401 (One Call needs a paid plan)
            TransportError: On any other network or payload failure
        """
        data = await self._get_json(
            ONE_CALL_PATH,
            {
                "lat": lat,
                "lon": lon,
                "appid": self.api_key,
                "exclude": "minutely,hourly,daily",
            }
        )
        return self._validate(OneCallResponse, data)

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        """Issue a single GET and decode the JSON body. No retries."""
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")

        try:
            response = await self.client.get(url, params=params)
        except httpx.RequestError as e:
            raise TransportError(f"Request error to {path}: {e!r}") from e

        if response.status_code == 401:
            raise AuthError(f"Unauthorized response from {path}")

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP error from {path}: {response.status_code}"
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"Malformed JSON body from {path}") from e

    @staticmethod
    def _validate(model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise TransportError(f"Invalid {model.__name__} payload: {e}") from e

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
