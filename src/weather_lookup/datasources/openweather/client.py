"""OpenWeatherMap API client: URLs, request building, transport.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
  - Icons: https://openweathermap.org/weather-conditions
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from weather_lookup.datasources.openweather.parsing import parse_current, parse_forecast
from weather_lookup.errors import ConfigurationError, NetworkError, ParseError
from weather_lookup.services.http import DEFAULT_TIMEOUT
from weather_lookup.services.http import session as default_session

if TYPE_CHECKING:
    from weather_lookup.config import Settings
    from weather_lookup.schemas import CurrentConditions, ForecastSeries, WeatherQuery

logger = logging.getLogger(__name__)

OWM_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"
OWM_FORECAST_URL = "https://api.openweathermap.org/data/2.5/forecast"
OWM_ICON_URL = "https://openweathermap.org/img/wn/{code}@2x.png"


def encode_location(text: str) -> str:
    """Replace spaces with ``%20``; every other character is left as-is."""
    return text.replace(" ", "%20")


def build_url(base_url: str, query: WeatherQuery, api_key: str) -> str:
    """``BASE_URL?q=<location>&units=<unit>&appid=<key>``"""
    return f"{base_url}?q={encode_location(query.location_text)}&units={query.unit.value}&appid={api_key}"


class WeatherClient:
    """Fetches and normalizes current conditions and forecasts.

    Holds no per-request state; the API key and endpoints are fixed at
    construction.
    """

    def __init__(
        self,
        api_key: str,
        *,
        current_url: str = OWM_CURRENT_URL,
        forecast_url: str = OWM_FORECAST_URL,
        icon_url_template: str = OWM_ICON_URL,
        timeout: float | tuple[float, float] = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self.current_url = current_url
        self.forecast_url = forecast_url
        self.icon_url_template = icon_url_template
        self._timeout = timeout
        self._session = session or default_session

    @classmethod
    def from_settings(cls, settings: Settings, *, session: requests.Session | None = None) -> WeatherClient:
        """Build a client from configuration; the API key is mandatory."""
        api_key = settings.api_key.get_secret_value()
        if not api_key:
            raise ConfigurationError("WEATHER_API_KEY is not set")
        return cls(
            api_key,
            current_url=settings.current_url,
            forecast_url=settings.forecast_url,
            icon_url_template=settings.icon_url_template,
            timeout=settings.timeout,
            session=session,
        )

    def fetch_current(self, query: WeatherQuery) -> CurrentConditions:
        """
        Fetch current conditions for a location.

        Args:
            query: Location text and unit system.

        Returns:
            CurrentConditions; a non-200 provider code is returned, not raised.

        Raises:
            NetworkError: Connection or timeout failure.
            ParseError: Body is not JSON or lacks an expected field.
        """
        payload = self._get_json(build_url(self.current_url, query, self._api_key))
        return parse_current(payload)

    def fetch_forecast(self, query: WeatherQuery, *, max_slots: int | None = None) -> ForecastSeries:
        """
        Fetch the 3-hour forecast for a location.

        Args:
            query: Location text and unit system.
            max_slots: Parse only the first ``max_slots`` entries.

        Raises:
            NetworkError: Connection or timeout failure.
            ParseError: Body is not JSON or a parsed slot is malformed.
        """
        payload = self._get_json(build_url(self.forecast_url, query, self._api_key))
        return parse_forecast(payload, max_slots=max_slots)

    def icon_url(self, icon_code: str) -> str:
        return self.icon_url_template.format(code=icon_code)

    def fetch_icon(self, icon_code: str | None) -> bytes | None:
        """Download an icon image; any failure yields None."""
        if not icon_code:
            return None
        url = self.icon_url(icon_code)
        try:
            with self._session.get(url, timeout=self._timeout) as resp:
                resp.raise_for_status()
                return resp.content
        except requests.RequestException as exc:
            logger.warning("Icon %s unavailable: %s", icon_code, exc)
            return None

    def _get_json(self, url: str) -> dict[str, Any]:
        # The provider reports errors (404 city not found, 401 bad key) in the
        # JSON body, so the body is parsed whatever the HTTP status.
        logger.debug("GET %s", url.replace(self._api_key, "***") if self._api_key else url)
        try:
            with self._session.get(url, timeout=self._timeout) as resp:
                status = resp.status_code
                try:
                    payload = resp.json()
                except ValueError as exc:
                    raise ParseError(f"response body is not valid JSON (HTTP {status})") from exc
        except requests.RequestException as exc:
            raise NetworkError(f"request failed: {exc}") from exc

        if not isinstance(payload, dict):
            raise ParseError(f"expected a JSON object, got {type(payload).__name__}")
        logger.debug("HTTP %s, cod=%s", status, payload.get("cod"))
        return payload
