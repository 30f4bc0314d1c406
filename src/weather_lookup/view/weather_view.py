"""
Toolkit-independent UI state and the single fetch action.

``WeatherView`` holds everything a window shows (input fields, current
conditions, forecast strip, history, background colour) and mutates it only
from ``fetch()``. A toolkit binding copies inputs in before calling
``fetch()`` and copies the state out afterwards; see ``tk_app.py``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from weather_lookup.datasources.openweather.localtime import Clock, derive_local_time, system_now
from weather_lookup.errors import NetworkError, ParseError, ProviderError, ValidationError
from weather_lookup.renderers.display import (
    DAY_COLOR,
    NO_FORECAST_MESSAGE,
    ForecastRow,
    background_color,
    conditions_text,
    forecast_error_text,
    forecast_rows,
    humidity_text,
    temperature_text,
    wind_text,
)
from weather_lookup.schemas import HistoryEntry, Unit, WeatherQuery
from weather_lookup.view.history import DEFAULT_CAPACITY, SearchHistory

if TYPE_CHECKING:
    from weather_lookup.datasources.openweather.client import WeatherClient
    from weather_lookup.schemas import CurrentConditions, ForecastSeries

logger = logging.getLogger(__name__)

INPUT_REQUIRED_TITLE = "Input Required"
INPUT_REQUIRED_MESSAGE = 'Please enter a city name or coordinates (e.g., "Montreal" or "43.65,-79.38").'
FETCH_ERROR_TITLE = "Fetch Error"
FETCH_ERROR_MESSAGE = "Unable to retrieve weather data.\nCheck your network/API key and try again."

#: Unit choices as labelled in the window
UNIT_CHOICES: dict[str, Unit] = {"Celsius": Unit.METRIC, "Fahrenheit": Unit.IMPERIAL}

DEFAULT_FORECAST_SLOTS = 3


class Notifier(Protocol):
    """Where user-facing notifications go (dialog, stderr, test recorder)."""

    def warn(self, title: str, message: str) -> None: ...

    def error(self, title: str, message: str) -> None: ...


@dataclass
class CurrentDisplay:
    """Current-conditions fields as shown."""

    temperature_text: str
    humidity_text: str
    wind_text: str
    conditions_text: str
    icon_bytes: bytes | None = None


@dataclass
class ForecastDisplay:
    """Forecast strip: rows with icons, or a single message line."""

    rows: list[ForecastRow] = field(default_factory=list)
    icons: list[bytes | None] = field(default_factory=list)
    message: str | None = None


class WeatherView:
    """UI state for one window plus its fetch action."""

    def __init__(
        self,
        client: WeatherClient,
        notifier: Notifier,
        *,
        history_size: int = DEFAULT_CAPACITY,
        forecast_slots: int = DEFAULT_FORECAST_SLOTS,
        now: Clock = system_now,
    ) -> None:
        self.client = client
        self.notifier = notifier
        self.forecast_slots = forecast_slots
        self._now = now

        # Inputs
        self.location_text = ""
        self.unit = Unit.METRIC

        # Rendered state
        self.current: CurrentDisplay | None = None
        self.forecast = ForecastDisplay()
        self.history = SearchHistory(history_size)
        self.local_time_text: str | None = None
        self.background = DAY_COLOR

    def build_query(self) -> WeatherQuery:
        """Query from the current inputs.

        Raises:
            ValidationError: Location is empty after trimming.
        """
        location = self.location_text.strip()
        if not location:
            raise ValidationError("location is required")
        return WeatherQuery(location_text=location, unit=self.unit)

    def fetch(self) -> bool:
        """
        Run one lookup and update the displayed state.

        Returns True when the display was updated. On any failure a
        notification is shown and the previous state is kept.
        """
        try:
            query = self.build_query()
        except ValidationError:
            self.notifier.warn(INPUT_REQUIRED_TITLE, INPUT_REQUIRED_MESSAGE)
            return False

        try:
            current = self.client.fetch_current(query)
            if not current.ok:
                raise ProviderError(current.status_code, current.error_message or "")
            current_display = self._render_current(current, query.unit)
            forecast = self.client.fetch_forecast(query, max_slots=self.forecast_slots)
        except (ProviderError, NetworkError, ParseError) as exc:
            logger.warning("Lookup for %r failed: %s", query.location_text, exc)
            self.notifier.error(FETCH_ERROR_TITLE, FETCH_ERROR_MESSAGE)
            return False

        self.current = current_display
        self.forecast = self._render_forecast(forecast, query.unit)

        local_time = derive_local_time(current, now=self._now)
        self.local_time_text = local_time
        self.history.add(HistoryEntry(query_text=query.location_text, local_time_label=local_time))
        self.background = background_color(local_time)
        logger.info("Showing weather for %r at %s", query.location_text, local_time)
        return True

    def _render_current(self, current: CurrentConditions, unit: Unit) -> CurrentDisplay:
        if (
            current.temperature is None
            or current.humidity_percent is None
            or current.wind_speed is None
            or current.condition_description is None
        ):
            raise ParseError("current conditions are incomplete")

        return CurrentDisplay(
            temperature_text=temperature_text(current.temperature, unit),
            humidity_text=humidity_text(current.humidity_percent),
            wind_text=wind_text(current.wind_speed, unit),
            conditions_text=conditions_text(current.condition_description),
            icon_bytes=self.client.fetch_icon(current.icon_code),
        )

    def _render_forecast(self, forecast: ForecastSeries, unit: Unit) -> ForecastDisplay:
        # Provider errors here stay inline in the forecast area
        if not forecast.ok:
            return ForecastDisplay(message=forecast_error_text(forecast.error_message or ""))

        rows = forecast_rows(forecast.slots, unit, limit=self.forecast_slots)
        if not rows:
            return ForecastDisplay(message=NO_FORECAST_MESSAGE)
        return ForecastDisplay(
            rows=rows,
            icons=[self.client.fetch_icon(row.icon_code) for row in rows],
        )
