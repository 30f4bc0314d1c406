"""
Tests for WeatherView, the UI state and fetch action.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from unittest.mock import Mock

from weather_lookup.datasources.openweather.client import WeatherClient
from weather_lookup.datasources.openweather.parsing import parse_current, parse_forecast
from weather_lookup.errors import NetworkError, ParseError
from weather_lookup.renderers import DAY_COLOR, NIGHT_COLOR
from weather_lookup.renderers.display import NO_FORECAST_MESSAGE
from weather_lookup.schemas import Unit
from weather_lookup.view.weather_view import (
    FETCH_ERROR_MESSAGE,
    FETCH_ERROR_TITLE,
    INPUT_REQUIRED_TITLE,
    UNIT_CHOICES,
    WeatherView,
)

CURRENT_OK: dict[str, Any] = {
    "cod": 200,
    "main": {"temp": 21.5, "humidity": 60},
    "wind": {"speed": 10.0},
    "weather": [{"description": "clear sky", "icon": "01d"}],
    "dt": 1700000000,
    "timezone": 0,
}

FORECAST_OK: dict[str, Any] = {
    "cod": "200",
    "list": [
        {
            "dt_txt": f"2023-11-15 {h:02d}:00:00",
            "main": {"temp": 15.0 + h},
            "weather": [{"description": "scattered clouds", "icon": "03n"}],
        }
        for h in (0, 3, 6, 9)
    ],
}


class RecordingNotifier:
    """Collects notifications instead of showing dialogs."""

    def __init__(self) -> None:
        self.warnings: list[tuple[str, str]] = []
        self.errors: list[tuple[str, str]] = []

    def warn(self, title: str, message: str) -> None:
        self.warnings.append((title, message))

    def error(self, title: str, message: str) -> None:
        self.errors.append((title, message))


def _client(
    current: dict[str, Any] | None = None,
    forecast: dict[str, Any] | None = None,
) -> Mock:
    client = Mock(spec=WeatherClient)
    client.fetch_current.return_value = parse_current(current or CURRENT_OK)
    client.fetch_forecast.side_effect = lambda query, max_slots=None: parse_forecast(
        forecast or FORECAST_OK, max_slots=max_slots
    )
    client.fetch_icon.return_value = b"png"
    return client


def _view(client: Mock) -> tuple[WeatherView, RecordingNotifier]:
    notifier = RecordingNotifier()
    view = WeatherView(client, notifier, now=lambda: datetime(2026, 3, 1, 14, 0))
    return view, notifier


class TestValidation:
    """Test empty-input handling."""

    def test_empty_location_warns_without_network(self) -> None:
        client = _client()
        view, notifier = _view(client)
        view.location_text = "   "

        assert view.fetch() is False

        assert notifier.warnings[0][0] == INPUT_REQUIRED_TITLE
        assert notifier.errors == []
        client.fetch_current.assert_not_called()
        client.fetch_forecast.assert_not_called()

    def test_location_is_trimmed(self) -> None:
        client = _client()
        view, _ = _view(client)
        view.location_text = "  Paris "

        view.fetch()

        query = client.fetch_current.call_args.args[0]
        assert query.location_text == "Paris"


class TestSuccessfulFetch:
    """Test state after a successful lookup."""

    def test_current_fields(self) -> None:
        view, notifier = _view(_client())
        view.location_text = "Los Angeles"

        assert view.fetch() is True

        assert view.current is not None
        assert view.current.temperature_text == "21.5 °C"
        assert view.current.humidity_text == "60%"
        assert view.current.wind_text == "10.0 m/s"
        assert view.current.conditions_text == "Clear Sky"
        assert view.current.icon_bytes == b"png"
        assert notifier.warnings == []
        assert notifier.errors == []

    def test_imperial_units(self) -> None:
        client = _client()
        view, _ = _view(client)
        view.location_text = "Boston"
        view.unit = UNIT_CHOICES["Fahrenheit"]

        view.fetch()

        assert view.unit is Unit.IMPERIAL
        assert client.fetch_current.call_args.args[0].unit is Unit.IMPERIAL
        assert view.current is not None
        assert view.current.temperature_text == "21.5 °F"
        assert view.current.wind_text == "10.0 mph"

    def test_forecast_limited_to_three(self) -> None:
        client = _client()
        view, _ = _view(client)
        view.location_text = "Paris"

        view.fetch()

        assert client.fetch_forecast.call_args.kwargs["max_slots"] == 3
        assert [r.hour_label for r in view.forecast.rows] == ["00:00", "03:00", "06:00"]
        assert view.forecast.rows[0].summary == "Scattered Clouds, 15.0°C"
        assert view.forecast.icons == [b"png", b"png", b"png"]
        assert view.forecast.message is None

    def test_local_time_history_and_background(self) -> None:
        view, _ = _view(_client())
        view.location_text = "Paris"

        view.fetch()

        # 1700000000 + 0 -> 22:13 UTC, a night hour
        assert view.local_time_text == "2023-11-14 22:13"
        assert view.history.labels() == ["Paris  |  2023-11-14 22:13"]
        assert view.background == NIGHT_COLOR

    def test_missing_time_fields_use_clock(self) -> None:
        current = dict(CURRENT_OK)
        del current["dt"]
        view, _ = _view(_client(current=current))
        view.location_text = "Paris"

        view.fetch()

        assert view.local_time_text == "2026-03-01 14:00"
        assert view.background == DAY_COLOR

    def test_icon_failure_is_not_fatal(self) -> None:
        client = _client()
        client.fetch_icon.return_value = None
        view, notifier = _view(client)
        view.location_text = "Paris"

        assert view.fetch() is True
        assert view.current is not None
        assert view.current.icon_bytes is None
        assert notifier.errors == []

    def test_eleven_fetches_keep_ten_history_entries(self) -> None:
        view, _ = _view(_client())
        for i in range(11):
            view.location_text = f"City {i}"
            assert view.fetch()

        entries = view.history.entries
        assert len(entries) == 10
        assert entries[0].query_text == "City 10"
        assert "City 0" not in [e.query_text for e in entries]


class TestForecastOutcomes:
    """Test forecast-specific outcomes rendered inline."""

    def test_forecast_provider_error_inline(self) -> None:
        client = _client(forecast={"cod": "404", "message": "city not found"})
        view, notifier = _view(client)
        view.location_text = "Paris"

        assert view.fetch() is True

        assert view.forecast.rows == []
        assert view.forecast.message == "Forecast error: city not found"
        assert notifier.errors == []
        assert view.current is not None

    def test_empty_forecast(self) -> None:
        view, _ = _view(_client(forecast={"cod": "200", "list": []}))
        view.location_text = "Paris"

        view.fetch()

        assert view.forecast.message == NO_FORECAST_MESSAGE


class TestFailures:
    """Test that failures notify and leave displayed state untouched."""

    def _loaded_view(self, client: Mock) -> tuple[WeatherView, RecordingNotifier]:
        view, notifier = _view(client)
        view.location_text = "Paris"
        assert view.fetch()
        return view, notifier

    def test_provider_error_keeps_fields(self) -> None:
        client = _client()
        view, notifier = self._loaded_view(client)
        before = (view.current, view.forecast, view.history.entries, view.background)

        client.fetch_current.return_value = parse_current({"cod": 404, "message": "city not found"})
        view.location_text = "Atlantis"

        assert view.fetch() is False

        assert notifier.errors == [(FETCH_ERROR_TITLE, FETCH_ERROR_MESSAGE)]
        assert (view.current, view.forecast, view.history.entries, view.background) == before
        assert client.fetch_forecast.call_count == 1

    def test_provider_error_on_first_fetch(self) -> None:
        client = _client(current={"cod": 404, "message": "city not found"})
        view, notifier = _view(client)
        view.location_text = "Atlantis"

        assert view.fetch() is False

        assert view.current is None
        assert len(view.history) == 0
        assert len(notifier.errors) == 1
        # The provider's message is not shown to the user
        assert "city not found" not in notifier.errors[0][1]

    def test_network_error_on_current(self) -> None:
        client = _client()
        view, notifier = self._loaded_view(client)
        before = view.current

        client.fetch_current.side_effect = NetworkError("timed out")
        view.location_text = "Berlin"

        assert view.fetch() is False
        assert notifier.errors == [(FETCH_ERROR_TITLE, FETCH_ERROR_MESSAGE)]
        assert view.current is before
        assert len(view.history) == 1

    def test_network_error_on_forecast_keeps_current(self) -> None:
        client = _client()
        view, notifier = self._loaded_view(client)
        before = view.current

        client.fetch_current.return_value = parse_current({**CURRENT_OK, "main": {"temp": -4.0, "humidity": 90}})
        client.fetch_forecast.side_effect = NetworkError("reset")
        view.location_text = "Oslo"

        assert view.fetch() is False
        assert view.current is before
        assert len(view.history) == 1
        assert len(notifier.errors) == 1

    def test_parse_error(self) -> None:
        client = _client()
        client.fetch_current.side_effect = ParseError("not json")
        view, notifier = _view(client)
        view.location_text = "Paris"

        assert view.fetch() is False
        assert notifier.errors == [(FETCH_ERROR_TITLE, FETCH_ERROR_MESSAGE)]
        assert view.current is None
