"""
Tests for normalizing OpenWeatherMap payloads.
"""

from __future__ import annotations

from typing import Any

import pytest

from weather_lookup.datasources.openweather.parsing import (
    DEFAULT_CURRENT_ERROR,
    DEFAULT_FORECAST_ERROR,
    parse_current,
    parse_forecast,
    parse_forecast_slot,
)
from weather_lookup.errors import ParseError


def _current(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "cod": 200,
        "main": {"temp": 21.5, "humidity": 60},
        "wind": {"speed": 10.0},
        "weather": [{"description": "clear sky", "icon": "01d"}],
        "dt": 1700000000,
        "timezone": 3600,
    }
    payload.update(overrides)
    return payload


def _slot(dt_txt: str = "2023-11-14 15:00:00", temp: float = 12.3) -> dict[str, Any]:
    return {
        "dt_txt": dt_txt,
        "main": {"temp": temp, "humidity": 80},
        "weather": [{"description": "light rain", "icon": "10d"}],
    }


class TestParseCurrent:
    """Test parsing of /weather bodies."""

    def test_all_fields(self) -> None:
        current = parse_current(_current())

        assert current.status_code == 200
        assert current.ok
        assert current.temperature == 21.5
        assert current.humidity_percent == 60
        assert current.wind_speed == 10.0
        assert current.condition_description == "clear sky"
        assert current.icon_code == "01d"
        assert current.epoch_utc == 1700000000
        assert current.timezone_offset_seconds == 3600
        assert current.error_message is None

    def test_integer_temperature_coerced(self) -> None:
        current = parse_current(_current(main={"temp": 21, "humidity": 60}))
        assert current.temperature == 21.0
        assert isinstance(current.temperature, float)

    def test_string_cod_accepted(self) -> None:
        assert parse_current(_current(cod="200")).ok

    def test_provider_error(self) -> None:
        current = parse_current({"cod": 404, "message": "city not found"})

        assert current.status_code == 404
        assert not current.ok
        assert current.error_message == "city not found"
        assert current.temperature is None
        assert current.humidity_percent is None
        assert current.icon_code is None

    def test_provider_error_without_message(self) -> None:
        current = parse_current({"cod": "500"})
        assert current.status_code == 500
        assert current.error_message == DEFAULT_CURRENT_ERROR

    def test_missing_cod_is_error(self) -> None:
        current = parse_current({"main": {"temp": 1}})
        assert current.status_code == 0
        assert not current.ok

    def test_garbage_cod_is_error(self) -> None:
        assert parse_current({"cod": "abc"}).status_code == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"main": {"humidity": 60}},
            {"main": {"temp": "warm", "humidity": 60}},
            {"wind": {}},
            {"weather": []},
            {"weather": [{"icon": "01d"}]},
            {"weather": [{"description": 5, "icon": "01d"}]},
            {"main": None},
        ],
    )
    def test_malformed_success_raises(self, overrides: dict[str, Any]) -> None:
        with pytest.raises(ParseError):
            parse_current(_current(**overrides))

    def test_missing_time_fields_are_lenient(self) -> None:
        payload = _current()
        del payload["dt"]
        payload["timezone"] = "not a number"

        current = parse_current(payload)

        assert current.ok
        assert current.epoch_utc is None
        assert current.timezone_offset_seconds is None


class TestParseForecast:
    """Test parsing of /forecast bodies."""

    def test_slots_in_order(self) -> None:
        payload = {
            "cod": "200",
            "list": [_slot("2023-11-14 15:00:00", 12.3), _slot("2023-11-14 18:00:00", 10.0)],
        }

        series = parse_forecast(payload)

        assert series.ok
        assert len(series.slots) == 2
        first = series.slots[0]
        assert first.local_timestamp_text == "2023-11-14 15:00:00"
        assert first.hour_label == "15:00"
        assert first.temperature == 12.3
        assert first.condition_description == "light rain"
        assert first.icon_code == "10d"
        assert series.slots[1].hour_label == "18:00"

    def test_max_slots_ignores_later_entries(self) -> None:
        payload = {"cod": "200", "list": [_slot(), _slot(), _slot(), {"broken": True}]}
        series = parse_forecast(payload, max_slots=3)
        assert len(series.slots) == 3

    def test_malformed_slot_raises(self) -> None:
        payload = {"cod": "200", "list": [_slot(), {"broken": True}]}
        with pytest.raises(ParseError, match=r"list\[1\]"):
            parse_forecast(payload)

    def test_empty_list(self) -> None:
        series = parse_forecast({"cod": "200", "list": []})
        assert series.ok
        assert series.slots == []

    def test_missing_list_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_forecast({"cod": "200"})

    def test_list_not_a_list_raises(self) -> None:
        with pytest.raises(ParseError):
            parse_forecast({"cod": "200", "list": {"a": 1}})

    def test_provider_error(self) -> None:
        series = parse_forecast({"cod": "404", "message": "city not found"})
        assert not series.ok
        assert series.status_code == 404
        assert series.error_message == "city not found"
        assert series.slots == []

    def test_provider_error_default_message(self) -> None:
        series = parse_forecast({"cod": 401})
        assert series.error_message == DEFAULT_FORECAST_ERROR


class TestParseForecastSlot:
    """Test single-slot parsing."""

    def test_missing_dt_txt(self) -> None:
        slot = _slot()
        del slot["dt_txt"]
        with pytest.raises(ParseError, match="dt_txt"):
            parse_forecast_slot(slot)

    @pytest.mark.parametrize("dt_txt", ["2023-11-14", "2023-11-14 15", ""])
    def test_short_dt_txt_raises(self, dt_txt: str) -> None:
        """Too short to carry an HH:mm hour label."""
        with pytest.raises(ParseError, match="dt_txt"):
            parse_forecast_slot(_slot(dt_txt=dt_txt))

    def test_minimal_dt_txt_accepted(self) -> None:
        assert parse_forecast_slot(_slot(dt_txt="2023-11-14 15:00")).hour_label == "15:00"

    def test_short_dt_txt_fails_whole_forecast(self) -> None:
        with pytest.raises(ParseError, match=r"list\[1\]\.dt_txt"):
            parse_forecast({"cod": "200", "list": [_slot(), _slot(dt_txt="15:00")]})
