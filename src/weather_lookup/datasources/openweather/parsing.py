"""Normalize OpenWeatherMap JSON payloads to domain models."""

from __future__ import annotations

from typing import Any

from weather_lookup.errors import ParseError
from weather_lookup.schemas import SUCCESS_CODE, CurrentConditions, ForecastSeries, ForecastSlot

DEFAULT_CURRENT_ERROR = "Unknown error"
DEFAULT_FORECAST_ERROR = "Unable to fetch forecast"


def _status_code(payload: dict[str, Any]) -> int:
    # ``cod`` is an int on /weather but a string ("200") on /forecast
    try:
        return int(payload.get("cod", 0))
    except (TypeError, ValueError):
        return 0


def _error_message(payload: dict[str, Any], default: str) -> str:
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    return default


def _get(obj: Any, key: str | int, path: str) -> Any:
    try:
        return obj[key]
    except (KeyError, IndexError, TypeError) as exc:
        raise ParseError(f"missing field {path}") from exc


def _float(value: Any, path: str) -> float:
    if isinstance(value, bool):
        raise ParseError(f"invalid number for {path}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"invalid number for {path}") from exc


def _int(value: Any, path: str) -> int:
    if isinstance(value, bool):
        raise ParseError(f"invalid integer for {path}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"invalid integer for {path}") from exc


def _str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise ParseError(f"invalid string for {path}")
    return value


def _optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _first_weather(obj: dict[str, Any], path: str) -> tuple[str, str]:
    prefix = f"{path}weather[0]"
    weather = _get(_get(obj, "weather", f"{path}weather"), 0, prefix)
    description = _str(_get(weather, "description", f"{prefix}.description"), f"{prefix}.description")
    icon = _str(_get(weather, "icon", f"{prefix}.icon"), f"{prefix}.icon")
    return description, icon


def parse_current(payload: dict[str, Any]) -> CurrentConditions:
    """
    Parse a ``/weather`` response body.

    A non-200 ``cod`` yields a CurrentConditions carrying only the provider
    message. ``dt`` and ``timezone`` are read leniently: when missing or
    malformed they stay None and local-time derivation falls back to the
    system clock.

    Raises:
        ParseError: ``cod`` is 200 but a display field is missing or mistyped.
    """
    code = _status_code(payload)
    if code != SUCCESS_CODE:
        return CurrentConditions(status_code=code, error_message=_error_message(payload, DEFAULT_CURRENT_ERROR))

    main = _get(payload, "main", "main")
    wind = _get(payload, "wind", "wind")
    description, icon = _first_weather(payload, "")

    return CurrentConditions(
        status_code=code,
        temperature=_float(_get(main, "temp", "main.temp"), "main.temp"),
        humidity_percent=_int(_get(main, "humidity", "main.humidity"), "main.humidity"),
        wind_speed=_float(_get(wind, "speed", "wind.speed"), "wind.speed"),
        condition_description=description,
        icon_code=icon,
        epoch_utc=_optional_int(payload.get("dt")),
        timezone_offset_seconds=_optional_int(payload.get("timezone")),
    )


def parse_forecast_slot(slot: Any, index: int = 0) -> ForecastSlot:
    """Parse one entry of the forecast ``list``."""
    path = f"list[{index}]."
    description, icon = _first_weather(slot, path)
    main = _get(slot, "main", f"{path}main")
    timestamp = _str(_get(slot, "dt_txt", f"{path}dt_txt"), f"{path}dt_txt")
    # hour label is sliced from "yyyy-MM-dd HH:mm"
    if len(timestamp) < 16:
        raise ParseError(f"invalid timestamp for {path}dt_txt: {timestamp!r}")
    return ForecastSlot(
        local_timestamp_text=timestamp,
        temperature=_float(_get(main, "temp", f"{path}main.temp"), f"{path}main.temp"),
        condition_description=description,
        icon_code=icon,
    )


def parse_forecast(payload: dict[str, Any], *, max_slots: int | None = None) -> ForecastSeries:
    """
    Parse a ``/forecast`` response body.

    Args:
        payload: Decoded JSON object.
        max_slots: Parse only the first ``max_slots`` entries; later entries
            are ignored even if malformed.

    Raises:
        ParseError: ``cod`` is 200 but ``list`` or a parsed slot is malformed.
    """
    code = _status_code(payload)
    if code != SUCCESS_CODE:
        return ForecastSeries(status_code=code, error_message=_error_message(payload, DEFAULT_FORECAST_ERROR))

    entries = _get(payload, "list", "list")
    if not isinstance(entries, list):
        raise ParseError("invalid list for list")
    if max_slots is not None:
        entries = entries[:max_slots]

    return ForecastSeries(
        status_code=code,
        slots=[parse_forecast_slot(entry, i) for i, entry in enumerate(entries)],
    )
