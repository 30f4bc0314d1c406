"""Display formatting: parsed models -> strings the view shows.

All functions are pure; the view layer decides where the strings go.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from weather_lookup.datasources.openweather.localtime import parse_hour
from weather_lookup.renderers.text_utils import title_case

if TYPE_CHECKING:
    from weather_lookup.schemas import ForecastSlot, Unit

NO_FORECAST_MESSAGE = "No forecast entries available."

# Background colours keyed to time of day at the queried location
MORNING_COLOR = "#FFFACD"  # lemon chiffon
DAY_COLOR = "#ADD8E6"  # light blue
EVENING_COLOR = "#FF6347"  # tomato
NIGHT_COLOR = "#191970"  # midnight blue


def one_decimal(value: float) -> str:
    """Round half-up on the shortest decimal form: 21.25 -> ``21.3``."""
    return str(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def temperature_text(value: float, unit: Unit) -> str:
    """``21.5 °C``"""
    return f"{one_decimal(value)} {unit.temperature_symbol}"


def humidity_text(percent: int) -> str:
    return f"{percent}%"


def wind_text(speed: float, unit: Unit) -> str:
    return f"{one_decimal(speed)} {unit.wind_unit}"


def conditions_text(description: str) -> str:
    return title_case(description)


@dataclass
class ForecastRow:
    """One line of the forecast strip."""

    hour_label: str
    summary: str
    icon_code: str

    @property
    def text(self) -> str:
        return f"{self.hour_label}: {self.summary}"


def forecast_row(slot: ForecastSlot, unit: Unit) -> ForecastRow:
    """``15:00`` + ``Light Rain, 12.3°C``"""
    temperature = f"{one_decimal(slot.temperature)}{unit.temperature_symbol}"
    return ForecastRow(
        hour_label=slot.hour_label,
        summary=f"{title_case(slot.condition_description)}, {temperature}",
        icon_code=slot.icon_code,
    )


def forecast_rows(slots: list[ForecastSlot], unit: Unit, limit: int = 3) -> list[ForecastRow]:
    """Rows for the first ``limit`` slots, in provider order."""
    return [forecast_row(slot, unit) for slot in slots[:limit]]


def forecast_error_text(message: str) -> str:
    return f"Forecast error: {message}"


def time_of_day_color(hour: int) -> str:
    """
    Map a local hour to a background colour.

    [5, 12) morning, [12, 17) day, [17, 20) evening, otherwise night.
    """
    if 5 <= hour < 12:
        return MORNING_COLOR
    if 12 <= hour < 17:
        return DAY_COLOR
    if 17 <= hour < 20:
        return EVENING_COLOR
    return NIGHT_COLOR


def background_color(local_time: str | None) -> str:
    """Background for a ``yyyy-MM-dd HH:mm`` string; day colour if unparsable."""
    if local_time is None:
        return DAY_COLOR
    hour = parse_hour(local_time)
    if hour is None:
        return DAY_COLOR
    return time_of_day_color(hour)
