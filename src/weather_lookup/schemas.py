"""
Domain models for weather lookup.

Pydantic models for provider responses and UI-facing records.
The datasource layer normalizes OpenWeatherMap payloads to these.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

SUCCESS_CODE = 200

# =============================================================================
# Query
# =============================================================================


class Unit(StrEnum):
    """Unit system sent to the provider as the ``units`` parameter."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_symbol(self) -> str:
        return "°C" if self is Unit.METRIC else "°F"

    @property
    def wind_unit(self) -> str:
        # The provider reports metric wind in metres per second
        return "m/s" if self is Unit.METRIC else "mph"


class WeatherQuery(BaseModel):
    """One lookup request, built from user input."""

    model_config = {"frozen": True}

    location_text: str = Field(..., description="Place name or 'lat,lon'")
    unit: Unit = Unit.METRIC


# =============================================================================
# Current conditions
# =============================================================================


class CurrentConditions(BaseModel):
    """Current-conditions snapshot.

    ``status_code == 200`` means the display fields are populated; any other
    code means only ``error_message`` is set.
    """

    status_code: int
    temperature: float | None = None
    humidity_percent: int | None = None
    wind_speed: float | None = None
    condition_description: str | None = None
    icon_code: str | None = None
    epoch_utc: int | None = None
    timezone_offset_seconds: int | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status_code == SUCCESS_CODE


# =============================================================================
# Forecast
# =============================================================================


class ForecastSlot(BaseModel):
    """A single 3-hour forecast entry."""

    local_timestamp_text: str = Field(..., description="'yyyy-MM-dd HH:mm:ss'")
    temperature: float
    condition_description: str
    icon_code: str

    @property
    def hour_label(self) -> str:
        """``HH:MM`` portion of the timestamp."""
        return self.local_timestamp_text[11:16]


class ForecastSeries(BaseModel):
    """Ordered forecast slots, or the provider's error message."""

    status_code: int
    slots: list[ForecastSlot] = Field(default_factory=list)
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status_code == SUCCESS_CODE


# =============================================================================
# History
# =============================================================================


class HistoryEntry(BaseModel):
    """A past successful lookup."""

    model_config = {"frozen": True}

    query_text: str
    local_time_label: str

    @property
    def label(self) -> str:
        return f"{self.query_text}  |  {self.local_time_label}"
