"""Pure rendering functions: parsed models -> display strings.

All renderers follow the same pattern:
  - Input: schemas models or plain values
  - Output: str (or small dataclasses of strings)
  - No side effects, no I/O, no toolkit imports

Used by view/weather_view.py, which owns the UI state.

Public API:
  - display: temperature_text, humidity_text, wind_text, conditions_text,
    forecast_rows, background_color
  - text_utils: title_case, format_hour_label
"""

from weather_lookup.renderers.display import (
    DAY_COLOR,
    EVENING_COLOR,
    MORNING_COLOR,
    NIGHT_COLOR,
    ForecastRow,
    background_color,
    conditions_text,
    forecast_rows,
    humidity_text,
    temperature_text,
    wind_text,
)
from weather_lookup.renderers.text_utils import format_hour_label, title_case

__all__ = [
    "DAY_COLOR",
    "EVENING_COLOR",
    "MORNING_COLOR",
    "NIGHT_COLOR",
    "ForecastRow",
    "background_color",
    "conditions_text",
    "format_hour_label",
    "forecast_rows",
    "humidity_text",
    "temperature_text",
    "title_case",
    "wind_text",
]
