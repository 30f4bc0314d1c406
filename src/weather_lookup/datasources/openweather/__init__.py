"""OpenWeatherMap data source.

Fetches current conditions and the 3-hour forecast (API key required).

Public API:
  - client: WeatherClient (fetch_current, fetch_forecast, fetch_icon), URLs
  - parsing: parse_current, parse_forecast
  - localtime: derive_local_time, derive_local_date, derive_local_hour
"""

from weather_lookup.datasources.openweather.client import (
    OWM_CURRENT_URL,
    OWM_FORECAST_URL,
    OWM_ICON_URL,
    WeatherClient,
    build_url,
    encode_location,
)
from weather_lookup.datasources.openweather.localtime import (
    derive_local_date,
    derive_local_hour,
    derive_local_time,
    parse_hour,
)
from weather_lookup.datasources.openweather.parsing import parse_current, parse_forecast

__all__ = [
    "OWM_CURRENT_URL",
    "OWM_FORECAST_URL",
    "OWM_ICON_URL",
    "WeatherClient",
    "build_url",
    "derive_local_date",
    "derive_local_hour",
    "derive_local_time",
    "encode_location",
    "parse_current",
    "parse_forecast",
    "parse_hour",
]
