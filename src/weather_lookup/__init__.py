"""Weather Lookup - desktop current conditions and short-range forecast viewer.

Architecture::

    datasources/   OpenWeatherMap client (transport, payload parsing, local time)
    renderers/     Pure data -> display strings (labels, forecast rows, colours)
    view/          UI state + fetch action (WeatherView), tkinter window
    services/      Shared utilities (HTTP session with fixed timeouts)
    config.py      Settings from environment / .env, logging setup

Data flow: view action -> datasources (fetch + parse) -> renderers -> view state
"""

__version__ = "0.1.0"

from weather_lookup.config import Settings
from weather_lookup.schemas import CurrentConditions, ForecastSeries, ForecastSlot, Unit, WeatherQuery

__all__ = [
    "CurrentConditions",
    "ForecastSeries",
    "ForecastSlot",
    "Settings",
    "Unit",
    "WeatherQuery",
    "__version__",
]
