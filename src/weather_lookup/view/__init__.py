"""Presentation layer.

- history.py       - SearchHistory (bounded, most-recent-first)
- weather_view.py  - WeatherView: UI state + fetch action, Notifier protocol
- tk_app.py        - tkinter window (imported lazily; needs a display)
"""

from weather_lookup.view.history import SearchHistory
from weather_lookup.view.weather_view import Notifier, WeatherView

__all__ = ["Notifier", "SearchHistory", "WeatherView"]
