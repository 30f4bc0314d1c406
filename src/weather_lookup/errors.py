"""Error taxonomy for weather lookups."""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for all weather lookup failures."""


class ValidationError(WeatherError):
    """User input rejected before any network call."""


class ProviderError(WeatherError):
    """Provider answered, but with a non-200 ``cod`` in the body."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"provider returned {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class NetworkError(WeatherError):
    """Connection, timeout or other transport failure."""


class ParseError(WeatherError):
    """Body is not valid JSON or lacks an expected field."""


class ConfigurationError(WeatherError):
    """Settings are incomplete (e.g. no API key)."""
