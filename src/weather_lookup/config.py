"""
Application settings and logging setup.

Settings are read from ``WEATHER_*`` environment variables and an optional
``.env`` file in the working directory::

    WEATHER_API_KEY=...          # OpenWeatherMap key (required for lookups)
    WEATHER_LOG_LEVEL=DEBUG
    WEATHER_HISTORY_SIZE=10
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """Runtime configuration for the weather lookup app."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "weather-lookup"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    api_key: SecretStr = SecretStr("")
    current_url: str = "https://api.openweathermap.org/data/2.5/weather"
    forecast_url: str = "https://api.openweathermap.org/data/2.5/forecast"
    icon_url_template: str = "https://openweathermap.org/img/wn/{code}@2x.png"

    connect_timeout: float = Field(default=5.0, gt=0)
    read_timeout: float = Field(default=5.0, gt=0)

    history_size: int = Field(default=10, ge=1)
    forecast_slots: int = Field(default=3, ge=1)

    @property
    def timeout(self) -> tuple[float, float]:
        """(connect, read) timeout pair for requests."""
        return (self.connect_timeout, self.read_timeout)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Install a single console handler on the root logger."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        root.addHandler(handler)

    # Connection-pool chatter is noise at INFO
    logging.getLogger("urllib3").setLevel(logging.WARNING)
