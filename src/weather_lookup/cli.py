"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from functools import partial

from weather_lookup import __version__
from weather_lookup.config import configure_logging, get_settings
from weather_lookup.datasources.openweather.client import WeatherClient
from weather_lookup.errors import ConfigurationError
from weather_lookup.schemas import Unit
from weather_lookup.view.weather_view import Notifier, WeatherView


class ConsoleNotifier:
    """Notifier that writes to stderr."""

    def warn(self, title: str, message: str) -> None:
        print(f"{title}: {message}", file=sys.stderr)

    def error(self, title: str, message: str) -> None:
        print(f"{title}: {message}", file=sys.stderr)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Current conditions and 3-hour forecast from OpenWeatherMap",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'gui' command - open the desktop window
    subparsers.add_parser("gui", help="Open the desktop window")

    # 'lookup' command - one fetch, printed to stdout
    lookup_parser = subparsers.add_parser("lookup", help="Print weather for a location")
    lookup_parser.add_argument("location", nargs="+", help='City name or "lat,lon"')
    lookup_parser.add_argument(
        "--units",
        choices=[u.value for u in Unit],
        default=Unit.METRIC.value,
        help="Unit system (default: metric)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def build_view(client: WeatherClient, notifier: Notifier) -> WeatherView:
    """WeatherView sized from settings."""
    settings = get_settings()
    return WeatherView(
        client,
        notifier,
        history_size=settings.history_size,
        forecast_slots=settings.forecast_slots,
    )


def cmd_gui(_args: argparse.Namespace) -> int:
    """Handle the 'gui' command."""
    # Imported here so headless commands never need a display
    from weather_lookup.view import tk_app

    try:
        client = WeatherClient.from_settings(get_settings())
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    tk_app.run(partial(build_view, client))
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle the 'lookup' command."""
    try:
        client = WeatherClient.from_settings(get_settings())
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    view = build_view(client, ConsoleNotifier())
    view.location_text = " ".join(args.location)
    view.unit = Unit(args.units)
    if not view.fetch() or view.current is None:
        return 1

    current = view.current
    print(f"Location:    {view.location_text.strip()}")
    print(f"Local time:  {view.local_time_text}")
    print(f"Temperature: {current.temperature_text}")
    print(f"Humidity:    {current.humidity_text}")
    print(f"Wind:        {current.wind_text}")
    print(f"Conditions:  {current.conditions_text}")
    print("Forecast:")
    if view.forecast.message is not None:
        print(f"  {view.forecast.message}")
    for row in view.forecast.rows:
        print(f"  {row.text}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"API key configured: {bool(settings.api_key.get_secret_value())}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    settings = get_settings()
    configure_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "gui": cmd_gui,
        "lookup": cmd_lookup,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
