"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from forecast_window import __version__
from forecast_window.config import get_settings
from forecast_window.errors import ForecastWindowError
from forecast_window.flows.update import update_window
from forecast_window.store import WindowStore
from forecast_window.window import Window


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="forecast-window",
        description="Keep a rolling multi-day weather forecast without gaps",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'update' command - scrape, merge and save
    update_parser = subparsers.add_parser("update", help="Fetch the forecast and update the window")
    update_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Window file (default: output_path from settings)",
    )
    update_parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Forecast page URL (default: source_url from settings)",
    )

    # 'show' command - print the saved window
    show_parser = subparsers.add_parser("show", help="Show the saved forecast window")
    show_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Window file (default: output_path from settings)",
    )

    subparsers.add_parser("info", help="Show application info")

    return parser


def format_window(window: Window) -> str:
    """Render a window as a plain-text table, one line per filled day."""
    lines = [f"{'day':>3}  {'max':>4}  {'min':>4}  icon"]
    for i, day in enumerate(window.days):
        if day.is_empty:
            continue
        min_temp = "-" if day.min_temperature is None else str(day.min_temperature)
        lines.append(
            f"{day.day_of_month:>3}  {day.max_temperature:>4}  {min_temp:>4}  {window.icon_url(i)}"
        )
    return "\n".join(lines)


def cmd_update(args: argparse.Namespace) -> int:
    """Handle the 'update' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    try:
        result = update_window(output_path=args.output, source_url=args.url)
    except ForecastWindowError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    start = "cold start" if result["cold_start"] else f"aligned at {result['start_index']}"
    print(f"Updated {result['output_path']}: {result['days']} days ({start})")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handle the 'show' command."""
    settings = get_settings()
    store = WindowStore(args.output or settings.output_path, size=settings.window_days)

    try:
        window = store.read()
    except ForecastWindowError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if window is None:
        print(
            f"No forecast window at {store.path}. Run 'forecast-window update' first.",
            file=sys.stderr,
        )
        return 1

    print(format_window(window))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Source: {settings.source_url}")
    print(f"Output: {settings.output_path}")
    print(f"Window days: {settings.window_days}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "update": cmd_update,
        "show": cmd_show,
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
