"""Forecast Window - a rolling multi-day weather forecast kept without gaps.

The JMA weekly page only ever shows today plus the next six days. Each run
scrapes that window and folds it into the previously saved one, so the
saved file always starts at today and keeps values (like today's minimum
temperature) the page has since stopped publishing.

Architecture::

    window/        Pure data model: DayRecord, Window, trim, merge, JSON layout
    datasources/   Forecast page scrapers (JMA weekly page)
    store.py       Single-file JSON store for the persisted window
    flows/         Prefect orchestration (load -> trim -> fetch -> merge -> save)
    services/      Shared utilities (HTTP client with retry)
    config.py      Settings from FORECAST_WINDOW_* environment variables

Data flow: datasources -> window.merge <- store (trimmed) -> store
"""

__version__ = "0.1.0"

from forecast_window.config import Settings
from forecast_window.window import DayRecord, Window

__all__ = ["DayRecord", "Settings", "Window", "__version__"]
