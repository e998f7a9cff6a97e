"""JMA (Japan Meteorological Agency) weekly forecast source.

Scrapes the weekly forecast page (no API, plain HTML) into a fresh
forecast Window.

Public API:
  - client: fetch_page, JMA_WEEKLY_TOKYO, JMA_IMAGE_ROOT, default labels
  - weekly: fetch_weekly_window, parse_weekly_window
"""

from forecast_window.datasources.jma.client import (
    DEFAULT_CITY_NAME,
    DEFAULT_REGION_LABEL,
    JMA_IMAGE_ROOT,
    JMA_WEEKLY_TOKYO,
    fetch_page,
)
from forecast_window.datasources.jma.weekly import fetch_weekly_window, parse_weekly_window

__all__ = [
    "DEFAULT_CITY_NAME",
    "DEFAULT_REGION_LABEL",
    "JMA_IMAGE_ROOT",
    "JMA_WEEKLY_TOKYO",
    "fetch_page",
    "fetch_weekly_window",
    "parse_weekly_window",
]
