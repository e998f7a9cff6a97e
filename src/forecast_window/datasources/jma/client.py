"""Japan Meteorological Agency weekly forecast page: URLs and retrieval.

The weekly page is a plain HTML table, one row per field:

  - a ``.weekday`` header row with one cell per date (e.g. ``12日(月)``)
  - per city, a ``.cityname`` row with ``.maxtemp`` cells followed by a
    row of ``.mintemp`` cells
  - per region, a ``.normal`` row whose cells hold the forecast icons
"""

from __future__ import annotations

import requests

from forecast_window.errors import FetchError
from forecast_window.services.http import session

JMA_WEEKLY_TOKYO = "https://www.jma.go.jp/jp/week/319.html"

#: Icon ``src`` attributes on the weekly page are relative to this.
JMA_IMAGE_ROOT = "https://www.jma.go.jp/jp/week/"

DEFAULT_CITY_NAME = "東京"
DEFAULT_REGION_LABEL = "東京地方"


def fetch_page(url: str = JMA_WEEKLY_TOKYO) -> str:
    """
    Download a forecast page.

    Args:
        url: Page URL.

    Returns:
        Decoded HTML.

    Raises:
        FetchError: Connection failure or non-2xx response (after the
            session's retries).
    """
    try:
        resp = session.get(url)
        resp.raise_for_status()
    except requests.RequestException as e:
        msg = f"Failed to fetch {url}: {e}"
        raise FetchError(msg) from e

    # JMA serves UTF-8 without always declaring it
    if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = resp.apparent_encoding
    return resp.text
