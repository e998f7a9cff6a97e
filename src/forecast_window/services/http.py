"""
The one HTTP session every forecast page download goes through.

The JMA weekly page is static HTML behind a CDN that occasionally answers
429 or a 5xx for a few seconds. ``session`` retries those (GET only) with
backoff before ``resp.raise_for_status()`` turns the final answer into an
error, and puts a timeout on every request so a stalled connection fails
the run instead of hanging the scheduler.

Usage::

    from forecast_window.services.http import session

    resp = session.get(JMA_WEEKLY_TOKYO)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from forecast_window import __version__

#: Four attempts, spaced 0s, 2s, 4s, 8s; idempotent methods only.
DEFAULT_RETRY = Retry(
    total=4,
    backoff_factor=2,
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # fetch_page reports the last response
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"forecast-window/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Wrap send so callers get a timeout without passing ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Shared by all datasources.
session: requests.Session = create_session()
