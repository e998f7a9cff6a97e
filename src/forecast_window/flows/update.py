"""
Prefect flow that refreshes the persisted forecast window.

load -> trim -> fetch -> merge -> save. A missing file is a cold start: the
fresh window is saved as-is. Every other failure aborts the run before
anything is written.

Run locally:
    python -m forecast_window.flows.update

Run with Prefect dashboard:
    prefect server start &
    python -m forecast_window.flows.update
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

from prefect import flow, task

from forecast_window.config import get_settings
from forecast_window.datasources.jma import weekly
from forecast_window.errors import ParseError
from forecast_window.store import WindowStore
from forecast_window.window import Window, merge_with_report, trim


@task(name="load-window")
def load_window(store: WindowStore, *, reset_on_corrupt: bool = False) -> Window | None:
    """Load the persisted window; None means cold start."""
    try:
        return store.read()
    except ParseError as e:
        if not reset_on_corrupt:
            raise
        print(f"Ignoring unreadable window file, starting cold: {e}")
        return None


@task(name="trim-window")
def trim_window(window: Window, today: date) -> Window:
    """Drop days before ``today`` from the persisted window."""
    return trim(window, today.day)


@task(name="fetch-window")
def fetch_window(
    source_url: str,
    *,
    city: str,
    region: str,
    image_root: str,
    size: int,
) -> Window:
    """Scrape a fresh window from the weekly forecast page."""
    return weekly.fetch_weekly_window(
        source_url, city=city, region=region, image_root=image_root, size=size
    )


@task(name="save-window")
def save_window(store: WindowStore, window: Window) -> Path:
    """Write the window to the store."""
    return store.write(window)


@flow(name="update-window", log_prints=True)
def update_window(
    output_path: Path | None = None,
    source_url: str | None = None,
    today: date | None = None,
) -> dict[str, Any]:
    """
    Refresh the persisted forecast window.

    Args:
        output_path: Window file (default: ``Settings.output_path``).
        source_url: Weekly forecast page (default: ``Settings.source_url``).
        today: Date used for trimming (default: today).

    Returns:
        Summary with ``cold_start``, ``start_index``, ``all_override``,
        ``days`` (filled slots) and ``output_path``.
    """
    settings = get_settings()
    store = WindowStore(output_path or settings.output_path, size=settings.window_days)
    today = today or date.today()

    persisted = load_window(store, reset_on_corrupt=settings.reset_on_corrupt)
    if persisted is not None:
        persisted = trim_window(persisted, today)
        print(f"Trimmed persisted window to {today.day}: {persisted.dates}")
    else:
        print(f"No persisted window at {store.path}, starting cold.")

    url = source_url or settings.source_url
    print(f"Fetching forecast from {url}...")
    fresh = fetch_window(
        url,
        city=settings.city_name,
        region=settings.region_label,
        image_root=settings.image_root,
        size=settings.window_days,
    )
    print(f"Fetched {fresh.filled} days: {fresh.dates}")

    summary: dict[str, Any] = {"cold_start": persisted is None}
    if persisted is None:
        result_window = fresh
        summary.update(start_index=0, all_override=True)
    else:
        result = merge_with_report(fresh, persisted)
        result_window = result.window
        summary.update(start_index=result.start_index, all_override=result.all_override)
        if result.all_override:
            print("Fresh window does not overlap persisted window, overwriting.")
        if result.kept_min_slots:
            print(f"Kept previous min temperature for slots {result.kept_min_slots}")

    path = save_window(store, result_window)
    print(f"Saved {result_window.filled} days to {path}")

    summary.update(days=result_window.filled, output_path=str(path))
    return summary


if __name__ == "__main__":
    result = update_window()
    print(f"Flow complete: {result}")
