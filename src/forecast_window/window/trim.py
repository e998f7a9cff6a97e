"""Drop days that are already in the past from a persisted window."""

from __future__ import annotations

from dataclasses import replace

from forecast_window.window.models import EMPTY_DAY, Window, require_size


def stale_count(window: Window, today: int) -> int:
    """Count the slots before the one holding ``today``.

    Returns ``window.size`` when ``today`` is not in the window at all.
    """
    index = window.index_of(today)
    return window.size if index is None else index


def trim(window: Window, today: int, *, size: int | None = None) -> Window:
    """
    Shift ``window`` left so that ``today`` lands at index 0.

    The vacated trailing slots are emptied. When ``today`` does not appear
    in the window every slot is stale and the whole window is cleared;
    ``icon_root`` is kept either way.

    Args:
        window: Previously persisted window.
        today: Current day of month (1-31).
        size: Expected window length (defaults to ``window.size``).

    Raises:
        ValueError: ``today`` is not a day of month.
        InvalidWindowLength: ``window`` does not hold ``size`` slots.
    """
    if not 1 <= today <= 31:  # noqa: PLR2004
        msg = f"today must be a day of month (1-31), got {today}"
        raise ValueError(msg)

    expected = window.size if size is None else size
    require_size(window, expected)

    k = stale_count(window, today)
    if k == 0:
        return window

    kept = window.days[k:]
    days = kept + (EMPTY_DAY,) * (expected - len(kept))
    return replace(window, days=days)
