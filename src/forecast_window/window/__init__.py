"""Rolling forecast window: data model, trimming and merging.

Pure functions over immutable ``Window`` values. No I/O, no Prefect.

Public API:
  - models: DayRecord, Window, empty_window, DEFAULT_WINDOW_DAYS, MIN_TEMP_UNAVAILABLE
  - trim: trim (drop past days)
  - merge: merge, merge_with_report, MergeResult (fold a fresh window in)
  - serialization: window_to_dict, window_from_dict (persisted JSON layout)
"""

from forecast_window.window.merge import MergeResult, merge, merge_with_report
from forecast_window.window.models import (
    DEFAULT_WINDOW_DAYS,
    EMPTY_DAY,
    MIN_TEMP_UNAVAILABLE,
    DayRecord,
    Window,
    empty_window,
)
from forecast_window.window.serialization import window_from_dict, window_to_dict
from forecast_window.window.trim import trim

__all__ = [
    "DEFAULT_WINDOW_DAYS",
    "EMPTY_DAY",
    "MIN_TEMP_UNAVAILABLE",
    "DayRecord",
    "MergeResult",
    "Window",
    "empty_window",
    "merge",
    "merge_with_report",
    "trim",
    "window_from_dict",
    "window_to_dict",
]
