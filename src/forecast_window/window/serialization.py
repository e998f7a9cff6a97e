"""JSON serialization helpers for forecast windows.

The on-disk layout is column oriented, one array per field::

    {
      "date": [12, 13, 14, 15, 16, 17, 18],
      "max_temp": [15, 14, 17, 18, 16, 15, 14],
      "min_temp": [99, 8, 9, 10, 11, 9, 8],
      "image": ["img/100.png", ...],
      "image_root": "https://www.jma.go.jp/jp/week/"
    }

An unavailable minimum temperature is written as ``MIN_TEMP_UNAVAILABLE``.
"""

from __future__ import annotations

from typing import Any

from forecast_window.errors import InvalidWindowLength
from forecast_window.window.models import MIN_TEMP_UNAVAILABLE, DayRecord, Window

FIELDS = ("date", "max_temp", "min_temp", "image")
MAX_DAY_OF_MONTH = 31


def encode_min_temperature(value: int | None) -> int:
    """Map an unavailable minimum temperature to its integer marker."""
    return MIN_TEMP_UNAVAILABLE if value is None else value


def decode_min_temperature(value: int) -> int | None:
    """Inverse of ``encode_min_temperature``."""
    return None if value == MIN_TEMP_UNAVAILABLE else value


def window_to_dict(window: Window) -> dict[str, Any]:
    """Serialize a Window to the persisted JSON layout."""
    return {
        "date": [d.day_of_month for d in window.days],
        "max_temp": [d.max_temperature for d in window.days],
        "min_temp": [encode_min_temperature(d.min_temperature) for d in window.days],
        "image": [d.icon_reference for d in window.days],
        "image_root": window.icon_root,
    }


def window_from_dict(data: dict[str, Any], size: int) -> Window:
    """
    Build a Window from the persisted JSON layout.

    Args:
        data: Parsed JSON document.
        size: Expected number of days per array.

    Raises:
        KeyError: A field is missing.
        TypeError: A field has the wrong type.
        ValueError: A date is not a day of month (0 marks an empty slot).
        InvalidWindowLength: An array does not hold ``size`` values.
    """
    columns: dict[str, list[Any]] = {}
    for name in FIELDS:
        column = data[name]
        if not isinstance(column, list):
            msg = f"'{name}' must be a list, got {type(column).__name__}"
            raise TypeError(msg)
        columns[name] = column

    icon_root = data.get("image_root", "")
    if not isinstance(icon_root, str):
        msg = f"'image_root' must be a string, got {type(icon_root).__name__}"
        raise TypeError(msg)

    for name in ("date", "max_temp", "min_temp"):
        for value in columns[name]:
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"'{name}' values must be integers, got {value!r}"
                raise TypeError(msg)
    for value in columns["date"]:
        if not 0 <= value <= MAX_DAY_OF_MONTH:
            msg = f"'date' values must be days of month (0-31), got {value!r}"
            raise ValueError(msg)
    for value in columns["image"]:
        if not isinstance(value, str):
            msg = f"'image' values must be strings, got {value!r}"
            raise TypeError(msg)

    for column in columns.values():
        if len(column) != size:
            raise InvalidWindowLength(size, len(column))

    days = tuple(
        DayRecord(
            day_of_month=day,
            max_temperature=max_temp,
            min_temperature=decode_min_temperature(min_temp),
            icon_reference=image,
        )
        for day, max_temp, min_temp, image in zip(
            columns["date"],
            columns["max_temp"],
            columns["min_temp"],
            columns["image"],
            strict=True,
        )
    )
    return Window(days=days, icon_root=icon_root, size=size)
