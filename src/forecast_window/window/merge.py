"""Merge a freshly scraped window into the persisted one.

The fresh window always starts at today, the persisted one has already been
trimmed to today. They are aligned on ``fresh[0].day_of_month``:

    persisted   [12 13 14 15 16  0  0]
    fresh       [12 13 14 15 16 17 18]
                 ^ start_index = 0

Every field of the fresh day is copied except an unavailable minimum
temperature, which keeps whatever the persisted slot already knew. When
the fresh window cannot be aligned at all (first run after a long gap),
the persisted window is overwritten wholesale, unavailable values included.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from forecast_window.errors import InvalidWindowLength
from forecast_window.window.models import DayRecord, Window


@dataclass
class MergeResult:
    """Merged window plus how the two inputs lined up."""

    window: Window
    start_index: int
    all_override: bool
    kept_min_slots: list[int] = field(default_factory=list)


def find_start_index(fresh: Window, persisted: Window) -> int | None:
    """Index in ``persisted`` matching the first fresh day, or None."""
    first = fresh[0]
    if first.is_empty:
        return None
    return persisted.index_of(first.day_of_month)


def merge_with_report(fresh: Window, persisted: Window) -> MergeResult:
    """
    Merge ``fresh`` into ``persisted`` and report the alignment used.

    Neither input is modified.

    Raises:
        InvalidWindowLength: The windows differ in length.
    """
    if fresh.size != persisted.size:
        raise InvalidWindowLength(persisted.size, fresh.size)

    found = find_start_index(fresh, persisted)
    all_override = found is None
    start_index = 0 if found is None else found

    days = list(persisted.days)
    kept_min_slots: list[int] = []
    for source_index in range(persisted.size - start_index):
        target_index = start_index + source_index
        src = fresh[source_index]
        min_temperature = src.min_temperature
        if not all_override and not src.has_min_temperature:
            min_temperature = days[target_index].min_temperature
            if min_temperature is not None:
                kept_min_slots.append(target_index)
        days[target_index] = DayRecord(
            day_of_month=src.day_of_month,
            max_temperature=src.max_temperature,
            min_temperature=min_temperature,
            icon_reference=src.icon_reference,
        )

    merged = replace(persisted, days=tuple(days), icon_root=fresh.icon_root)
    return MergeResult(
        window=merged,
        start_index=start_index,
        all_override=all_override,
        kept_min_slots=kept_min_slots,
    )


def merge(fresh: Window, persisted: Window) -> Window:
    """Merge ``fresh`` into ``persisted``; see ``merge_with_report``."""
    return merge_with_report(fresh, persisted).window
