"""Fixed-length forecast window data models and constants."""

from __future__ import annotations

from dataclasses import dataclass

from forecast_window.errors import InvalidWindowLength

#: Days published by the JMA weekly page.
DEFAULT_WINDOW_DAYS = 7

#: On-disk / on-page marker for "minimum temperature not published yet".
MIN_TEMP_UNAVAILABLE = 99


@dataclass(frozen=True)
class DayRecord:
    """Forecast for a single calendar day.

    ``day_of_month == 0`` marks an empty slot. ``min_temperature`` is None
    when the source has not published it (the site drops today's minimum
    once the morning has passed).
    """

    day_of_month: int = 0
    max_temperature: int = 0
    min_temperature: int | None = 0
    icon_reference: str = ""

    @property
    def is_empty(self) -> bool:
        """Whether this slot holds no day."""
        return self.day_of_month == 0

    @property
    def has_min_temperature(self) -> bool:
        """Whether the minimum temperature is known."""
        return self.min_temperature is not None


EMPTY_DAY = DayRecord()


@dataclass(frozen=True)
class Window:
    """A fixed number of consecutive days, index 0 being the earliest.

    Trailing unused slots are ``EMPTY_DAY``. All icon references are
    relative to ``icon_root``.
    """

    days: tuple[DayRecord, ...]
    icon_root: str = ""
    size: int = DEFAULT_WINDOW_DAYS

    def __post_init__(self) -> None:
        if self.size < 1:
            msg = f"Window size must be positive, got {self.size}"
            raise ValueError(msg)
        object.__setattr__(self, "days", tuple(self.days))
        if len(self.days) != self.size:
            raise InvalidWindowLength(self.size, len(self.days))

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> DayRecord:
        return self.days[index]

    @property
    def dates(self) -> list[int]:
        """Day-of-month per slot (0 for empty slots)."""
        return [d.day_of_month for d in self.days]

    @property
    def filled(self) -> int:
        """Number of non-empty slots."""
        return sum(1 for d in self.days if not d.is_empty)

    def index_of(self, day_of_month: int) -> int | None:
        """Index of the first non-empty slot for ``day_of_month``, or None."""
        for i, day in enumerate(self.days):
            if not day.is_empty and day.day_of_month == day_of_month:
                return i
        return None

    def icon_url(self, index: int) -> str:
        """Icon reference of a slot resolved against ``icon_root``."""
        icon = self.days[index].icon_reference
        if not icon:
            return ""
        return self.icon_root + icon


def empty_window(size: int = DEFAULT_WINDOW_DAYS, icon_root: str = "") -> Window:
    """Build a window of ``size`` empty slots."""
    return Window(days=(EMPTY_DAY,) * size, icon_root=icon_root, size=size)


def require_size(window: Window, size: int) -> None:
    """Raise InvalidWindowLength unless ``window`` holds ``size`` slots."""
    if len(window.days) != size:
        raise InvalidWindowLength(size, len(window.days))
