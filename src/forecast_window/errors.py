"""Exception hierarchy.

A missing persisted file is not an error: ``WindowStore.read`` returns None
and the update flow treats it as a cold start.
"""

from __future__ import annotations


class ForecastWindowError(Exception):
    """Base class for all forecast-window failures."""


class FetchError(ForecastWindowError):
    """The forecast page could not be retrieved."""


class ParseError(ForecastWindowError):
    """A forecast page or persisted window file could not be understood."""


class WriteError(ForecastWindowError):
    """The persisted window file could not be written."""


class InvalidWindowLength(ForecastWindowError, ValueError):  # noqa: N818
    """A window does not hold the expected number of day slots."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Window must hold exactly {expected} days, got {actual}")
