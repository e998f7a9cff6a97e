"""Single-file JSON store for the persisted forecast window.

One window, one file, no envelope: the document layout is the contract
other tooling reads (see ``window.serialization``). A missing file is a
cold start and reads as None; anything else that goes wrong is raised.

There is no locking. Each update overwrites the file, so runs against the
same path must be serialized by whatever schedules them.
"""

from __future__ import annotations

import json
from pathlib import Path

from forecast_window.errors import InvalidWindowLength, ParseError, WriteError
from forecast_window.window.models import DEFAULT_WINDOW_DAYS, Window
from forecast_window.window.serialization import window_from_dict, window_to_dict


class WindowStore:
    """Reads and writes the persisted window file."""

    def __init__(self, path: Path, size: int = DEFAULT_WINDOW_DAYS) -> None:
        self.path = path
        self.size = size

    def exists(self) -> bool:
        """Whether a persisted window file is present."""
        return self.path.exists()

    def read(self) -> Window | None:
        """Load the persisted window.

        Returns None if the file doesn't exist.

        Raises:
            ParseError: The file is not valid JSON or not a window of
                ``self.size`` days.
        """
        if not self.path.exists():
            return None
        try:
            with self.path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            msg = f"{self.path}: invalid JSON ({e})"
            raise ParseError(msg) from e
        except OSError as e:
            msg = f"{self.path}: cannot read ({e})"
            raise ParseError(msg) from e

        if not isinstance(raw, dict):
            msg = f"{self.path}: expected a JSON object, got {type(raw).__name__}"
            raise ParseError(msg)
        try:
            return window_from_dict(raw, self.size)
        except KeyError as e:
            msg = f"{self.path}: missing field {e}"
            raise ParseError(msg) from e
        except (TypeError, ValueError) as e:
            msg = f"{self.path}: {e}"
            raise ParseError(msg) from e

    def write(self, window: Window) -> Path:
        """Write ``window``, replacing any existing file.

        Returns:
            Path of the written file.

        Raises:
            InvalidWindowLength: ``window`` does not hold ``self.size`` days.
            WriteError: The file or its parent directory cannot be written.
        """
        if window.size != self.size:
            raise InvalidWindowLength(self.size, window.size)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(window_to_dict(window), f, ensure_ascii=False)
        except OSError as e:
            msg = f"{self.path}: cannot write ({e})"
            raise WriteError(msg) from e
        return self.path
