"""Extract a forecast Window from the JMA weekly page."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, Tag

from forecast_window.datasources.jma.client import (
    DEFAULT_CITY_NAME,
    DEFAULT_REGION_LABEL,
    JMA_IMAGE_ROOT,
    JMA_WEEKLY_TOKYO,
    fetch_page,
)
from forecast_window.errors import ParseError
from forecast_window.window.models import DEFAULT_WINDOW_DAYS, EMPTY_DAY, DayRecord, Window

if TYPE_CHECKING:
    from collections.abc import Sequence

_DIGITS = re.compile(r"\d+")


def parse_day_of_month(text: str) -> int:
    """First run of digits in ``text`` (``"12日(月)"`` -> 12), 0 if none."""
    match = _DIGITS.search(text)
    return int(match.group()) if match else 0


def parse_temperature(text: str) -> int:
    """
    Parse a temperature cell.

    Cells hold the value on the first line, optionally followed by a
    reliability range on the next. Non-numeric text parses as 0.
    """
    first_line = text.strip().split("\n")[0].strip()
    try:
        return int(first_line)
    except ValueError:
        return 0


def _cells_text(cells: list[Tag]) -> list[str]:
    return [c.get_text("\n") for c in cells]


def extract_dates(soup: BeautifulSoup) -> list[int]:
    """Day-of-month for each column of the ``.weekday`` header row."""
    header = soup.select_one(".weekday")
    if header is None or header.parent is None:
        msg = "No .weekday header row on page"
        raise ParseError(msg)

    dates = []
    for cell in header.parent.find_all(recursive=False):
        day = parse_day_of_month(cell.get_text())
        if day > 0:
            dates.append(day)
    if not dates:
        msg = "No dates found in .weekday header row"
        raise ParseError(msg)
    return dates


def extract_temperatures(soup: BeautifulSoup, city: str) -> tuple[list[int], list[int]]:
    """
    Max and min temperatures for ``city``.

    The min-temperature cells live in the row right after the city's
    max-temperature row.
    """
    for name_cell in soup.select(".cityname"):
        if name_cell.get_text().strip() != city:
            continue
        row = name_cell.parent
        if row is None:
            break
        max_temps = [parse_temperature(t) for t in _cells_text(row.select(".maxtemp"))]
        next_row = row.find_next_sibling(row.name)
        min_cells = next_row.select(".mintemp") if isinstance(next_row, Tag) else []
        min_temps = [parse_temperature(t) for t in _cells_text(min_cells)]
        if not max_temps:
            msg = f"No .maxtemp cells for city {city!r}"
            raise ParseError(msg)
        if not min_temps:
            msg = f"No .mintemp cells after the {city!r} row"
            raise ParseError(msg)
        return max_temps, min_temps

    msg = f"City {city!r} not found on page"
    raise ParseError(msg)


def extract_icons(soup: BeautifulSoup, region: str) -> list[str]:
    """Icon ``src`` paths from the row labelled ``region``."""
    for label in soup.select(".normal"):
        if region not in label.get_text():
            continue
        row = label.parent
        if row is None:
            break
        return [str(img.get("src", "")) for img in row.find_all("img")]

    msg = f"Region {region!r} not found on page"
    raise ParseError(msg)


def align_min_temperatures(min_temps: list[int], size: int) -> list[int | None]:
    """
    Line minimum temperatures up with the date columns.

    Once today's morning has passed JMA stops publishing today's minimum
    and the row is one cell short. The values then belong to tomorrow
    onwards, so they shift right and today becomes unavailable.
    """
    aligned: list[int | None] = list(min_temps)
    if len(min_temps) == size - 1:
        aligned.insert(0, None)
    return aligned


def _check_count(field: str, values: Sequence[object], size: int) -> None:
    if len(values) > size:
        msg = f"Page lists {len(values)} {field} values, window holds {size}"
        raise ParseError(msg)


def parse_weekly_window(
    html: str,
    *,
    city: str = DEFAULT_CITY_NAME,
    region: str = DEFAULT_REGION_LABEL,
    image_root: str = JMA_IMAGE_ROOT,
    size: int = DEFAULT_WINDOW_DAYS,
) -> Window:
    """
    Build a fresh Window from weekly page HTML.

    Columns the page does not fill stay as empty slots. A dated column
    without a minimum temperature gets an unavailable one, so merging
    keeps the value already on record.

    Args:
        html: Page HTML.
        city: Label of the temperature row (``.cityname``).
        region: Label of the icon row (``.normal``).
        image_root: Prefix the icon paths are relative to.
        size: Window length.

    Raises:
        ParseError: A required row is missing or holds more than ``size``
            values.
    """
    soup = BeautifulSoup(html, "html.parser")

    dates = extract_dates(soup)
    max_temps, raw_min_temps = extract_temperatures(soup, city)
    min_temps = align_min_temperatures(raw_min_temps, size)
    icons = extract_icons(soup, region)

    for field, values in (
        ("date", dates),
        ("max temperature", max_temps),
        ("min temperature", min_temps),
        ("icon", icons),
    ):
        _check_count(field, values, size)

    days = []
    for i in range(size):
        if i >= len(dates):
            days.append(EMPTY_DAY)
            continue
        days.append(
            DayRecord(
                day_of_month=dates[i],
                max_temperature=max_temps[i] if i < len(max_temps) else 0,
                min_temperature=min_temps[i] if i < len(min_temps) else None,
                icon_reference=icons[i] if i < len(icons) else "",
            )
        )
    return Window(days=tuple(days), icon_root=image_root, size=size)


def fetch_weekly_window(
    url: str = JMA_WEEKLY_TOKYO,
    *,
    city: str = DEFAULT_CITY_NAME,
    region: str = DEFAULT_REGION_LABEL,
    image_root: str = JMA_IMAGE_ROOT,
    size: int = DEFAULT_WINDOW_DAYS,
) -> Window:
    """Fetch the weekly page and extract a fresh Window from it.

    Raises:
        FetchError: The page could not be retrieved.
        ParseError: The page layout was not recognised.
    """
    html = fetch_page(url)
    return parse_weekly_window(
        html, city=city, region=region, image_root=image_root, size=size
    )
