"""Tests for the rolling forecast window: model, trim and merge.

Covers:
- DayRecord / Window invariants (fixed length, empty slots)
- trim: shifting past days out, clearing on no match
- merge: alignment by date, unavailable min-temperature handling
- End-to-end trim-then-merge scenarios
"""

from __future__ import annotations

import pytest

from forecast_window.errors import InvalidWindowLength
from forecast_window.window import (
    EMPTY_DAY,
    DayRecord,
    Window,
    empty_window,
    merge,
    merge_with_report,
    trim,
)

ROOT = "https://www.jma.go.jp/jp/week/"


def make_window(
    dates: list[int],
    min_temps: list[int | None] | None = None,
    max_temps: list[int] | None = None,
    size: int = 7,
    icon_root: str = ROOT,
) -> Window:
    """Build a window from column lists, padding with empty slots."""
    min_temps = min_temps if min_temps is not None else [d - 5 for d in dates]
    max_temps = max_temps if max_temps is not None else [d + 3 for d in dates]
    days = [
        DayRecord(
            day_of_month=d,
            max_temperature=hi,
            min_temperature=lo,
            icon_reference=f"img/{d}.png",
        )
        for d, hi, lo in zip(dates, max_temps, min_temps, strict=True)
    ]
    days += [EMPTY_DAY] * (size - len(days))
    return Window(days=tuple(days), icon_root=icon_root, size=size)


@pytest.fixture
def persisted() -> Window:
    """Window saved two days ago: the 10th through the 16th."""
    return make_window(list(range(10, 17)), min_temps=[5, 6, 7, 8, 9, 10, 11])


# =============================================================================
# Model
# =============================================================================


class TestDayRecord:
    """Tests for a single day slot."""

    def test_default_is_empty(self) -> None:
        assert DayRecord().is_empty
        assert DayRecord() == EMPTY_DAY

    def test_filled_day_not_empty(self) -> None:
        assert not DayRecord(day_of_month=3).is_empty

    def test_unavailable_min_temperature(self) -> None:
        day = DayRecord(day_of_month=3, min_temperature=None)
        assert not day.has_min_temperature

    def test_zero_min_temperature_is_known(self) -> None:
        """0 degrees is a real temperature, not 'unavailable'."""
        assert DayRecord(day_of_month=3, min_temperature=0).has_min_temperature


class TestWindow:
    """Tests for the fixed-length window."""

    def test_wrong_length_rejected(self) -> None:
        with pytest.raises(InvalidWindowLength) as exc:
            Window(days=(EMPTY_DAY,) * 6)
        assert exc.value.expected == 7
        assert exc.value.actual == 6

    def test_invalid_window_length_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="exactly 3 days"):
            Window(days=(EMPTY_DAY,) * 4, size=3)

    def test_non_positive_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            Window(days=(), size=0)

    def test_list_days_stored_as_tuple(self) -> None:
        window = Window(days=[EMPTY_DAY] * 7)  # type: ignore[arg-type]
        assert isinstance(window.days, tuple)

    def test_empty_window(self) -> None:
        window = empty_window(5, icon_root=ROOT)
        assert len(window) == 5
        assert window.filled == 0
        assert window.dates == [0, 0, 0, 0, 0]
        assert window.icon_root == ROOT

    def test_dates_and_filled(self, persisted: Window) -> None:
        assert persisted.dates == [10, 11, 12, 13, 14, 15, 16]
        assert persisted.filled == 7

    def test_index_of(self, persisted: Window) -> None:
        assert persisted.index_of(10) == 0
        assert persisted.index_of(14) == 4
        assert persisted.index_of(20) is None

    def test_index_of_ignores_empty_slots(self) -> None:
        window = make_window([1, 2])
        assert window.index_of(0) is None

    def test_icon_url(self, persisted: Window) -> None:
        assert persisted.icon_url(0) == ROOT + "img/10.png"

    def test_icon_url_empty_slot(self) -> None:
        assert empty_window(icon_root=ROOT).icon_url(0) == ""

    def test_getitem(self, persisted: Window) -> None:
        assert persisted[2].day_of_month == 12


# =============================================================================
# trim
# =============================================================================


class TestTrim:
    """Tests for dropping past days."""

    def test_drops_days_before_today(self, persisted: Window) -> None:
        result = trim(persisted, 12)
        assert result.dates == [12, 13, 14, 15, 16, 0, 0]
        assert [d.min_temperature for d in result.days] == [7, 8, 9, 10, 11, 0, 0]

    def test_vacated_slots_are_empty(self, persisted: Window) -> None:
        result = trim(persisted, 12)
        assert result[5] == EMPTY_DAY
        assert result[6] == EMPTY_DAY

    def test_today_already_first_is_unchanged(self, persisted: Window) -> None:
        assert trim(persisted, 10) == persisted

    def test_today_last_keeps_one_day(self, persisted: Window) -> None:
        result = trim(persisted, 16)
        assert result.dates == [16, 0, 0, 0, 0, 0, 0]

    def test_no_match_clears_window(self, persisted: Window) -> None:
        result = trim(persisted, 25)
        assert result.filled == 0
        assert result.icon_root == ROOT

    def test_empty_window_stays_empty(self) -> None:
        window = empty_window()
        assert trim(window, 5) == window

    def test_month_rollover(self) -> None:
        window = make_window([29, 30, 31, 1, 2, 3, 4])
        assert trim(window, 1).dates == [1, 2, 3, 4, 0, 0, 0]

    def test_does_not_modify_input(self, persisted: Window) -> None:
        trim(persisted, 12)
        assert persisted.dates == [10, 11, 12, 13, 14, 15, 16]

    @pytest.mark.parametrize("today", [10, 12, 16, 20])
    def test_idempotent(self, persisted: Window, today: int) -> None:
        once = trim(persisted, today)
        assert trim(once, today) == once

    @pytest.mark.parametrize("today", [10, 13, 16, 1])
    def test_preserves_length(self, persisted: Window, today: int) -> None:
        assert len(trim(persisted, today).days) == 7

    @pytest.mark.parametrize("today", [0, 32, -1])
    def test_invalid_day_rejected(self, persisted: Window, today: int) -> None:
        with pytest.raises(ValueError, match="day of month"):
            trim(persisted, today)

    def test_size_mismatch_rejected(self, persisted: Window) -> None:
        with pytest.raises(InvalidWindowLength):
            trim(persisted, 12, size=5)


# =============================================================================
# merge
# =============================================================================


class TestMerge:
    """Tests for folding a fresh window into the persisted one."""

    def test_aligned_merge_takes_fresh_values(self, persisted: Window) -> None:
        trimmed = trim(persisted, 12)
        fresh = make_window(list(range(12, 19)), max_temps=[20] * 7)

        result = merge_with_report(fresh, trimmed)

        assert result.start_index == 0
        assert result.all_override is False
        assert result.window.dates == [12, 13, 14, 15, 16, 17, 18]
        assert [d.max_temperature for d in result.window.days] == [20] * 7

    def test_unavailable_min_keeps_persisted_value(self, persisted: Window) -> None:
        trimmed = trim(persisted, 12)
        fresh = make_window(
            list(range(12, 19)),
            min_temps=[None, 1, 2, 3, 4, 5, 6],
        )

        result = merge_with_report(fresh, trimmed)

        mins = [d.min_temperature for d in result.window.days]
        assert mins == [7, 1, 2, 3, 4, 5, 6]
        assert result.kept_min_slots == [0]

    def test_unavailable_min_without_prior_value_stays_unavailable(self) -> None:
        persisted = make_window([12, 13], min_temps=[None, 4])
        fresh = make_window(list(range(12, 19)), min_temps=[None, 1, 2, 3, 4, 5, 6])

        result = merge_with_report(fresh, persisted)

        assert result.window[0].min_temperature is None
        assert result.kept_min_slots == []

    def test_only_known_persisted_mins_reported_as_kept(self) -> None:
        """Slots whose saved minimum was also unknown are not reported."""
        persisted = make_window([12, 13, 14], min_temps=[None, 4, None])
        fresh = make_window(list(range(12, 19)), min_temps=[None, None, None, 3, 4, 5, 6])

        result = merge_with_report(fresh, persisted)

        assert [d.min_temperature for d in result.window.days][:3] == [None, 4, None]
        assert result.kept_min_slots == [1]

    def test_other_fields_copied_even_when_min_kept(self, persisted: Window) -> None:
        trimmed = trim(persisted, 12)
        fresh = make_window(list(range(12, 19)), min_temps=[None] * 7, max_temps=[30] * 7)

        merged = merge(fresh, trimmed)

        assert merged[0].max_temperature == 30
        assert merged[0].icon_reference == "img/12.png"

    def test_offset_alignment(self) -> None:
        """Fresh window starting mid-way keeps the earlier persisted slots."""
        persisted = make_window([10, 11, 12, 13, 14, 15, 16])
        fresh = make_window([12, 13, 14, 15, 16, 17, 18], max_temps=[0] * 7)

        result = merge_with_report(fresh, persisted)

        assert result.start_index == 2
        assert result.window.dates == [10, 11, 12, 13, 14, 15, 16]
        assert result.window[0] == persisted[0]
        assert result.window[1] == persisted[1]
        assert result.window[2].max_temperature == 0

    def test_no_overlap_overwrites_everything(self, persisted: Window) -> None:
        fresh = make_window(list(range(20, 27)), min_temps=[None, 1, 2, 3, 4, 5, 6])

        result = merge_with_report(fresh, persisted)

        assert result.all_override is True
        assert result.start_index == 0
        assert result.window == fresh
        assert result.window[0].min_temperature is None
        assert result.kept_min_slots == []

    def test_empty_persisted_overwritten(self) -> None:
        fresh = make_window(list(range(1, 8)))
        assert merge(fresh, empty_window(icon_root="")) == fresh

    def test_empty_fresh_head_does_not_align_with_empty_slot(self, persisted: Window) -> None:
        trimmed = trim(persisted, 15)
        fresh = empty_window(icon_root=ROOT)

        result = merge_with_report(fresh, trimmed)

        assert result.all_override is True
        assert result.window.filled == 0

    def test_takes_fresh_icon_root(self, persisted: Window) -> None:
        fresh = make_window(list(range(10, 17)), icon_root="https://example.com/")
        assert merge(fresh, persisted).icon_root == "https://example.com/"

    def test_does_not_modify_inputs(self, persisted: Window) -> None:
        fresh = make_window(list(range(12, 19)), max_temps=[1] * 7)
        before = (persisted.days, fresh.days)
        merge(fresh, persisted)
        assert (persisted.days, fresh.days) == before

    def test_preserves_length(self, persisted: Window) -> None:
        fresh = make_window([14, 15, 16])
        assert len(merge(fresh, persisted).days) == 7

    def test_mismatched_length_rejected(self, persisted: Window) -> None:
        fresh = make_window([12, 13, 14], size=3)
        with pytest.raises(InvalidWindowLength):
            merge(fresh, persisted)


class TestTrimThenMerge:
    """Daily update sequences."""

    def test_daily_roll_forward(self) -> None:
        """Yesterday's save plus today's page gives a window starting today."""
        saved = make_window(list(range(10, 17)), min_temps=[5, 6, 7, 8, 9, 10, 11])
        page = make_window(list(range(11, 18)), min_temps=[None, 2, 3, 4, 5, 6, 7])

        result = merge(page, trim(saved, 11))

        assert result.dates == [11, 12, 13, 14, 15, 16, 17]
        assert [d.min_temperature for d in result.days] == [6, 2, 3, 4, 5, 6, 7]

    def test_gap_larger_than_window(self) -> None:
        """After two weeks offline nothing old survives."""
        saved = make_window(list(range(1, 8)))
        page = make_window(list(range(15, 22)), min_temps=[None, 1, 2, 3, 4, 5, 6])

        trimmed = trim(saved, 15)
        result = merge(page, trimmed)

        assert trimmed.filled == 0
        assert result == page
