"""Tests for pi.table.columns -- per-column width statistics."""

from __future__ import annotations

import pytest

from pi.table.columns import ColumnStats, ColumnTracker
from pi.table.errors import RowShapeMismatch, TableError


class TestSeeding:
    def test_header_seeds_min_and_max(self) -> None:
        tracker = ColumnTracker(["Name", "Bio"])
        assert tracker.snapshot() == (
            ColumnStats(index=0, min=4, max=4),
            ColumnStats(index=1, min=3, max=3),
        )

    def test_len_is_column_count(self) -> None:
        assert len(ColumnTracker(["a", "b", "c"])) == 3

    def test_header_width_uses_display_width(self) -> None:
        tracker = ColumnTracker(["世界"])
        assert tracker.snapshot()[0].max == 4


class TestObserve:
    def test_row_widens_range(self) -> None:
        tracker = ColumnTracker(["Name", "Bio"])
        tracker.observe_row(["Al", "biography"])
        assert tracker.snapshot() == (
            ColumnStats(index=0, min=2, max=4),
            ColumnStats(index=1, min=3, max=9),
        )

    def test_range_never_shrinks(self) -> None:
        tracker = ColumnTracker(["Name"])
        tracker.observe(0, "")
        tracker.observe(0, "a much longer value")
        tracker.observe(0, "mid")
        assert tracker.snapshot()[0] == ColumnStats(index=0, min=0, max=19)

    def test_multiline_cell_uses_widest_line(self) -> None:
        tracker = ColumnTracker(["X"])
        tracker.observe(0, "ab\nabcdef")
        assert tracker.snapshot()[0].max == 6

    def test_totals(self) -> None:
        tracker = ColumnTracker(["Name", "Bio"])
        tracker.observe_row(["Al", "biography"])
        assert tracker.min_total == 5
        assert tracker.max_total == 13


class TestRowShape:
    def test_short_row_rejected(self) -> None:
        tracker = ColumnTracker(["a", "b"])
        with pytest.raises(RowShapeMismatch, match="Row has 1 cells, expected 2"):
            tracker.observe_row(["only"])

    def test_long_row_rejected_without_recording(self) -> None:
        tracker = ColumnTracker(["a", "b"])
        before = tracker.snapshot()
        with pytest.raises(RowShapeMismatch) as excinfo:
            tracker.observe_row(["xxxxxx", "yyyyyy", "zzzzzz"])
        assert excinfo.value.expected == 2
        assert excinfo.value.actual == 3
        assert tracker.snapshot() == before

    def test_mismatch_is_a_table_error_and_value_error(self) -> None:
        tracker = ColumnTracker(["a"])
        with pytest.raises(TableError):
            tracker.observe_row([])
        with pytest.raises(ValueError):
            tracker.observe_row([])
