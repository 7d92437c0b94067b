"""Per-column content width statistics."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pi.table.errors import RowShapeMismatch
from pi.table.text import cell_width


@dataclass(frozen=True)
class ColumnStats:
    """Narrowest and widest content seen in one column."""

    index: int
    min: int
    max: int


class ColumnTracker:
    """Track the min/max display width of every column.

    Seeded from the header; rows only ever widen the recorded range.
    """

    def __init__(self, header: Sequence[str]) -> None:
        widths = [cell_width(text) for text in header]
        self._min = list(widths)
        self._max = list(widths)

    def __len__(self) -> int:
        return len(self._min)

    def observe(self, index: int, text: str) -> None:
        width = cell_width(text)
        if width < self._min[index]:
            self._min[index] = width
        if width > self._max[index]:
            self._max[index] = width

    def observe_row(self, row: Sequence[str]) -> None:
        """Record every cell of *row*, rejecting rows of the wrong length."""
        if len(row) != len(self):
            raise RowShapeMismatch(expected=len(self), actual=len(row))
        for index, text in enumerate(row):
            self.observe(index, text)

    def snapshot(self) -> tuple[ColumnStats, ...]:
        return tuple(
            ColumnStats(index=i, min=lo, max=hi)
            for i, (lo, hi) in enumerate(zip(self._min, self._max))
        )

    @property
    def min_total(self) -> int:
        return sum(self._min)

    @property
    def max_total(self) -> int:
        return sum(self._max)
