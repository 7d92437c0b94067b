"""Elastic table model: header, rows, and column width statistics."""

from __future__ import annotations

from collections.abc import Sequence

from pi.table.columns import ColumnStats, ColumnTracker
from pi.table.optimizer import WidthPlan, plan_widths
from pi.table.render import TableStyle, render_divider, render_row
from pi.table.terminal import ProcessTerminal, Terminal, Writer


class ElasticTable:
    """A table whose columns shrink by wrapping to fit the terminal width.

    Rows are kept in append order. Rendering plans column widths afresh from
    the recorded statistics each time, so rendering does not change the
    table. Appending rows while another thread renders is not supported.
    """

    def __init__(
        self,
        header: Sequence[str],
        *,
        style: TableStyle | None = None,
        terminal: Terminal | None = None,
    ) -> None:
        self._header = tuple(header)
        self._rows: list[tuple[str, ...]] = []
        self._columns = ColumnTracker(self._header)
        self._style = style or TableStyle()
        self._terminal = terminal

    # -- properties ---------------------------------------------------------

    @property
    def header(self) -> tuple[str, ...]:
        return self._header

    @property
    def rows(self) -> list[tuple[str, ...]]:
        return list(self._rows)

    @property
    def style(self) -> TableStyle:
        return self._style

    @property
    def terminal(self) -> Terminal:
        if self._terminal is None:
            self._terminal = ProcessTerminal()
        return self._terminal

    @property
    def columns(self) -> tuple[ColumnStats, ...]:
        return self._columns.snapshot()

    # -- mutation -----------------------------------------------------------

    def add_row(self, row: Sequence[str]) -> None:
        """Append *row*.

        Raises :class:`~pi.table.errors.RowShapeMismatch` if the row does not
        have exactly one cell per header column; the table is left unchanged.
        """
        cells = tuple(row)
        self._columns.observe_row(cells)
        self._rows.append(cells)

    # -- layout -------------------------------------------------------------

    def plan(self, available: int | None = None) -> WidthPlan:
        """Plan column widths for *available* columns (default: terminal width)."""
        if available is None:
            available = self.terminal.columns
        budget = available - len(self._header) * self._style.margin
        return plan_widths(self._columns.snapshot(), budget)

    def render_lines(self, available: int | None = None) -> list[str]:
        widths = self.plan(available).widths
        style = self._style

        lines = render_row(self._header, widths, style.border, style.padding)
        lines.append(render_divider(widths, style))
        for row in self._rows:
            lines.extend(render_row(row, widths, style.border, style.padding))
        return lines

    def render(self, out: Writer | None = None, available: int | None = None) -> None:
        """Write the formatted table to *out* (default: the terminal).

        The terminal is flushed once the whole table is written; a caller
        supplied *out* is left for the caller to flush.
        """
        sink = out if out is not None else self.terminal
        for line in self.render_lines(available):
            sink.write(line + "\n")
        if out is None:
            self.terminal.flush()

    def __str__(self) -> str:
        return "\n".join(self.render_lines())
