"""Tests for pi.table.table -- the ElasticTable model end to end.

Uses the VirtualTerminal to fix the available width and capture output.
"""

from __future__ import annotations

import io

import pytest

from pi.table.columns import ColumnStats
from pi.table.errors import RowShapeMismatch
from pi.table.render import TableStyle
from pi.table.table import ElasticTable
from pi.table.text import visible_width

from .virtual_terminal import VirtualTerminal

BIO = "a very long biography text exceeding the narrow budget"


# ---------------------------------------------------------------------------
# Construction and mutation
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_header_seeds_columns(self) -> None:
        table = ElasticTable(["Name", "Bio"])
        assert table.header == ("Name", "Bio")
        assert table.columns == (
            ColumnStats(index=0, min=4, max=4),
            ColumnStats(index=1, min=3, max=3),
        )
        assert table.rows == []

    def test_default_style(self) -> None:
        assert ElasticTable(["a"]).style == TableStyle()


class TestAddRow:
    def test_rows_kept_in_order(self) -> None:
        table = ElasticTable(["a"])
        table.add_row(["1"])
        table.add_row(["2"])
        assert table.rows == [("1",), ("2",)]

    def test_row_updates_columns(self) -> None:
        table = ElasticTable(["Name", "Bio"])
        table.add_row(["Al", BIO])
        assert table.columns[1] == ColumnStats(index=1, min=3, max=54)

    def test_mismatched_row_rejected(self) -> None:
        table = ElasticTable(["a", "b"])
        with pytest.raises(RowShapeMismatch):
            table.add_row(["only one"])
        assert table.rows == []
        assert table.columns[0].max == 1

    def test_rows_property_is_a_copy(self) -> None:
        table = ElasticTable(["a"])
        table.add_row(["1"])
        table.rows.clear()
        assert len(table.rows) == 1


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRender:
    def test_wide_terminal_renders_natural_widths(self) -> None:
        terminal = VirtualTerminal(columns=80)
        table = ElasticTable(["A", "B"], terminal=terminal)
        table.add_row(["hello", "world"])
        table.render()
        assert terminal.lines == [
            " A     | B     ",
            "-------+-------",
            " hello | world ",
        ]
        assert table.plan().widths == (5, 5)

    def test_narrow_terminal_wraps_widest_column(self) -> None:
        terminal = VirtualTerminal(columns=40)
        table = ElasticTable(["Name", "Bio"], terminal=terminal)
        table.add_row(["Al", BIO])
        plan = table.plan()
        assert plan.kind == "narrowed"
        assert plan.widths == (4, 29)

        table.render()
        assert terminal.lines == [
            " Name | " + "Bio".ljust(29) + " ",
            "-" * 6 + "+" + "-" * 31,
            " Al   | " + "a very long biography text".ljust(29) + " ",
            "      | " + "exceeding the narrow budget".ljust(29) + " ",
        ]
        assert all(visible_width(line) <= 40 for line in terminal.lines)

    def test_tight_terminal_uses_minimum_widths(self) -> None:
        table = ElasticTable(["id", "value"], terminal=VirtualTerminal(columns=8))
        table.add_row(["42", "x"])
        plan = table.plan()
        assert plan.kind == "tight"
        assert plan.widths == (2, 1)
        assert plan.over_budget

    def test_uniform_column_kept_whole_when_tight(self) -> None:
        table = ElasticTable(["code", "note"], terminal=VirtualTerminal(columns=5))
        table.add_row(["ABCD", "x"])
        table.add_row(["EFGH", "some longer note"])
        assert table.plan().widths[0] == 4

    def test_render_to_explicit_sink(self) -> None:
        terminal = VirtualTerminal(columns=80)
        table = ElasticTable(["A"], terminal=terminal)
        table.add_row(["x"])
        out = io.StringIO()
        table.render(out)
        assert out.getvalue() == " A \n---\n x \n"
        assert terminal.output == ""
        assert terminal.flush_count == 0

    def test_render_flushes_terminal_once(self) -> None:
        terminal = VirtualTerminal(columns=80)
        table = ElasticTable(["A"], terminal=terminal)
        table.add_row(["x"])
        table.add_row(["y"])
        table.render()
        assert terminal.flush_count == 1
        assert terminal.lines == [" A ", "---", " x ", " y "]

    def test_explicit_available_width_overrides_terminal(self) -> None:
        table = ElasticTable(["Name", "Bio"], terminal=VirtualTerminal(columns=200))
        table.add_row(["Al", BIO])
        assert table.plan(40).widths == (4, 29)
        assert len(table.render_lines(40)) == 4

    def test_str_renders_for_terminal(self) -> None:
        table = ElasticTable(["A", "B"], terminal=VirtualTerminal(columns=80))
        table.add_row(["hello", "world"])
        assert str(table) == " A     | B     \n-------+-------\n hello | world "

    def test_custom_style(self) -> None:
        style = TableStyle(padding="", border=" ", divider="=", divider_border=" ", divider_padding="")
        table = ElasticTable(["A", "B"], style=style, terminal=VirtualTerminal(columns=80))
        table.add_row(["hello", "world"])
        assert table.render_lines() == ["A     B    ", "===== =====", "hello world"]

    def test_header_only_table(self) -> None:
        table = ElasticTable(["Name", "Age"], terminal=VirtualTerminal(columns=80))
        assert table.render_lines() == [" Name | Age ", "------+-----"]

    def test_empty_cells_render_blank(self) -> None:
        table = ElasticTable(["A", "B"], terminal=VirtualTerminal(columns=80))
        table.add_row(["", "x"])
        assert table.render_lines()[2] == "   | x "


class TestRepeatedRender:
    """Rendering never changes the table."""

    def test_two_renders_are_identical(self) -> None:
        terminal = VirtualTerminal(columns=40)
        table = ElasticTable(["Name", "Bio"], terminal=terminal)
        table.add_row(["Al", BIO])
        table.add_row(["Bea", "short"])

        table.render()
        first = terminal.output
        terminal.clear_buffer()
        table.render()
        assert terminal.output == first

    def test_render_leaves_statistics_unchanged(self) -> None:
        table = ElasticTable(["Name", "Bio"], terminal=VirtualTerminal(columns=30))
        table.add_row(["Al", BIO])
        before = table.columns
        table.render(io.StringIO())
        table.render(io.StringIO())
        assert table.columns == before

    def test_resize_between_renders(self) -> None:
        terminal = VirtualTerminal(columns=40)
        table = ElasticTable(["Name", "Bio"], terminal=terminal)
        table.add_row(["Al", BIO])
        narrow = table.render_lines()
        terminal.columns = 120
        wide = table.render_lines()
        terminal.columns = 40
        assert len(wide) == 3
        assert table.render_lines() == narrow
