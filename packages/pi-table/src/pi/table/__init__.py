"""pi-table: terminal tables whose columns wrap to fit the available width."""

from pi.table.columns import ColumnStats, ColumnTracker
from pi.table.config import Config
from pi.table.errors import ConfigError, RowShapeMismatch, StyleError, TableError
from pi.table.optimizer import FitKind, WidthPlan, plan_widths
from pi.table.render import TableStyle, render_divider, render_row
from pi.table.table import ElasticTable
from pi.table.terminal import ProcessTerminal, Terminal, Writer
from pi.table.text import cell_width, visible_width, wrap_text

__all__ = [
    "ColumnStats",
    "ColumnTracker",
    "Config",
    "ConfigError",
    "ElasticTable",
    "FitKind",
    "ProcessTerminal",
    "RowShapeMismatch",
    "StyleError",
    "TableError",
    "TableStyle",
    "Terminal",
    "WidthPlan",
    "Writer",
    "cell_width",
    "plan_widths",
    "render_divider",
    "render_row",
    "visible_width",
    "wrap_text",
]
