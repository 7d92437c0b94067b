"""Exceptions raised by pi-table."""

from __future__ import annotations


class TableError(Exception):
    """Base class for pi-table errors."""


class RowShapeMismatch(TableError, ValueError):
    """A row does not have one cell per header column."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Row has {actual} cells, expected {expected}")
        self.expected = expected
        self.actual = actual


class ConfigError(TableError, ValueError):
    """An environment override could not be parsed."""


class StyleError(TableError, ValueError):
    """Divider glyphs would not line up with the row glyphs they replace."""
