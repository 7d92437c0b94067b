"""Row rendering: wrap cells to planned widths and lay them out side by side."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pi.table.errors import StyleError
from pi.table.text import pad_to_width, visible_width, wrap_text


@dataclass(frozen=True)
class TableStyle:
    """Glyphs used to draw a table.

    The divider line is drawn with ``divider_border`` and ``divider_padding``
    in place of ``border`` and ``padding``, so each pair must have the same
    display width for the divider to line up with the rows.
    """

    padding: str = " "
    border: str = "|"
    divider: str = "-"
    divider_border: str = "+"
    divider_padding: str = "-"

    def __post_init__(self) -> None:
        if visible_width(self.divider_border) != visible_width(self.border):
            raise StyleError(
                f"divider_border {self.divider_border!r} is not as wide as border {self.border!r}"
            )
        if visible_width(self.divider_padding) != visible_width(self.padding):
            raise StyleError(
                f"divider_padding {self.divider_padding!r} is not as wide as padding {self.padding!r}"
            )

    @classmethod
    def with_glyphs(cls, padding: str = " ", border: str = "|") -> TableStyle:
        """Style for *padding* and *border* with divider glyphs sized to match."""
        return cls(
            padding=padding,
            border=border,
            divider_border="+" * visible_width(border),
            divider_padding="-" * visible_width(padding),
        )

    @property
    def margin(self) -> int:
        """Columns each table column spends on padding and its border."""
        return 2 * visible_width(self.padding) + visible_width(self.border)


def render_row(
    cells: Sequence[str],
    widths: Sequence[int],
    border: str,
    padding: str,
) -> list[str]:
    """Render one logical row as one or more display lines.

    Each cell is wrapped to its column width. The row is as tall as its
    tallest cell; shorter cells are filled with blank fields.
    """
    wrapped = [wrap_text(cell, width) for cell, width in zip(cells, widths)]
    height = max((len(lines) for lines in wrapped), default=1)

    out: list[str] = []
    for sub in range(height):
        fields = [
            padding + pad_to_width(lines[sub] if sub < len(lines) else "", width) + padding
            for lines, width in zip(wrapped, widths)
        ]
        out.append(border.join(fields))
    return out


def render_divider(widths: Sequence[int], style: TableStyle) -> str:
    """Render the line separating the header from the body."""
    cells = [_repeat_to_width(style.divider, width) for width in widths]
    return render_row(cells, widths, style.divider_border, style.divider_padding)[0]


def _repeat_to_width(glyph: str, width: int) -> str:
    glyph_width = visible_width(glyph)
    if glyph_width <= 0:
        return " " * width
    return glyph * (width // glyph_width)
