"""Column width planning.

Turns per-column (min, max) content widths and a width budget into a concrete
width for every column. When the natural widths do not fit, the widest
columns are narrowed first by letting their content wrap onto more lines.

Planning is a pure function of its inputs: the column statistics are never
modified, so planning the same table twice always gives the same result.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from pi.table.columns import ColumnStats

logger = logging.getLogger(__name__)

FitKind = Literal["tight", "exact", "narrowed"]


@dataclass(frozen=True)
class WidthPlan:
    """Result of :func:`plan_widths`, indexed like the header.

    ``heights`` is the number of lines the widest cell of each column needs
    at the planned width when broken at arbitrary points; word wrapping can
    need more. ``stalled`` is set when narrowing ran out of moves while still
    over budget.
    """

    widths: tuple[int, ...]
    heights: tuple[int, ...]
    kind: FitKind
    budget: int
    stalled: bool = False

    @property
    def total(self) -> int:
        return sum(self.widths)

    @property
    def over_budget(self) -> bool:
        return self.total > self.budget


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def plan_widths(stats: Sequence[ColumnStats], budget: int) -> WidthPlan:
    """Plan a display width for every column so the table fits *budget*.

    *budget* is the space left for content once padding and borders have
    been subtracted. Three outcomes are possible:

    * ``tight``: even the minimum widths do not fit; every column gets its
      minimum width and the table overflows.
    * ``exact``: the natural widths fit; nothing wraps.
    * ``narrowed``: columns were narrowed widest-first, then the remaining
      slack (positive or negative) was shared in proportion to width.

    Every column is at least one wide, so empty columns are planned as width
    one. Every width lies within ``[max(min, 1), max(max, 1)]``.
    """
    if not stats:
        return WidthPlan(widths=(), heights=(), kind="exact", budget=budget)

    if budget <= 0:
        logger.warning("Width budget is %d; columns fall back to their minimum widths", budget)

    stats = [ColumnStats(index=s.index, min=max(s.min, 1), max=max(s.max, 1)) for s in stats]
    min_total = sum(s.min for s in stats)
    max_total = sum(s.max for s in stats)

    if min_total >= budget:
        logger.debug("Tight fit: minimum widths %d exceed budget %d", min_total, budget)
        return _plan(stats, [s.min for s in stats], "tight", budget)

    if max_total <= budget:
        logger.debug("Exact fit: natural widths %d within budget %d", max_total, budget)
        return _plan(stats, [s.max for s in stats], "exact", budget)

    order = sorted(stats, key=lambda s: (-s.max, s.index))
    widths = [s.max for s in order]
    heights = [1] * len(order)
    total = _narrow(order, widths, heights, budget, max_total)

    slack = budget - total
    planned = [0] * len(stats)
    for s, width in zip(order, widths):
        width += slack * width // total
        planned[s.index] = min(max(width, s.min), s.max)

    logger.debug(
        "Narrowed fit: %d after narrowing, %d after sharing slack, budget %d",
        total,
        sum(planned),
        budget,
    )
    return _plan(stats, planned, "narrowed", budget, stalled=total > budget)


def _narrow(
    order: Sequence[ColumnStats],
    widths: list[int],
    heights: list[int],
    budget: int,
    max_total: int,
) -> int:
    """Narrow columns in *order* until *budget* is met or nothing can move.

    A column may only be narrowed while it stays at least as wide as the next
    column in *order* and no narrower than its own minimum. After every
    change the scan restarts from the widest column. Every change shrinks
    the total by at least one, so at most *max_total* changes are made.

    Updates *widths* and *heights* in place and returns the new total.
    """
    total = max_total
    for _ in range(max_total):
        if total <= budget:
            break
        for pos in range(len(order) - 1):
            step = _next_step(order[pos], widths[pos], heights[pos])
            if step is None:
                continue
            candidate, height = step
            if candidate >= widths[pos + 1]:
                total -= widths[pos] - candidate
                widths[pos], heights[pos] = candidate, height
                break
        else:
            logger.debug("Narrowing stalled at %d over budget %d", total, budget)
            break
    return total


def _next_step(column: ColumnStats, width: int, height: int) -> tuple[int, int] | None:
    """Smallest extra wrap height that makes *column* strictly narrower."""
    while height < column.max:
        height += 1
        candidate = _ceil_div(column.max, height)
        if candidate < column.min:
            return None
        if candidate < width:
            return candidate, height
    return None


def _plan(
    stats: Sequence[ColumnStats],
    widths: Sequence[int],
    kind: FitKind,
    budget: int,
    stalled: bool = False,
) -> WidthPlan:
    heights = tuple(_ceil_div(s.max, w) for s, w in zip(stats, widths))
    return WidthPlan(
        widths=tuple(widths), heights=heights, kind=kind, budget=budget, stalled=stalled
    )
