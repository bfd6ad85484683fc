"""
Assemble the render-ready heatmap grid.

Combines the week grid, month labels, separators and per-day counts into a
single structure that a renderer can paint without further computation.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Mapping, Optional, Sequence

from git_heatmap.daily_counter import count_commits
from git_heatmap.intensity import DEFAULT_SCALE, IntensityBucket, IntensityScale
from git_heatmap.month_labeler import label_months
from git_heatmap.week_grid import DAYS_PER_WEEK, WeekRow, build_grid


@dataclass(frozen=True)
class RenderCell:
    """An in-year day with its commit count and intensity bucket."""

    day: date
    count: int
    bucket: IntensityBucket


# None marks a blank (padding) cell
Cell = Optional[RenderCell]


@dataclass(frozen=True)
class RenderGrid:
    """
    Heatmap ready for rendering.

    weeks holds one 7-cell column per week (Sunday first); labels has one
    entry per week; separators has one entry per pair of adjacent weeks.
    """

    year: int | None
    weeks: tuple[tuple[Cell, ...], ...]
    labels: tuple[int | None, ...]
    separators: tuple[bool, ...]

    def row(self, weekday: int) -> tuple[Cell, ...]:
        """Cells for one weekday (0=Sunday) across all weeks."""
        if not 0 <= weekday < DAYS_PER_WEEK:
            raise IndexError(f"weekday must be 0-6, got {weekday}")
        return tuple(week[weekday] for week in self.weeks)

    @property
    def total_commits(self) -> int:
        return sum(cell.count for week in self.weeks for cell in week if cell is not None)


def assemble(
    grid: Sequence[WeekRow],
    counts: Mapping[date, int],
    labels: Sequence[int | None],
    separators: Sequence[bool],
    scale: IntensityScale = DEFAULT_SCALE,
) -> RenderGrid:
    """
    Combine grid, counts, labels and separators into a RenderGrid.

    Blank slots stay blank; in-year days become RenderCells classified
    with the given scale (days missing from counts have 0 commits).

    Raises:
        ValueError: If labels/separators do not line up with the grid
    """
    if len(labels) != len(grid):
        raise ValueError(f"expected {len(grid)} labels, got {len(labels)}")
    if len(separators) != max(len(grid) - 1, 0):
        raise ValueError(f"expected {max(len(grid) - 1, 0)} separators, got {len(separators)}")

    weeks = []
    year = None
    for row in grid:
        cells = []
        for slot in row.slots:
            if slot is None:
                cells.append(None)
                continue
            count = counts.get(slot, 0)
            cells.append(RenderCell(day=slot, count=count, bucket=scale.classify(count)))
            year = slot.year
        weeks.append(tuple(cells))

    return RenderGrid(
        year=year,
        weeks=tuple(weeks),
        labels=tuple(labels),
        separators=tuple(separators),
    )


def build_heatmap(
    dates: Iterable, year: int, scale: IntensityScale = DEFAULT_SCALE
) -> RenderGrid:
    """
    Run the full pipeline: count commits, build weeks, label months, assemble.

    Args:
        dates: Commit dates (date objects or ISO strings)
        year: Year to render
        scale: Intensity thresholds

    Returns:
        RenderGrid for the year
    """
    counts = count_commits(dates, year)
    grid = build_grid(year)
    labels, separators = label_months(grid)
    return assemble(grid, counts, labels, separators, scale=scale)
