"""
Month labels and month-boundary separators for the week grid.
"""

from typing import Sequence

from git_heatmap.week_grid import WeekRow


def label_months(grid: Sequence[WeekRow]) -> tuple[list[int | None], list[bool]]:
    """
    Decide where month labels and month separators go.

    A week is labeled with its dominant month the first time that month
    differs from the last label placed, so each month is labeled once, at
    the first week whose first in-year day falls in it.

    A separator sits between weeks i and i+1 when their dominant months
    differ and week i+1 is not all padding.

    Args:
        grid: Week rows from build_grid()

    Returns:
        (labels, separators) where len(labels) == len(grid) and
        len(separators) == max(len(grid) - 1, 0)
    """
    labels: list[int | None] = []
    last_month = 0

    for row in grid:
        month = row.dominant_month
        if not row.is_blank and month != last_month:
            labels.append(month)
            last_month = month
        else:
            labels.append(None)

    separators = [
        current.dominant_month != following.dominant_month
        and not following.is_blank
        for current, following in zip(grid, grid[1:])
    ]

    return labels, separators
