"""
Terminal rendering for the commit heatmap.

Paints a RenderGrid with rich: a month header, then one line per weekday
with a two-character coloured cell per week.
"""

from rich.console import Console
from rich.text import Text

from git_heatmap.grid_assembler import Cell, RenderGrid
from git_heatmap.intensity import IntensityBucket

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
WEEKDAY_LABEL_WIDTH = 4
CELL = "  "
MONTH_SEPARATOR = "|"
WEEK_GAP = " "

BUCKET_STYLES = {
    IntensityBucket.ZERO: "on bright_black",
    IntensityBucket.LOW: "on bright_green",
    IntensityBucket.MEDIUM: "on green",
    IntensityBucket.HIGH: "on rgb(0,255,0)",
    IntensityBucket.VERY_HIGH: "on white",
}


def _gap(grid: RenderGrid, week_index: int) -> str:
    """Character drawn after a week column (empty after the last one)."""
    if week_index >= len(grid.separators):
        return ""
    return MONTH_SEPARATOR if grid.separators[week_index] else WEEK_GAP


def format_month_header(grid: RenderGrid) -> str:
    """
    Build the month label line.

    Each week gets a two-character slot holding its month number (left
    aligned) or blanks, followed by the same separator the cell rows use.
    """
    parts = [" " * (WEEKDAY_LABEL_WIDTH + 1)]
    for i, label in enumerate(grid.labels):
        parts.append(f"{label:<2}" if label is not None else CELL)
        parts.append(_gap(grid, i))
    return "".join(parts)


def format_weekday_row(grid: RenderGrid, weekday: int) -> Text:
    """Build the cell line for one weekday (0=Sunday)."""
    row = Text(f"{WEEKDAY_LABELS[weekday]:<{WEEKDAY_LABEL_WIDTH}}")
    cells: tuple[Cell, ...] = grid.row(weekday)

    for i, cell in enumerate(cells):
        if cell is None:
            row.append(CELL)
        else:
            row.append(CELL, style=BUCKET_STYLES[cell.bucket])
        row.append(_gap(grid, i))

    return row


def format_summary(grid: RenderGrid) -> str:
    total = grid.total_commits
    commit_word = "commit" if total == 1 else "commits"
    return f"{total} {commit_word} in {grid.year}"


def render_heatmap(console: Console, grid: RenderGrid) -> None:
    """
    Render the heatmap to a console.

    Args:
        console: Rich console for output
        grid: Assembled heatmap from build_heatmap()
    """
    console.print(format_month_header(grid), soft_wrap=True, highlight=False)

    for weekday in range(len(WEEKDAY_LABELS)):
        console.print(format_weekday_row(grid, weekday), soft_wrap=True)
        # Gap between weekday rows
        console.print()

    console.print(format_summary(grid), highlight=False)
