"""
Week grid builder for the heatmap.

Expands a year into Sunday-to-Saturday week rows. The first and last rows
are padded with blank slots so that every row holds exactly 7 days even when
January 1 or December 31 falls mid-week.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

DAYS_PER_WEEK = 7

# A slot is an in-year day, or None for padding outside the year
Slot = Optional[date]


@dataclass(frozen=True)
class WeekRow:
    """One Sunday-through-Saturday week of the grid."""

    slots: tuple[Slot, ...]
    dominant_month: int | None

    @property
    def is_blank(self) -> bool:
        return self.dominant_month is None


def sunday_weekday(day: date) -> int:
    """Weekday index with Sunday=0 ... Saturday=6."""
    return (day.weekday() + 1) % 7


def padded_range(year: int) -> tuple[int, int]:
    """
    Return the padded grid boundaries as day offsets from January 1.

    Args:
        year: Target year

    Returns:
        (start_offset, end_offset): start_offset <= 0 is the Sunday on or
        before January 1, end_offset >= days_in_year - 1 is the Saturday on
        or after December 31
    """
    start = date(year, 1, 1)
    end = date(year, 12, 31)

    start_offset = -sunday_weekday(start)
    end_offset = (end - start).days + (6 - sunday_weekday(end))
    return start_offset, end_offset


def build_grid(year: int) -> tuple[WeekRow, ...]:
    """
    Build the Sunday-aligned week rows covering a whole year.

    Args:
        year: Target year (1-9999)

    Returns:
        Tuple of WeekRow, oldest week first. Every day of the year appears in
        exactly one slot; slots outside the year are None.

    Raises:
        ValueError: If the year is outside the supported date range
    """
    if not date.min.year <= year <= date.max.year:
        raise ValueError(f"Year {year} is outside the supported range 1-9999")

    start = date(year, 1, 1)
    days_in_year = (date(year, 12, 31) - start).days + 1
    start_offset, end_offset = padded_range(year)

    rows = []
    for week_offset in range(start_offset, end_offset + 1, DAYS_PER_WEEK):
        slots = []
        dominant_month = None

        for offset in range(week_offset, week_offset + DAYS_PER_WEEK):
            # Padding days are never materialized so years 1 and 9999 work
            if 0 <= offset < days_in_year:
                day = start + timedelta(days=offset)
                slots.append(day)
                if dominant_month is None:
                    dominant_month = day.month
            else:
                slots.append(None)

        rows.append(WeekRow(slots=tuple(slots), dominant_month=dominant_month))

    return tuple(rows)
