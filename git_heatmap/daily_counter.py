"""
Daily commit counter for the heatmap.

Reduces a collection of commit dates to per-day commit counts for one year.
"""

from collections import Counter
from datetime import date
from typing import Iterable

from git_heatmap.commit_parser import parse_calendar_day


def count_commits(dates: Iterable, year: int) -> dict[date, int]:
    """
    Count commits per calendar day within a single year.

    Args:
        dates: Commit dates (date objects or ISO strings), in any order.
            Repeated days accumulate.
        year: Year to keep; dates from other years are discarded

    Returns:
        Mapping of day -> commit count. Only days with at least one commit
        are present.

    Raises:
        InvalidCommitDateError: If any input is not a valid calendar date
    """
    counts: Counter[date] = Counter()

    for value in dates:
        day = parse_calendar_day(value)
        if day.year == year:
            counts[day] += 1

    return dict(counts)
