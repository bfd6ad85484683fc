"""
Tests for month labels and separators.
"""

from datetime import date

import pytest

from git_heatmap.month_labeler import label_months
from git_heatmap.week_grid import WeekRow, build_grid


def _row(month):
    """Minimal row whose only in-year day falls in the given month."""
    if month is None:
        return WeekRow(slots=(None,) * 7, dominant_month=None)
    return WeekRow(slots=(date(2021, month, 1),) + (None,) * 6, dominant_month=month)


class TestLabelMonths:
    """Tests for the label_months function."""

    def test_lengths(self):
        """One label per week, one separator per adjacent pair."""
        grid = build_grid(2021)
        labels, separators = label_months(grid)

        assert len(labels) == len(grid)
        assert len(separators) == len(grid) - 1

    def test_empty_grid(self):
        """An empty grid gives no labels or separators."""
        assert label_months([]) == ([], [])

    @pytest.mark.parametrize("year", [2000, 2021, 2022, 2023, 2024])
    def test_each_month_labeled_once_in_order(self, year):
        """Labels are 1 through 12, each once."""
        labels, _ = label_months(build_grid(year))

        assert [label for label in labels if label is not None] == list(range(1, 13))

    @pytest.mark.parametrize("year", [2021, 2023])
    def test_first_label_is_january_on_first_row(self, year):
        """Padding is blank, so the first row is always labeled January."""
        labels, _ = label_months(build_grid(year))
        assert labels[0] == 1

    def test_label_at_first_row_dominated_by_month(self):
        """Feb 1 2021 is a Monday, so the Jan 31 week stays January."""
        grid = build_grid(2021)
        labels, _ = label_months(grid)

        feb_index = labels.index(2)
        assert grid[feb_index].slots[0] == date(2021, 2, 7)
        assert grid[feb_index - 1].dominant_month == 1

    def test_separator_marks_month_changes(self):
        """Separators sit exactly where the dominant month changes."""
        grid = build_grid(2021)
        _, separators = label_months(grid)

        assert sum(separators) == 11
        for i, separated in enumerate(separators):
            changed = grid[i].dominant_month != grid[i + 1].dominant_month
            assert separated == changed

    def test_separator_precedes_each_label(self):
        """Every label after the first follows a separator."""
        labels, separators = label_months(build_grid(2024))

        for i, label in enumerate(labels[1:], start=1):
            if label is not None:
                assert separators[i - 1]

    def test_no_separator_into_blank_row(self):
        """A trailing all-blank row gets neither label nor separator."""
        grid = [_row(1), _row(2), _row(None)]
        labels, separators = label_months(grid)

        assert labels == [1, 2, None]
        assert separators == [True, False]

    def test_leading_blank_row_not_labeled(self):
        """A leading all-blank row gets no label."""
        grid = [_row(None), _row(1), _row(1)]
        labels, separators = label_months(grid)

        assert labels == [None, 1, None]
        assert separators == [True, False]

    def test_month_labeled_even_without_commits(self):
        """Labels depend only on the calendar, not on activity."""
        labels, _ = label_months(build_grid(2021))
        assert 7 in labels
