import calendar
from datetime import date

import pytest

from availability import AvailabilityPolicy
from month_grid import (
    SelectMode,
    generate_month,
    generate_window,
    is_valid_month_count,
)

OPEN = AvailabilityPolicy()


@pytest.mark.parametrize("year", [2013, 2015, 2024])
@pytest.mark.parametrize("month", range(12))
@pytest.mark.parametrize("monday", [False, True])
def test_generate_month_shape_and_days(year, month, monday):
    grid = generate_month(year, month, OPEN, monday)

    assert len(grid.weeks) == 6
    assert all(len(week) == 7 for week in grid.weeks)

    days = [c.date for c in grid.dated_cells()]
    n_days = calendar.monthrange(year, month + 1)[1]
    assert days == [date(year, month + 1, d) for d in range(1, n_days + 1)]


def test_spillover_cells_are_blank_placeholders():
    grid = generate_month(2013, 9, OPEN)  # Oct 2013 starts on a Tuesday
    first_week = grid.weeks[0]
    assert first_week[0].date is None and first_week[1].date is None
    assert first_week[2].date == date(2013, 10, 1)
    for cell in grid.cells():
        if cell.is_placeholder:
            assert cell.select_mode is SelectMode.NONE
            assert not cell.is_hover
            assert not cell.is_unavailable


def test_dated_cells_sit_in_their_weekday_column():
    grid = generate_month(2013, 8, OPEN, True)
    for week in grid.weeks:
        for col, cell in enumerate(week):
            if cell.date is not None:
                assert cell.date.weekday() == col


def test_unavailable_stamped_at_creation():
    policy = AvailabilityPolicy.from_strings("01/10/2024", "01/20/2024")
    grid = generate_month(2024, 0, policy)
    flags = {c.date.day: c.is_unavailable for c in grid.dated_cells()}
    assert flags[10] and flags[20] and flags[1] and flags[31]
    assert not any(flags[d] for d in range(11, 20))


def test_generate_window_example_months():
    window = generate_window(2013, 8, 2, 2, OPEN, True)
    assert window.labels == ["Jul 2013", "Aug 2013", "Sep 2013", "Oct 2013", "Nov 2013"]
    assert [g.label for g in window] == window.labels
    for grid in window:
        first_dated = next(grid.dated_cells())
        assert grid.weeks[0].index(first_dated) == first_dated.date.weekday()


def test_generate_window_crosses_year_boundaries():
    window = generate_window(2014, 0, 2, 1, OPEN)
    assert window.labels == ["Nov 2013", "Dec 2013", "Jan 2014", "Feb 2014"]

    window = generate_window(2013, 10, None, 3, OPEN)
    assert window.labels == ["Nov 2013", "Dec 2013", "Jan 2014", "Feb 2014"]


@pytest.mark.parametrize("bad", [0, 7, -1, 12, "2", 2.0, True, None])
def test_out_of_range_counts_disable_that_side(bad):
    window = generate_window(2013, 8, bad, 1, OPEN)
    assert window.labels == ["Sep 2013", "Oct 2013"]

    window = generate_window(2013, 8, 1, bad, OPEN)
    assert window.labels == ["Aug 2013", "Sep 2013"]


def test_is_valid_month_count():
    assert all(is_valid_month_count(n) for n in range(1, 7))
    assert not is_valid_month_count(0)
    assert not is_valid_month_count(7)
    assert not is_valid_month_count(True)


def test_window_index_lookups():
    window = generate_window(2013, 8, 1, 1, OPEN)
    d = date(2013, 9, 18)

    assert window.locate(d) == (1, 2, 3)
    assert window.cell_for(d).date == d
    assert d in [c.date for c in window.week_for(d)]
    assert window.month_for(d).label == "Sep 2013"
    assert window.cell_for(date(2013, 12, 1)) is None
    assert window.week_for(date(2013, 12, 1)) is None
    assert window.month_for(date(2013, 12, 1)) is None


def test_middle_date_is_inside_month():
    for month in range(12):
        grid = generate_month(2013, month, OPEN, True)
        assert grid.middle_date().month == month + 1
