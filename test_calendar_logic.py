from datetime import date, timedelta

import pytest

from calendar_logic import (
    chunk,
    first_grid_date,
    grid_fits,
    month_label,
    next_month,
    prev_month,
    roll_month,
    weekday_labels,
)

ALL_MONTHS = [(y, m) for y in (1999, 2000, 2013, 2024, 2100) for m in range(12)]


@pytest.mark.parametrize("year,month", ALL_MONTHS)
def test_first_grid_date_lands_on_week_start(year, month):
    sunday = first_grid_date(year, month, False)
    monday = first_grid_date(year, month, True)
    first = date(year, month + 1, 1)

    assert sunday.weekday() == 6
    assert monday.weekday() == 0
    assert timedelta(0) <= first - sunday <= timedelta(days=6)
    assert timedelta(0) <= first - monday <= timedelta(days=6)


def test_first_grid_date_no_walk_back_when_first_is_week_start():
    # 1 Sep 2013 is a Sunday, 1 Jul 2013 a Monday
    assert first_grid_date(2013, 8, False) == date(2013, 9, 1)
    assert first_grid_date(2013, 8, True) == date(2013, 8, 26)
    assert first_grid_date(2013, 6, True) == date(2013, 7, 1)


def test_chunk_preserves_order():
    weeks = chunk(list(range(42)), 7)
    assert len(weeks) == 6
    assert all(len(w) == 7 for w in weeks)
    assert [d for w in weeks for d in w] == list(range(42))
    assert weeks[2] == [14, 15, 16, 17, 18, 19, 20]


@pytest.mark.parametrize("start,delta,expected", [
    ((2013, 8), 1, (2013, 9)),
    ((2013, 11), 1, (2014, 0)),
    ((2013, 0), -1, (2012, 11)),
    ((2013, 5), 0, (2013, 5)),
    ((2013, 5), 25, (2015, 6)),
    ((2013, 5), -30, (2010, 11)),
    ((2013, 0), -12, (2012, 0)),
])
def test_roll_month(start, delta, expected):
    assert roll_month(*start, delta) == expected


def test_prev_and_next_month_wrap_year():
    assert next_month(2013, 11) == (2014, 0)
    assert prev_month(2014, 0) == (2013, 11)


def test_labels():
    assert month_label(2013, 8) == "Sep 2013"
    assert weekday_labels(True) == ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
    assert weekday_labels(False) == ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]


def test_grid_fits_at_the_edges_of_the_date_range():
    # 1 Jan 0001 is a Monday, so only a Sunday-start grid spills before it
    assert grid_fits(1, 0, True)
    assert not grid_fits(1, 0, False)
    assert grid_fits(1, 1, False)
    assert grid_fits(9999, 10)
    assert not grid_fits(9999, 11)
    assert not grid_fits(0, 11)
    assert not grid_fits(10000, 0)
