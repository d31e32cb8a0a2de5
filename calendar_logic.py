"""Pure calendar calculations — no UI dependencies.

Months are 0-based here (January = 0) to match the picker options.
"""

from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Sequence, TypeVar

T = TypeVar("T")

MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

_WEEKDAY_LABELS = ["Mo", "Tu", "We", "Th", "Fr", "Sa"]

DAYS_IN_WEEK = 7
GRID_DAYS = 42  # 6 rows so the calendar height stays constant


def first_grid_date(year: int, month: int, week_starts_monday: bool) -> date:
    """Return the date shown in the top-left cell of the month grid.

    Walks back from the 1st to the most recent week-start weekday.
    If the 1st already is that weekday it is returned unchanged.
    """
    first = date(year, month + 1, 1)
    if week_starts_monday:
        offset = first.weekday()  # Monday == 0
    else:
        offset = (first.weekday() + 1) % 7
    return first - timedelta(days=offset)


def grid_fits(year: int, month: int, week_starts_monday: bool = False) -> bool:
    """Return True if every day of the 42-day grid is a representable date."""
    if not MINYEAR <= year <= MAXYEAR:
        return False
    try:
        start = first_grid_date(year, month, week_starts_monday)
        start + timedelta(days=GRID_DAYS - 1)
    except OverflowError:
        return False
    return True


def chunk(items: Sequence[T], size: int = DAYS_IN_WEEK) -> list[list[T]]:
    """Split *items* into consecutive lists of *size*, preserving order."""
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


def roll_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return (year, month) for *delta* months away; works for any delta."""
    return divmod(year * 12 + month + delta, 12)


def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    return roll_month(year, month, -1)


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    return roll_month(year, month, 1)


def month_label(year: int, month: int) -> str:
    return f"{MONTH_ABBR[month]} {year}"


def weekday_labels(use_monday: bool) -> list[str]:
    """Return the grid header labels in display order."""
    if use_monday:
        return _WEEKDAY_LABELS + ["Su"]
    return ["Su"] + _WEEKDAY_LABELS
