"""Day-cell grids for single months and the rolling multi-month window."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum

from availability import AvailabilityPolicy
from calendar_logic import (
    GRID_DAYS,
    chunk,
    first_grid_date,
    month_label,
    roll_month,
)

_LOGGER = logging.getLogger(__name__)

MAX_EXTRA_MONTHS = 6
MIN_EXTRA_MONTHS = 1


class SelectMode(str, Enum):
    NONE = ""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(eq=False)
class DayCell:
    """One grid position. ``date`` is None for spillover placeholders.

    Cells compare by identity so the selection can point at a specific cell.
    """

    date: date | None = None
    select_mode: SelectMode = SelectMode.NONE
    is_hover: bool = False
    is_unavailable: bool = False

    @property
    def is_placeholder(self) -> bool:
        return self.date is None

    def reset(self) -> None:
        self.select_mode = SelectMode.NONE
        self.is_hover = False


@dataclass(eq=False)
class MonthGrid:
    year: int
    month: int  # 0-based
    weeks: list[list[DayCell]]

    @property
    def label(self) -> str:
        return month_label(self.year, self.month)

    def cells(self):
        for week in self.weeks:
            yield from week

    def dated_cells(self):
        return (c for c in self.cells() if not c.is_placeholder)

    def middle_date(self) -> date:
        """Last day of the middle week; always inside the month."""
        return self.weeks[2][6].date


def generate_month(year: int, month: int, policy: AvailabilityPolicy,
                   week_starts_monday: bool = False) -> MonthGrid:
    """Return a 6×7 grid for (year, month) with spillover days emptied."""
    start = first_grid_date(year, month, week_starts_monday)
    cells: list[DayCell] = []
    for i in range(GRID_DAYS):
        current = start + timedelta(days=i)
        if current.month == month + 1:
            cells.append(DayCell(
                date=current, is_unavailable=policy.is_unavailable(current),
            ))
        else:
            cells.append(DayCell())
    return MonthGrid(year, month, chunk(cells))


def is_valid_month_count(value) -> bool:
    """Extra months are honoured only as an int in [1, 6]; never clamped."""
    return (isinstance(value, int) and not isinstance(value, bool)
            and MIN_EXTRA_MONTHS <= value <= MAX_EXTRA_MONTHS)


@dataclass(eq=False)
class MonthWindow:
    """The visible months, their labels and a date -> position index."""

    grids: list[MonthGrid] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    _index: dict[date, tuple[int, int, int]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.rebuild_index()

    def __len__(self) -> int:
        return len(self.grids)

    def __iter__(self):
        return iter(self.grids)

    def rebuild_index(self) -> None:
        self._index = {}
        for mi, grid in enumerate(self.grids):
            for wi, week in enumerate(grid.weeks):
                for di, cell in enumerate(week):
                    if not cell.is_placeholder:
                        self._index[cell.date] = (mi, wi, di)

    def locate(self, d: date) -> tuple[int, int, int] | None:
        return self._index.get(d)

    def cell_for(self, d: date) -> DayCell | None:
        pos = self.locate(d)
        if pos is None:
            return None
        mi, wi, di = pos
        return self.grids[mi].weeks[wi][di]

    def week_for(self, d: date) -> list[DayCell] | None:
        pos = self.locate(d)
        if pos is None:
            return None
        return self.grids[pos[0]].weeks[pos[1]]

    def month_for(self, d: date) -> MonthGrid | None:
        pos = self.locate(d)
        if pos is None:
            return None
        return self.grids[pos[0]]

    def cells(self):
        for grid in self.grids:
            yield from grid.cells()

    # ------------------------------------------------------------------
    # In-place sliding (one month in, one month out)
    # ------------------------------------------------------------------
    def push_back(self, grid: MonthGrid) -> MonthGrid:
        """Append *grid* and evict the oldest month; returns the evicted one."""
        evicted = self.grids.pop(0)
        self.labels.pop(0)
        self.grids.append(grid)
        self.labels.append(grid.label)
        self.rebuild_index()
        return evicted

    def push_front(self, grid: MonthGrid) -> MonthGrid:
        """Prepend *grid* and evict the newest month; returns the evicted one."""
        evicted = self.grids.pop()
        self.labels.pop()
        self.grids.insert(0, grid)
        self.labels.insert(0, grid.label)
        self.rebuild_index()
        return evicted


def generate_window(base_year: int, base_month: int,
                    backward_months, forward_months,
                    policy: AvailabilityPolicy,
                    week_starts_monday: bool = False) -> MonthWindow:
    """Build the initial window: backward months, the base, forward months."""
    grids = [generate_month(base_year, base_month, policy, week_starts_monday)]

    if is_valid_month_count(forward_months):
        for delta in range(1, forward_months + 1):
            y, m = roll_month(base_year, base_month, delta)
            grids.append(generate_month(y, m, policy, week_starts_monday))
    elif forward_months is not None:
        _LOGGER.debug("forward_months=%r outside [1, 6]; no forward months", forward_months)

    if is_valid_month_count(backward_months):
        for delta in range(1, backward_months + 1):
            y, m = roll_month(base_year, base_month, -delta)
            grids.insert(0, generate_month(y, m, policy, week_starts_monday))
    elif backward_months is not None:
        _LOGGER.debug("backward_months=%r outside [1, 6]; no backward months", backward_months)

    return MonthWindow(grids, [g.label for g in grids])
