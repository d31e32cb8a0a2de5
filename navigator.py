"""Slide the visible month window one month at a time."""

from __future__ import annotations

import logging

from availability import AvailabilityPolicy
from calendar_logic import grid_fits, next_month, prev_month
from highlight import HighlightPainter
from month_grid import MonthGrid, MonthWindow, generate_month

_LOGGER = logging.getLogger(__name__)


class WindowNavigator:
    def __init__(self, window: MonthWindow, policy: AvailabilityPolicy,
                 painter: HighlightPainter, week_starts_monday: bool = False) -> None:
        self.window = window
        self.policy = policy
        self.painter = painter
        self.week_starts_monday = week_starts_monday

    def _adjacent(self, boundary: MonthGrid, direction: int) -> MonthGrid | None:
        # Middle week's last day sits inside the month whatever the spillover
        anchor = boundary.middle_date()
        step = next_month if direction == 1 else prev_month
        year, month = step(anchor.year, anchor.month - 1)
        if not grid_fits(year, month, self.week_starts_monday):
            return None
        return generate_month(year, month, self.policy, self.week_starts_monday)

    def advance(self, direction: int, selection=None) -> MonthGrid | None:
        """Shift by one month (+1 forward, -1 backward) and repaint.

        Returns the newly generated grid, or None at the edge of the
        representable date range, where the window is left as is.
        """
        if direction not in (1, -1):
            raise ValueError(f"direction must be +1 or -1, got {direction!r}")

        boundary = self.window.grids[-1] if direction == 1 else self.window.grids[0]
        grid = self._adjacent(boundary, direction)
        if grid is None:
            _LOGGER.debug("No month beyond %s; window unchanged", boundary.label)
            return None

        if direction == 1:
            self.window.push_back(grid)
        else:
            self.window.push_front(grid)

        _LOGGER.debug("Window now %s .. %s", self.window.labels[0], self.window.labels[-1])
        if selection is not None:
            self.painter.repaint(selection)
        else:
            self.painter.clear()
        return grid
