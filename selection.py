"""Three-phase selection state machine driven by day clicks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from highlight import HighlightPainter
from month_grid import DayCell, SelectMode

_LOGGER = logging.getLogger(__name__)


class SelectionPhase(Enum):
    NONE = "none-selected"
    START = "start-selected"
    BOTH = "both-selected"


@dataclass
class RangeSelection:
    anchor: DayCell | None = None
    end: DayCell | None = None

    @property
    def dates(self):
        return (
            self.anchor.date if self.anchor else None,
            self.end.date if self.end else None,
        )


@dataclass
class SelectionState(RangeSelection):
    """The draft (anchor/end) plus the last applied snapshot."""

    committed: RangeSelection = field(default_factory=RangeSelection)

    @property
    def phase(self) -> SelectionPhase:
        if self.anchor is None:
            return SelectionPhase.NONE
        if self.end is None:
            return SelectionPhase.START
        return SelectionPhase.BOTH


class SelectionStateMachine:
    def __init__(self, painter: HighlightPainter,
                 state: SelectionState | None = None) -> None:
        self.painter = painter
        self.state = state if state is not None else SelectionState()

    @property
    def phase(self) -> SelectionPhase:
        return self.state.phase

    def click(self, cell: DayCell) -> bool:
        """Handle a day click; returns False when the click was ignored."""
        if cell.is_placeholder or cell.is_unavailable:
            _LOGGER.debug("Ignoring click on unselectable cell %r", cell.date)
            return False

        state = self.state
        phase = state.phase

        if phase is SelectionPhase.NONE:
            self._start(cell)
            return True

        if phase is SelectionPhase.START:
            anchor = state.anchor
            if cell.date < anchor.date:
                state.end = anchor
                state.anchor = cell
            elif cell.date > anchor.date:
                state.end = cell
            else:
                return False
            self.painter.repaint(state)
            return True

        # BOTH: start over from this cell
        self.painter.clear()
        state.end = None
        self._start(cell)
        return True

    def _start(self, cell: DayCell) -> None:
        self.state.anchor = cell
        cell.select_mode = SelectMode.DAILY

    def apply(self) -> RangeSelection:
        state = self.state
        state.committed = RangeSelection(state.anchor, state.end)
        return state.committed

    def cancel(self) -> RangeSelection:
        """Drop the draft and bring back the last applied selection."""
        state = self.state
        self.painter.clear()
        state.anchor = state.committed.anchor
        state.end = state.committed.end
        self.painter.paint(state)
        return state.committed
