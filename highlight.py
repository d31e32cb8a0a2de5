"""Apply and clear hover / select-mode markers on the visible cells."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Iterable

from month_grid import DayCell, MonthWindow, SelectMode
from range_classifier import RangeClassifier

if TYPE_CHECKING:
    from selection import RangeSelection


def _paint_cells(cells: Iterable[DayCell], *, hover: bool | None = None,
                 mode: SelectMode | None = None) -> None:
    # Placeholders and unavailable days never take week/month fills
    for cell in cells:
        if cell.is_placeholder or cell.is_unavailable:
            continue
        if hover is not None:
            cell.is_hover = hover
        if mode is not None:
            cell.select_mode = mode


class HighlightPainter:
    """Paints a ``MonthWindow`` from the selection and the range classifier."""

    def __init__(self, window: MonthWindow, classifier: RangeClassifier) -> None:
        self.window = window
        self.classifier = classifier

    # ------------------------------------------------------------------
    # Span helpers
    # ------------------------------------------------------------------
    def _span(self, d: date, mode: SelectMode) -> list[DayCell]:
        if mode is SelectMode.WEEKLY:
            return self.window.week_for(d) or []
        if mode is SelectMode.MONTHLY:
            grid = self.window.month_for(d)
            return list(grid.cells()) if grid else []
        cell = self.window.cell_for(d)
        return [cell] if cell else []

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def clear(self) -> None:
        """Reset every cell in the window, not just the last painted span."""
        for cell in self.window.cells():
            cell.reset()

    def paint(self, selection: RangeSelection) -> SelectMode | None:
        """Paint the draft selection; returns the mode used for the range."""
        anchor, end = selection.anchor, selection.end
        if anchor is None:
            return None
        if end is None:
            cell = self.window.cell_for(anchor.date)
            if cell is not None:
                cell.select_mode = SelectMode.DAILY
            return SelectMode.DAILY

        mode = self.classifier.classify(anchor.date, end.date, end.is_unavailable)
        for grid in self.window:
            for cell in grid.dated_cells():
                if anchor.date <= cell.date <= end.date:
                    cell.select_mode = mode

        if mode is not SelectMode.DAILY:
            _paint_cells(self._span(anchor.date, mode), mode=mode)
            _paint_cells(self._span(end.date, mode), mode=mode)
        return mode

    def repaint(self, selection: RangeSelection) -> SelectMode | None:
        self.clear()
        return self.paint(selection)

    # ------------------------------------------------------------------
    # Hover preview
    # ------------------------------------------------------------------
    def hover_enter(self, cell: DayCell, selection: RangeSelection) -> None:
        if cell.is_placeholder:
            cell.is_hover = False
            return
        if selection.anchor is not None and selection.end is not None:
            return
        if selection.anchor is None:
            cell.is_hover = True
            return

        mode = self.classifier.classify(selection.anchor.date, cell.date,
                                        cell.is_unavailable)
        if mode is SelectMode.DAILY:
            if not cell.is_unavailable:
                cell.is_hover = True
            return
        _paint_cells(self._span(cell.date, mode), hover=True)

    def hover_leave(self, cell: DayCell, selection: RangeSelection) -> None:
        if cell.is_placeholder:
            return
        if selection.anchor is not None and selection.end is None:
            mode = self.classifier.classify(selection.anchor.date, cell.date,
                                            cell.is_unavailable)
            if mode is not SelectMode.DAILY:
                _paint_cells(self._span(cell.date, mode), hover=False)
        cell.is_hover = False
