"""The picker engine: the operations the UI shell calls."""

from __future__ import annotations

import logging
from datetime import date

from calendar_logic import weekday_labels
from highlight import HighlightPainter
from month_grid import DayCell, MonthWindow, generate_window
from navigator import WindowNavigator
from picker_config import PickerConfig
from range_classifier import RangeClassifier
from selection import RangeSelection, SelectionPhase, SelectionState, SelectionStateMachine

_LOGGER = logging.getLogger(__name__)


class RangePicker:
    """One independent picker: its window, selection and open/closed flag."""

    @classmethod
    def from_settings(cls, settings: dict) -> "RangePicker":
        """Build a picker from raw stored settings (see settings.load_settings)."""
        return cls(PickerConfig.from_options(settings))

    def __init__(self, config: PickerConfig | None = None) -> None:
        self.config = config if config is not None else PickerConfig.from_options()
        cfg = self.config

        self.policy = cfg.availability()
        self.classifier = RangeClassifier(cfg.weekly_select_range, cfg.monthly_select_range)
        self.window: MonthWindow = generate_window(
            cfg.starting_year, cfg.starting_month,
            cfg.backward_months, cfg.forward_months,
            self.policy, cfg.use_monday,
        )
        self.day_labels = weekday_labels(cfg.use_monday)

        self.painter = HighlightPainter(self.window, self.classifier)
        self.selection = SelectionStateMachine(self.painter, SelectionState())
        self.navigator = WindowNavigator(self.window, self.policy, self.painter,
                                         cfg.use_monday)
        self.is_open = False

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------
    @property
    def month_labels(self) -> list[str]:
        return self.window.labels

    @property
    def draft(self) -> SelectionState:
        return self.selection.state

    @property
    def phase(self) -> SelectionPhase:
        return self.selection.phase

    @property
    def committed(self) -> RangeSelection:
        return self.selection.state.committed

    def committed_dates(self) -> tuple[date | None, date | None]:
        return self.committed.dates

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------
    def on_day_hover_enter(self, cell: DayCell) -> None:
        self.painter.hover_enter(cell, self.draft)

    def on_day_hover_leave(self, cell: DayCell) -> None:
        self.painter.hover_leave(cell, self.draft)

    def on_day_click(self, cell: DayCell) -> bool:
        changed = self.selection.click(cell)
        if changed:
            _LOGGER.debug("Selection %s: %s", self.phase.value, self.draft.dates)
        return changed

    # ------------------------------------------------------------------
    # Buttons
    # ------------------------------------------------------------------
    def on_apply(self) -> RangeSelection:
        committed = self.selection.apply()
        self.is_open = False
        _LOGGER.info("Applied selection %s", committed.dates)
        return committed

    def on_cancel(self) -> RangeSelection:
        committed = self.selection.cancel()
        self.is_open = False
        return committed

    def on_toggle_open(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def on_next_month(self) -> None:
        self.navigator.advance(1, self.draft)

    def on_previous_month(self) -> None:
        self.navigator.advance(-1, self.draft)
