"""Validated picker options. Bad values degrade to defaults, never raise."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from availability import AvailabilityPolicy, parse_bound
from calendar_logic import grid_fits, roll_month
from month_grid import is_valid_month_count

_LOGGER = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _positive_int(name: str, value: Any) -> int | None:
    if value is None:
        return None
    if _is_int(value) and value > 0:
        return value
    _LOGGER.debug("Disabling %s: %r is not a positive integer", name, value)
    return None


def _month_count(name: str, value: Any) -> int:
    if value is None:
        return 0
    if is_valid_month_count(value):
        return value
    _LOGGER.debug("Ignoring %s=%r: must be between 1 and 6", name, value)
    return 0


def _window_fits(year: int, month: int, backward: int, forward: int,
                 use_monday: bool) -> bool:
    """True if the oldest and newest grid of the window fit in the date range."""
    return all(
        grid_fits(*roll_month(year, month, delta), use_monday)
        for delta in (-backward, forward)
    )


@dataclass(frozen=True)
class PickerConfig:
    starting_month: int
    starting_year: int
    backward_months: int = 0
    forward_months: int = 0
    use_monday: bool = False
    min_select_date: date | None = None
    max_select_date: date | None = None
    weekly_select_range: int | None = None
    monthly_select_range: int | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None,
                     today: date | None = None) -> "PickerConfig":
        """Normalize raw option values (e.g. loaded settings)."""
        opts = dict(options or {})
        if today is None:
            today = date.today()

        month = opts.get("starting_month")
        if not (_is_int(month) and 0 <= month <= 11):
            if month is not None:
                _LOGGER.debug("starting_month=%r invalid; using current month", month)
            month = today.month - 1

        backward = _month_count("backward_months", opts.get("backward_months"))
        forward = _month_count("forward_months", opts.get("forward_months"))
        use_monday = opts.get("use_monday") is True

        year = opts.get("starting_year")
        if not (_is_int(year) and _window_fits(year, month, backward, forward, use_monday)):
            if year is not None:
                _LOGGER.debug("starting_year=%r invalid; using current year", year)
            year = today.year

        return cls(
            starting_month=month,
            starting_year=year,
            backward_months=backward,
            forward_months=forward,
            use_monday=use_monday,
            min_select_date=parse_bound(opts.get("min_select_date")),
            max_select_date=parse_bound(opts.get("max_select_date")),
            weekly_select_range=_positive_int(
                "weekly_select_range", opts.get("weekly_select_range")),
            monthly_select_range=_positive_int(
                "monthly_select_range", opts.get("monthly_select_range")),
        )

    def availability(self) -> AvailabilityPolicy:
        return AvailabilityPolicy(self.min_select_date, self.max_select_date)
