"""Selectable-date bounds for the picker."""

from __future__ import annotations

import logging
import re
from datetime import date

_LOGGER = logging.getLogger(__name__)

# MM/DD/YYYY or MM-DD-YYYY
_BOUND_RE = re.compile(r"^\s*(\d{1,2})[/-](\d{1,2})[/-](\d{4})\s*$")


def parse_bound(value: str | date | None) -> date | None:
    """Parse a min/max bound; anything unusable means "no bound"."""
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        _LOGGER.warning("Ignoring non-string date bound %r", value)
        return None
    m = _BOUND_RE.match(value)
    if m is None:
        _LOGGER.warning("Ignoring malformed date bound %r", value)
        return None
    month, day, year = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError:
        _LOGGER.warning("Ignoring out-of-range date bound %r", value)
        return None


class AvailabilityPolicy:
    """Classifies dates as selectable or not. Boundary dates are unavailable."""

    __slots__ = ("min_date", "max_date")

    def __init__(self, min_date: date | None = None,
                 max_date: date | None = None) -> None:
        self.min_date = min_date
        self.max_date = max_date

    @classmethod
    def from_strings(cls, min_select: str | date | None,
                     max_select: str | date | None) -> "AvailabilityPolicy":
        return cls(parse_bound(min_select), parse_bound(max_select))

    def is_unavailable(self, d: date) -> bool:
        if self.min_date is not None and d <= self.min_date:
            return True
        if self.max_date is not None and d >= self.max_date:
            return True
        return False
