"""Decide whether a candidate date snaps to daily, weekly or monthly mode."""

from __future__ import annotations

from datetime import date, timedelta

from month_grid import SelectMode


def in_select_range(anchor: date, candidate: date,
                    select_range: int | None, compare_range: int | None,
                    unavailable: bool = False) -> bool:
    """Return True if *candidate* falls in *select_range*'s bucket.

    With a larger *compare_range* the bucket is only the band strictly
    between the two cutoffs on either side of the anchor; past the larger
    cutoff belongs to the other bucket.
    """
    if not select_range or unavailable:
        return False

    forward = anchor + timedelta(days=select_range)
    backward = anchor - timedelta(days=select_range)

    if compare_range and compare_range > select_range:
        compare_forward = anchor + timedelta(days=compare_range)
        compare_backward = anchor - timedelta(days=compare_range)
        return (forward < candidate < compare_forward
                or compare_backward < candidate < backward)

    return candidate > forward or candidate < backward


class RangeClassifier:
    """Thresholds are day counts; ``None`` disables that mode."""

    __slots__ = ("weekly_range", "monthly_range")

    def __init__(self, weekly_range: int | None = None,
                 monthly_range: int | None = None) -> None:
        self.weekly_range = weekly_range
        self.monthly_range = monthly_range

    @property
    def enabled(self) -> bool:
        return bool(self.weekly_range or self.monthly_range)

    def is_weekly(self, anchor: date, candidate: date, unavailable: bool = False) -> bool:
        return in_select_range(anchor, candidate, self.weekly_range,
                               self.monthly_range, unavailable)

    def is_monthly(self, anchor: date, candidate: date, unavailable: bool = False) -> bool:
        return in_select_range(anchor, candidate, self.monthly_range,
                               self.weekly_range, unavailable)

    def classify(self, anchor: date, candidate: date,
                 unavailable: bool = False) -> SelectMode:
        """Weekly wins over monthly; daily when neither fires."""
        if not self.enabled:
            return SelectMode.DAILY
        if self.is_weekly(anchor, candidate, unavailable):
            return SelectMode.WEEKLY
        if self.is_monthly(anchor, candidate, unavailable):
            return SelectMode.MONTHLY
        return SelectMode.DAILY
