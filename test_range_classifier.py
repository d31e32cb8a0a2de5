from datetime import date

import pytest

from month_grid import SelectMode
from range_classifier import RangeClassifier, in_select_range

ANCHOR = date(2013, 9, 10)


@pytest.mark.parametrize("candidate,expected", [
    (date(2013, 9, 10), SelectMode.DAILY),
    (date(2013, 9, 12), SelectMode.DAILY),
    (date(2013, 9, 13), SelectMode.DAILY),    # exactly on the weekly cutoff
    (date(2013, 9, 14), SelectMode.WEEKLY),
    (date(2013, 9, 15), SelectMode.WEEKLY),
    (date(2013, 9, 19), SelectMode.WEEKLY),
    (date(2013, 9, 20), SelectMode.DAILY),    # exactly on the monthly cutoff
    (date(2013, 9, 21), SelectMode.MONTHLY),
    (date(2013, 12, 1), SelectMode.MONTHLY),
    (date(2013, 9, 5), SelectMode.WEEKLY),
    (date(2013, 8, 30), SelectMode.MONTHLY),
])
def test_weekly_band_then_monthly(candidate, expected):
    classifier = RangeClassifier(weekly_range=3, monthly_range=10)
    assert classifier.classify(ANCHOR, candidate) is expected


def test_no_thresholds_is_always_daily():
    classifier = RangeClassifier()
    assert not classifier.enabled
    assert classifier.classify(ANCHOR, date(2014, 9, 10)) is SelectMode.DAILY


def test_weekly_only():
    classifier = RangeClassifier(weekly_range=3)
    assert classifier.classify(ANCHOR, date(2013, 9, 13)) is SelectMode.DAILY
    assert classifier.classify(ANCHOR, date(2013, 9, 14)) is SelectMode.WEEKLY
    assert classifier.classify(ANCHOR, date(2014, 1, 1)) is SelectMode.WEEKLY
    assert classifier.classify(ANCHOR, date(2013, 9, 6)) is SelectMode.WEEKLY


def test_monthly_only():
    classifier = RangeClassifier(monthly_range=10)
    assert classifier.classify(ANCHOR, date(2013, 9, 19)) is SelectMode.DAILY
    assert classifier.classify(ANCHOR, date(2013, 9, 21)) is SelectMode.MONTHLY


def test_smaller_monthly_threshold_takes_the_band():
    classifier = RangeClassifier(weekly_range=10, monthly_range=3)
    assert classifier.classify(ANCHOR, date(2013, 9, 15)) is SelectMode.MONTHLY
    assert classifier.classify(ANCHOR, date(2013, 9, 25)) is SelectMode.WEEKLY


def test_unavailable_candidate_never_snaps():
    classifier = RangeClassifier(weekly_range=3, monthly_range=10)
    assert classifier.classify(ANCHOR, date(2013, 9, 15), unavailable=True) is SelectMode.DAILY
    assert classifier.classify(ANCHOR, date(2013, 9, 25), unavailable=True) is SelectMode.DAILY


def test_in_select_range_without_range():
    assert not in_select_range(ANCHOR, date(2020, 1, 1), None, 10)
    assert not in_select_range(ANCHOR, date(2020, 1, 1), 0, None)
