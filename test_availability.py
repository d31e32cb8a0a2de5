from datetime import date

import pytest

from availability import AvailabilityPolicy, parse_bound


@pytest.mark.parametrize("raw", ["01/15/2024", "01-15-2024", "1/15/2024", " 01/15/2024 "])
def test_parse_bound_formats(raw):
    assert parse_bound(raw) == date(2024, 1, 15)


@pytest.mark.parametrize("raw", [None, "", "2024-01-15", "13/01/2024", "02/30/2024", "soon", 20240115])
def test_parse_bound_unusable_means_unbounded(raw):
    assert parse_bound(raw) is None


def test_parse_bound_accepts_date():
    assert parse_bound(date(2024, 3, 1)) == date(2024, 3, 1)


def test_boundary_dates_are_unavailable():
    policy = AvailabilityPolicy.from_strings("01/01/2024", "01/31/2024")
    assert policy.is_unavailable(date(2023, 12, 31))
    assert policy.is_unavailable(date(2024, 1, 1))
    assert not policy.is_unavailable(date(2024, 1, 2))
    assert not policy.is_unavailable(date(2024, 1, 30))
    assert policy.is_unavailable(date(2024, 1, 31))
    assert policy.is_unavailable(date(2024, 2, 1))


def test_missing_bounds_are_open():
    policy = AvailabilityPolicy.from_strings(None, "garbage")
    assert not policy.is_unavailable(date(1900, 1, 1))
    assert not policy.is_unavailable(date(2999, 12, 31))
