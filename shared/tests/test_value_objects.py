"""Tests for the shared stay period value object."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from shared.domain.exceptions import InvalidArgumentError
from shared.domain.value_objects import StayPeriod, align_instant, calendar_day, instant_sort_key


def test_check_in_must_be_before_check_out():
    with pytest.raises(InvalidArgumentError):
        StayPeriod(date(2024, 5, 3), date(2024, 5, 3))
    with pytest.raises(InvalidArgumentError):
        StayPeriod(date(2024, 5, 4), date(2024, 5, 3))


def test_overlapping_periods():
    first = StayPeriod(date(2024, 5, 10), date(2024, 5, 12))

    assert first.overlaps_with(StayPeriod(date(2024, 5, 11), date(2024, 5, 14)))
    assert first.overlaps_with(StayPeriod(date(2024, 5, 9), date(2024, 5, 11)))
    assert first.overlaps_with(StayPeriod(date(2024, 5, 1), date(2024, 5, 30)))
    assert first.overlaps_with(first)


def test_adjacent_periods_do_not_overlap():
    first = StayPeriod(date(2024, 5, 10), date(2024, 5, 12))

    assert not first.overlaps_with(StayPeriod(date(2024, 5, 12), date(2024, 5, 14)))
    assert not first.overlaps_with(StayPeriod(date(2024, 5, 8), date(2024, 5, 10)))


def test_overlap_requires_stay_period():
    with pytest.raises(TypeError):
        StayPeriod(date(2024, 5, 10), date(2024, 5, 12)).overlaps_with((1, 2))


def test_active_on_is_inclusive_on_both_ends():
    period = StayPeriod(date(2024, 5, 10), date(2024, 5, 12))

    assert period.is_active_on(date(2024, 5, 10))
    assert period.is_active_on(date(2024, 5, 11))
    assert period.is_active_on(date(2024, 5, 12))
    assert not period.is_active_on(date(2024, 5, 9))
    assert not period.is_active_on(date(2024, 5, 13))


def test_active_on_ignores_time_of_day():
    period = StayPeriod(datetime(2024, 5, 10, 15, 0), datetime(2024, 5, 12, 11, 0))

    assert period.is_active_on(datetime(2024, 5, 12, 23, 59))
    assert period.is_active_on(datetime(2024, 5, 10, 0, 1))
    assert period.is_active_on(date(2024, 5, 12))


def test_nights_counts_whole_days_only():
    assert StayPeriod(date(2024, 5, 1), date(2024, 5, 3)).nights == 2
    # 1 day 20 hours
    assert StayPeriod(datetime(2024, 5, 1, 15, 0), datetime(2024, 5, 3, 11, 0)).nights == 1


def test_date_is_promoted_to_midnight_against_datetime():
    assert align_instant(date(2024, 5, 1), datetime(2024, 5, 3, 10, 0)) == datetime(2024, 5, 1, 0, 0)
    assert align_instant(datetime(2024, 5, 1, 10, 0), date(2024, 5, 3)) == date(2024, 5, 1)
    assert calendar_day(datetime(2024, 5, 1, 10, 0)) == date(2024, 5, 1)


def test_dates_and_datetimes_sort_together():
    values = [
        datetime(2024, 5, 1, 9, 0),
        date(2024, 5, 2),
        date(2024, 5, 1),
        datetime(2024, 4, 30, 23, 0, tzinfo=timezone.utc),
    ]

    ordered = sorted(values, key=instant_sort_key)

    assert ordered == [
        datetime(2024, 4, 30, 23, 0, tzinfo=timezone.utc),
        date(2024, 5, 1),
        datetime(2024, 5, 1, 9, 0),
        date(2024, 5, 2),
    ]
