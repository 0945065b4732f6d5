from datetime import date, datetime, timedelta

import pytest

from calong_tick.attendance.calendar import bucket, iso_week_number


@pytest.mark.parametrize(
    "day, week",
    [
        (date(2023, 12, 31), 52),  # Sunday closes ISO week 52 of 2023
        (date(2024, 1, 1), 1),
        (date(2024, 12, 30), 1),  # Monday of ISO week 1 of 2025
        (date(2020, 12, 31), 53),
        (date(2021, 1, 1), 53),
        (date(2021, 1, 4), 1),
        (date(2026, 6, 15), 25),
    ],
)
def test_iso_week_number_around_year_boundaries(day, week):
    assert iso_week_number(day) == week


def test_iso_week_number_matches_isocalendar_for_a_long_range():
    day = date(2019, 12, 1)
    for _ in range(3 * 366):
        assert iso_week_number(day) == day.isocalendar()[1], day
        day += timedelta(days=1)


def test_bucket_keeps_calendar_month_and_year_next_to_iso_week():
    b = bucket(datetime(2024, 12, 30, 22, 15))

    assert b.date == date(2024, 12, 30)
    assert b.week == 1
    assert b.month == 12
    assert b.year == 2024
