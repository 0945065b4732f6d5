"""Calendar bucketing of a clock-in instant.

The week number follows ISO-8601 (week 1 holds the year's first Thursday).
``month`` and ``year`` are the plain calendar values of the instant, so around
New Year an entry can carry ``year=2024`` together with ``week=1`` of the
2025 ISO year. Reports match on exactly these stored values.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Union


@dataclass(frozen=True)
class CalendarBucket:
    date: date
    week: int
    month: int
    year: int


def iso_week_number(day: date) -> int:
    # Shift to the Thursday of the same Monday-based week; that Thursday's
    # year owns the week.
    thursday = day + timedelta(days=4 - day.isoweekday())
    days_since_jan1 = (thursday - date(thursday.year, 1, 1)).days
    return (days_since_jan1 + 1 + 6) // 7


def bucket(instant: Union[datetime, date]) -> CalendarBucket:
    day = instant.date() if isinstance(instant, datetime) else instant
    return CalendarBucket(date=day, week=iso_week_number(day), month=day.month, year=day.year)
