from __future__ import annotations

from datetime import datetime, timedelta

from ..model import WorkedTime
from ..money import hours_decimal
from .base import DurationCalculator


class StandardDurationCalculator(DurationCalculator):
    """Standard rule: whole minutes of (out - in) minus break_minutes, not below 0."""

    def calculate(self, clock_in: datetime, clock_out: datetime, break_minutes: int = 0) -> WorkedTime:
        raw_minutes = (clock_out - clock_in) // timedelta(minutes=1)
        total = max(raw_minutes - int(break_minutes or 0), 0)
        return WorkedTime(
            hours=total // 60,
            minutes=total % 60,
            total_minutes=total,
            hours_decimal=hours_decimal(total),
        )
