from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..payroll.calculator.base import DurationCalculator
from ..payroll.model import WorkedTime
from .calendar import CalendarBucket, bucket


@dataclass(frozen=True)
class EntryFields:
    """The stored columns of an entry that follow from its clock times.

    Built in one place so the calendar bucket and the worked time can never
    drift away from ``clock_in``/``clock_out``.
    """

    clock_in: datetime
    clock_out: Optional[datetime]
    break_minutes: int
    bucket: CalendarBucket
    worked: Optional[WorkedTime]

    @property
    def hours_worked(self) -> Optional[Decimal]:
        return self.worked.hours_decimal if self.worked else None

    @property
    def minutes_worked(self) -> Optional[int]:
        return self.worked.minutes if self.worked else None

    @property
    def total_minutes(self) -> Optional[int]:
        return self.worked.total_minutes if self.worked else None


def derive_entry_fields(
    calculator: DurationCalculator,
    *,
    clock_in: datetime,
    clock_out: Optional[datetime],
    break_minutes: int = 0,
) -> EntryFields:
    # DATETIME columns keep whole seconds; compute from what will be stored.
    clock_in = clock_in.replace(microsecond=0)
    if clock_out is not None:
        clock_out = clock_out.replace(microsecond=0)

    worked = None
    if clock_out is not None:
        worked = calculator.calculate(clock_in, clock_out, break_minutes)
    return EntryFields(
        clock_in=clock_in,
        clock_out=clock_out,
        break_minutes=int(break_minutes or 0),
        bucket=bucket(clock_in),
        worked=worked,
    )
