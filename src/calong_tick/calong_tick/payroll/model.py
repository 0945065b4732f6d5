from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import EmployeeType, ReportPeriod


@dataclass(frozen=True)
class WorkedTime:
    """Worked duration of one entry, in every representation we persist or show."""

    hours: int
    minutes: int
    total_minutes: int
    hours_decimal: Decimal

    @property
    def label(self) -> str:
        return f"{self.hours}h {self.minutes}m"


@dataclass(frozen=True)
class SummaryFilter:
    """Report filter.

    ``week``/``month``/``year`` only take effect together with the matching
    ``period``; a value without its period is ignored.
    """

    employee_id: Optional[int] = None
    period: Optional[ReportPeriod] = None
    week: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None


@dataclass(frozen=True)
class ReportEmployee:
    employee_id: int
    name: str
    employee_type: EmployeeType
    hourly_rate: Decimal


@dataclass(frozen=True)
class ReportEntry:
    """Read-model row for the summary query: one entry inside the period."""

    employee_id: int
    entry_date: date
    total_minutes: Optional[int]


@dataclass(frozen=True)
class SummaryRow:
    employee_id: int
    employee_name: str
    employee_type: EmployeeType
    hourly_rate: Decimal
    entry_count: int
    total_minutes: int
    first_entry_date: Optional[date]
    last_entry_date: Optional[date]
    total_hours: int
    remaining_minutes: int
    estimated_pay: Decimal

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "employee_type": self.employee_type.value,
            "hourly_rate": self.hourly_rate,
            "entry_count": self.entry_count,
            "total_minutes": self.total_minutes,
            "first_entry_date": self.first_entry_date,
            "last_entry_date": self.last_entry_date,
            "total_hours": self.total_hours,
            "remaining_minutes": self.remaining_minutes,
            "total_time": f"{self.total_hours}h {self.remaining_minutes}m",
            "estimated_pay": self.estimated_pay,
        }
