from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import ClockState


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: one clock-in/clock-out pair of an employee.

    ``clock_out`` is None while the entry is open. Every field from
    ``hours_worked`` to ``entry_year`` is derived from the clock times and is
    only ever written together with them.
    """

    entry_id: int
    employee_id: int
    clock_in: datetime
    clock_out: Optional[datetime]
    break_minutes: int
    hours_worked: Optional[Decimal]
    minutes_worked: Optional[int]
    total_minutes: Optional[int]
    notes: Optional[str]
    entry_date: date
    entry_week: int
    entry_month: int
    entry_year: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    employee_name: Optional[str] = None
    employee_type: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    def to_dict(self) -> dict:
        out = {
            "id": self.entry_id,
            "employee_id": self.employee_id,
            "clock_in": self.clock_in,
            "clock_out": self.clock_out,
            "break_minutes": self.break_minutes,
            "hours_worked": self.hours_worked,
            "minutes_worked": self.minutes_worked,
            "total_minutes": self.total_minutes,
            "notes": self.notes,
            "entry_date": self.entry_date,
            "entry_week": self.entry_week,
            "entry_month": self.entry_month,
            "entry_year": self.entry_year,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
        if self.employee_name is not None:
            out["employee_name"] = self.employee_name
            out["employee_type"] = self.employee_type
        return out


@dataclass(frozen=True)
class EntryQuery:
    """Storage-level filter; every set field is applied."""

    employee_id: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    week: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None


@dataclass(frozen=True)
class EntryChanges:
    """Partial edit of an entry; None means keep the stored value."""

    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    break_minutes: Optional[int] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class ClockStatus:
    state: ClockState
    open_entry: Optional[TimeEntry] = None

    @property
    def is_clocked_in(self) -> bool:
        return self.state == ClockState.OPEN


@dataclass(frozen=True)
class EntryListing:
    entries: list[TimeEntry]
    total_minutes: int

    @property
    def summary(self) -> dict:
        hours, minutes = divmod(self.total_minutes, 60)
        return {
            "total_entries": len(self.entries),
            "total_hours": hours,
            "total_minutes": minutes,
            "total_time": f"{hours}h {minutes}m",
        }
