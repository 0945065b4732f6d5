from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import ClockState, ReportPeriod
from ..core.exceptions import AlreadyOpenError, AuthorizationError, NoOpenEntryError, NotFoundError
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.base import DurationCalculator
from ..payroll.calculator.standard_calculator import StandardDurationCalculator
from ..payroll.model import WorkedTime
from .calendar import bucket
from .derived import derive_entry_fields
from .model import ClockStatus, EntryChanges, EntryListing, EntryQuery, TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockOutResult:
    entry: TimeEntry
    worked: WorkedTime


class AttendanceService:
    """Clock-in/clock-out state machine and time entry maintenance.

    Per employee there are two states: CLOSED (no entry without clock-out) and
    OPEN (exactly one). Transitions are always evaluated against the stored
    state; the repository guarantees the OPEN check and the insert are atomic.
    """

    def __init__(
        self,
        entries: TimeEntryRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[DurationCalculator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._entries = entries
        self._employees = employees
        self._calculator = calculator or StandardDurationCalculator()
        self._clock = clock

    # ----- state machine -------------------------------------------------

    def status(self, employee_id: int) -> ClockStatus:
        entry = self._entries.get_open_for_employee(int(employee_id))
        if entry:
            return ClockStatus(state=ClockState.OPEN, open_entry=entry)
        return ClockStatus(state=ClockState.CLOSED)

    def clock_in(self, employee_id: int, *, now: Optional[datetime] = None) -> TimeEntry:
        now = now or self._clock()

        if self._entries.get_open_for_employee(int(employee_id)):
            raise AlreadyOpenError("Already clocked in. Please clock out first.")

        fields = derive_entry_fields(self._calculator, clock_in=now, clock_out=None)
        entry_id = self._entries.create_open_entry(employee_id=int(employee_id), fields=fields)
        logger.info("employee %s clocked in (entry %s)", employee_id, entry_id)
        return self._require_entry(entry_id)

    def clock_out(self, employee_id: int, *, now: Optional[datetime] = None, notes: Optional[str] = None) -> ClockOutResult:
        now = now or self._clock()

        entry = self._entries.get_open_for_employee(int(employee_id))
        if not entry:
            raise NoOpenEntryError("No active clock in found. Please clock in first.")

        # Terminal clock-outs never deduct a break; only manual entries carry one.
        fields = derive_entry_fields(self._calculator, clock_in=entry.clock_in, clock_out=now, break_minutes=0)
        if not self._entries.close_entry(entry_id=entry.entry_id, fields=fields, notes=notes or None):
            raise NoOpenEntryError("No active clock in found. Please clock in first.")

        logger.info("employee %s clocked out (entry %s, %s min)", employee_id, entry.entry_id, fields.total_minutes)
        return ClockOutResult(entry=self._require_entry(entry.entry_id), worked=fields.worked)

    # ----- manual entries ------------------------------------------------

    def create_manual_entry(
        self,
        *,
        employee_id: int,
        clock_in: datetime,
        clock_out: datetime,
        break_minutes: int = 0,
        notes: Optional[str] = None,
    ) -> TimeEntry:
        """Admin path: any existing employee, active or not."""
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found.")
        return self.create_own_entry(
            employee_id=employee_id,
            clock_in=clock_in,
            clock_out=clock_out,
            break_minutes=break_minutes,
            notes=notes,
        )

    def create_own_entry(
        self,
        *,
        employee_id: int,
        clock_in: datetime,
        clock_out: datetime,
        break_minutes: int = 0,
        notes: Optional[str] = None,
    ) -> TimeEntry:
        fields = derive_entry_fields(
            self._calculator,
            clock_in=clock_in,
            clock_out=clock_out,
            break_minutes=break_minutes,
        )
        entry_id = self._entries.create_closed_entry(employee_id=int(employee_id), fields=fields, notes=notes or None)
        logger.info("manual entry %s created for employee %s", entry_id, employee_id)
        return self._require_entry(entry_id)

    def update_entry(self, entry_id: int, changes: EntryChanges, *, owner_id: Optional[int] = None) -> TimeEntry:
        """Apply a partial edit and recompute every derived column.

        ``owner_id`` restricts the edit to that employee's own entries.
        """
        entry = self._owned_entry(entry_id, owner_id)

        break_minutes = changes.break_minutes if changes.break_minutes is not None else entry.break_minutes
        fields = derive_entry_fields(
            self._calculator,
            clock_in=changes.clock_in or entry.clock_in,
            clock_out=changes.clock_out or entry.clock_out,
            break_minutes=break_minutes,
        )
        notes = changes.notes if changes.notes is not None else entry.notes

        if not self._entries.update_entry(entry_id=entry.entry_id, fields=fields, notes=notes):
            raise NotFoundError("Time entry not found.")
        return self._require_entry(entry.entry_id)

    def delete_entry(self, entry_id: int, *, owner_id: Optional[int] = None) -> None:
        entry = self._owned_entry(entry_id, owner_id)
        if not self._entries.delete_entry(entry.entry_id):
            raise NotFoundError("Time entry not found.")

    # ----- listings ------------------------------------------------------

    def list_own_entries(
        self,
        employee_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        period: Optional[ReportPeriod] = None,
        now: Optional[datetime] = None,
    ) -> EntryListing:
        """Entries of one employee: an explicit date range wins over ``period``."""
        current = bucket(now or self._clock())

        if start_date and end_date:
            query = EntryQuery(employee_id=int(employee_id), start_date=start_date, end_date=end_date)
        elif period == ReportPeriod.WEEK:
            query = EntryQuery(employee_id=int(employee_id), week=current.week, year=current.year)
        elif period == ReportPeriod.MONTH:
            query = EntryQuery(employee_id=int(employee_id), month=current.month, year=current.year)
        elif period == ReportPeriod.YEAR:
            query = EntryQuery(employee_id=int(employee_id), year=current.year)
        else:
            query = EntryQuery(employee_id=int(employee_id))

        entries = list(self._entries.list_entries(query))
        total = sum(e.total_minutes or 0 for e in entries)
        return EntryListing(entries=entries, total_minutes=total)

    def list_entries(
        self,
        *,
        employee_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        week: Optional[int] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> list[TimeEntry]:
        """Admin listing. Week and month filters only apply when a year is given too."""
        has_range = start_date is not None and end_date is not None
        query = EntryQuery(
            employee_id=employee_id,
            start_date=start_date if has_range else None,
            end_date=end_date if has_range else None,
            week=week if week and year else None,
            month=month if month and year else None,
            year=year if year and (week or month) else None,
        )
        return list(self._entries.list_entries(query, with_employee=True))

    # ----- helpers -------------------------------------------------------

    def _require_entry(self, entry_id: int) -> TimeEntry:
        entry = self._entries.get_by_id(int(entry_id))
        if not entry:
            raise NotFoundError("Time entry not found.")
        return entry

    def _owned_entry(self, entry_id: int, owner_id: Optional[int]) -> TimeEntry:
        entry = self._require_entry(entry_id)
        if owner_id is not None and entry.employee_id != int(owner_id):
            raise AuthorizationError("Access denied to this time entry.")
        return entry
