from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..payroll.model import ReportEmployee, ReportEntry
from .derived import EntryFields
from .model import EntryQuery, TimeEntry


class TimeEntryRepository(Protocol):
    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def get_open_for_employee(self, employee_id: int) -> Optional[TimeEntry]:
        raise NotImplementedError

    def create_open_entry(self, *, employee_id: int, fields: EntryFields) -> int:
        """Insert an entry without clock-out.

        Must raise AlreadyOpenError if the employee already has an open entry,
        atomically with the insert.
        """

        raise NotImplementedError

    def close_entry(self, *, entry_id: int, fields: EntryFields, notes: Optional[str]) -> bool:
        """Set clock-out and derived fields; False if the entry is no longer open."""

        raise NotImplementedError

    def create_closed_entry(self, *, employee_id: int, fields: EntryFields, notes: Optional[str]) -> int:
        raise NotImplementedError

    def update_entry(self, *, entry_id: int, fields: EntryFields, notes: Optional[str]) -> bool:
        raise NotImplementedError

    def delete_entry(self, entry_id: int) -> bool:
        raise NotImplementedError

    def list_entries(self, query: EntryQuery, *, with_employee: bool = False) -> Sequence[TimeEntry]:
        """Entries matching ``query``, newest clock-in first."""

        raise NotImplementedError

    def get_report_employees(self, *, employee_id: Optional[int] = None) -> Sequence[ReportEmployee]:
        """Active employees, by name."""

        raise NotImplementedError

    def get_report_entries(
        self,
        *,
        employee_id: Optional[int] = None,
        week: Optional[int] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Sequence[ReportEntry]:
        raise NotImplementedError
