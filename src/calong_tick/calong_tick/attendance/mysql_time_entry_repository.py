from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Sequence

import mysql.connector

from ..core.enums import EmployeeType
from ..core.exceptions import AlreadyOpenError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from ..payroll.model import ReportEmployee, ReportEntry
from .derived import EntryFields
from .model import EntryQuery, TimeEntry
from .repository import TimeEntryRepository

_COLUMNS = """
    te.id, te.employee_id, te.clock_in, te.clock_out, te.break_minutes,
    te.hours_worked, te.minutes_worked, te.total_minutes, te.notes,
    te.entry_date, te.entry_week, te.entry_month, te.entry_year,
    te.created_at, te.updated_at
"""

OPEN_ENTRY_KEY = "uq_time_entries_open"


def _to_entry(r: dict[str, Any]) -> TimeEntry:
    hours = r.get("hours_worked")
    return TimeEntry(
        entry_id=int(r["id"]),
        employee_id=int(r["employee_id"]),
        clock_in=r["clock_in"],
        clock_out=r.get("clock_out"),
        break_minutes=int(r.get("break_minutes") or 0),
        hours_worked=Decimal(str(hours)) if hours is not None else None,
        minutes_worked=r.get("minutes_worked"),
        total_minutes=r.get("total_minutes"),
        notes=r.get("notes"),
        entry_date=r["entry_date"],
        entry_week=int(r["entry_week"]),
        entry_month=int(r["entry_month"]),
        entry_year=int(r["entry_year"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
        employee_name=r.get("employee_name"),
        employee_type=r.get("employee_type"),
    )


def _field_values(fields: EntryFields) -> tuple:
    return (
        fields.clock_in,
        fields.clock_out,
        fields.break_minutes,
        fields.hours_worked,
        fields.minutes_worked,
        fields.total_minutes,
        fields.bucket.date,
        fields.bucket.week,
        fields.bucket.month,
        fields.bucket.year,
    )


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM time_entries te WHERE te.id=%s", (int(entry_id),))
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def get_open_for_employee(self, employee_id: int) -> Optional[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM time_entries te
                WHERE te.employee_id=%s AND te.clock_out IS NULL
                """,
                (int(employee_id),),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def _insert(self, *, employee_id: int, fields: EntryFields, notes: Optional[str]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(
                    employee_id, clock_in, clock_out, break_minutes,
                    hours_worked, minutes_worked, total_minutes,
                    entry_date, entry_week, entry_month, entry_year, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), *_field_values(fields), notes),
            )
            return int(cur.lastrowid)

    def create_open_entry(self, *, employee_id: int, fields: EntryFields) -> int:
        try:
            return self._insert(employee_id=employee_id, fields=fields, notes=None)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e, OPEN_ENTRY_KEY):
                raise AlreadyOpenError("Already clocked in. Please clock out first.")
            raise

    def create_closed_entry(self, *, employee_id: int, fields: EntryFields, notes: Optional[str]) -> int:
        return self._insert(employee_id=employee_id, fields=fields, notes=notes)

    def close_entry(self, *, entry_id: int, fields: EntryFields, notes: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET clock_out=%s, hours_worked=%s, minutes_worked=%s, total_minutes=%s, notes=%s
                WHERE id=%s AND clock_out IS NULL
                """,
                (
                    fields.clock_out,
                    fields.hours_worked,
                    fields.minutes_worked,
                    fields.total_minutes,
                    notes,
                    int(entry_id),
                ),
            )
            return cur.rowcount > 0

    def update_entry(self, *, entry_id: int, fields: EntryFields, notes: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_entries
                SET clock_in=%s, clock_out=%s, break_minutes=%s,
                    hours_worked=%s, minutes_worked=%s, total_minutes=%s,
                    entry_date=%s, entry_week=%s, entry_month=%s, entry_year=%s,
                    notes=%s
                WHERE id=%s
                """,
                (*_field_values(fields), notes, int(entry_id)),
            )
            # rowcount is 0 when nothing changed, so confirm the row exists.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT id FROM time_entries WHERE id=%s", (int(entry_id),))
            return fetchone(cur) is not None

    def delete_entry(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_entries WHERE id=%s", (int(entry_id),))
            return cur.rowcount > 0

    def list_entries(self, query: EntryQuery, *, with_employee: bool = False) -> Sequence[TimeEntry]:
        clauses = ["1=1"]
        params: list[object] = []

        if query.employee_id is not None:
            clauses.append("te.employee_id=%s")
            params.append(int(query.employee_id))
        if query.start_date is not None and query.end_date is not None:
            clauses.append("te.entry_date BETWEEN %s AND %s")
            params.extend([query.start_date, query.end_date])
        if query.week is not None:
            clauses.append("te.entry_week=%s")
            params.append(int(query.week))
        if query.month is not None:
            clauses.append("te.entry_month=%s")
            params.append(int(query.month))
        if query.year is not None:
            clauses.append("te.entry_year=%s")
            params.append(int(query.year))

        where = " AND ".join(clauses)
        select = _COLUMNS
        join = ""
        if with_employee:
            select += ", e.name AS employee_name, e.employee_type"
            join = "JOIN employees e ON e.id = te.employee_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {select}
                FROM time_entries te
                {join}
                WHERE {where}
                ORDER BY te.clock_in DESC
                """,
                tuple(params),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def get_report_employees(self, *, employee_id: Optional[int] = None) -> Sequence[ReportEmployee]:
        clauses = ["is_active = TRUE"]
        params: list[object] = []
        if employee_id is not None:
            clauses.append("id=%s")
            params.append(int(employee_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, name, employee_type, hourly_rate
                FROM employees
                WHERE {" AND ".join(clauses)}
                ORDER BY name
                """,
                tuple(params),
            )
            return [
                ReportEmployee(
                    employee_id=int(r["id"]),
                    name=r["name"],
                    employee_type=EmployeeType(r["employee_type"]),
                    hourly_rate=Decimal(str(r.get("hourly_rate") or 0)),
                )
                for r in fetchall(cur)
            ]

    def get_report_entries(
        self,
        *,
        employee_id: Optional[int] = None,
        week: Optional[int] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Sequence[ReportEntry]:
        entries = self.list_entries(EntryQuery(employee_id=employee_id, week=week, month=month, year=year))
        return [
            ReportEntry(employee_id=e.employee_id, entry_date=e.entry_date, total_minutes=e.total_minutes)
            for e in entries
        ]
