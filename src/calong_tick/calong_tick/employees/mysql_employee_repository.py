from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Sequence

import mysql.connector

from ..core.enums import EmployeeRole, EmployeeType
from ..core.exceptions import DuplicatePinError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Employee, EmployeeChanges, NewEmployee
from .repository import EmployeeRepository

_COLUMNS = """
    id, name, pin, employee_type, role, hourly_rate, phone, email,
    is_active, created_by, created_at, updated_at
"""

PIN_KEY = "uq_employees_pin"


def _to_employee(r: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        name=r["name"],
        pin=r["pin"],
        employee_type=EmployeeType(r["employee_type"]),
        role=EmployeeRole(r.get("role") or EmployeeRole.WAITER.value),
        hourly_rate=Decimal(str(r.get("hourly_rate") or 0)),
        phone=r.get("phone"),
        email=r.get("email"),
        is_active=bool(r.get("is_active", True)),
        created_by=r.get("created_by"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def get_active_by_pin(self, pin: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE pin=%s AND is_active = TRUE", (pin,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def pin_exists(self, pin: str, *, exclude_id: Optional[int] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if exclude_id is None:
                cur.execute("SELECT id FROM employees WHERE pin=%s", (pin,))
            else:
                cur.execute("SELECT id FROM employees WHERE pin=%s AND id<>%s", (pin, int(exclude_id)))
            return fetchone(cur) is not None

    def create(self, employee: NewEmployee, *, pin: str, created_by: Optional[int]) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(name, pin, employee_type, role, hourly_rate, phone, email, created_by)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        employee.name,
                        pin,
                        employee.employee_type.value,
                        employee.role.value,
                        employee.hourly_rate,
                        employee.phone,
                        employee.email,
                        created_by,
                    ),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e, PIN_KEY):
                raise DuplicatePinError("PIN already in use by another employee.")
            raise

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at DESC, id DESC")
            return [_to_employee(r) for r in fetchall(cur)]

    def update(self, employee_id: int, changes: EmployeeChanges) -> bool:
        columns = changes.as_columns()
        if not columns:
            return self.get_by_id(employee_id) is not None

        assignments = ", ".join(f"{name}=%s" for name in columns)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"UPDATE employees SET {assignments} WHERE id=%s",
                    (*columns.values(), int(employee_id)),
                )
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e, PIN_KEY):
                raise DuplicatePinError("PIN already in use by another employee.")
            raise

    def delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_entries WHERE employee_id=%s", (int(employee_id),))
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0
