from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal

import pytest

from calong_tick.admins.model import Admin
from calong_tick.admins.tokens import TokenService
from calong_tick.attendance.model import EntryQuery, TimeEntry
from calong_tick.container import build_services
from calong_tick.core.enums import EmployeeRole, EmployeeType
from calong_tick.core.exceptions import AlreadyOpenError, DuplicateAdminError, DuplicatePinError
from calong_tick.employees.model import Employee
from calong_tick.payroll.model import ReportEmployee, ReportEntry


class FakeAdminsRepo:
    def __init__(self):
        self._next_id = 1
        self._admins: dict[int, Admin] = {}

    def any_exists(self):
        return bool(self._admins)

    def get_by_id(self, admin_id):
        return self._admins.get(int(admin_id))

    def get_by_login(self, login):
        for a in self._admins.values():
            if login in (a.username, a.email):
                return a
        return None

    def username_or_email_taken(self, username, email):
        return any(a.username == username or a.email == email for a in self._admins.values())

    def create(self, *, username, email, password_hash):
        if self.username_or_email_taken(username, email):
            raise DuplicateAdminError("Admin with this username or email already exists.")
        aid = self._next_id
        self._next_id += 1
        self._admins[aid] = Admin(admin_id=aid, username=username, email=email, password_hash=password_hash)
        return aid


class FakeEmployeesRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, Employee] = {}
        # set by FakeEntriesRepo; deleting an employee removes its entries there
        self.entries = None

    def add(self, *, name, pin, employee_type=EmployeeType.FULL_TIME, hourly_rate="15.00", is_active=True):
        """Test helper: insert an employee with a known PIN."""
        eid = self._next_id
        self._next_id += 1
        self.rows[eid] = Employee(
            employee_id=eid,
            name=name,
            pin=pin,
            employee_type=employee_type,
            role=EmployeeRole.WAITER,
            hourly_rate=Decimal(hourly_rate),
            is_active=is_active,
        )
        return self.rows[eid]

    def get_by_id(self, employee_id):
        return self.rows.get(int(employee_id))

    def get_active_by_pin(self, pin):
        for e in self.rows.values():
            if e.pin == pin and e.is_active:
                return e
        return None

    def pin_exists(self, pin, *, exclude_id=None):
        return any(e.pin == pin and e.employee_id != exclude_id for e in self.rows.values())

    def create(self, employee, *, pin, created_by):
        if self.pin_exists(pin):
            raise DuplicatePinError("PIN already in use by another employee.")
        eid = self._next_id
        self._next_id += 1
        self.rows[eid] = Employee(
            employee_id=eid,
            name=employee.name,
            pin=pin,
            employee_type=employee.employee_type,
            role=employee.role,
            hourly_rate=employee.hourly_rate,
            phone=employee.phone,
            email=employee.email,
            created_by=created_by,
        )
        return eid

    def list_all(self):
        return sorted(self.rows.values(), key=lambda e: e.employee_id, reverse=True)

    def update(self, employee_id, changes):
        current = self.rows.get(int(employee_id))
        if not current:
            return False
        values = {
            "name": changes.name,
            "employee_type": changes.employee_type,
            "role": changes.role,
            "hourly_rate": changes.hourly_rate,
            "phone": changes.phone,
            "email": changes.email,
            "is_active": changes.is_active,
            "pin": changes.pin,
        }
        self.rows[int(employee_id)] = replace(current, **{k: v for k, v in values.items() if v is not None})
        return True

    def delete(self, employee_id):
        if self.entries is not None:
            for entry_id in [k for k, e in self.entries.rows.items() if e.employee_id == int(employee_id)]:
                del self.entries.rows[entry_id]
        return self.rows.pop(int(employee_id), None) is not None


class FakeEntriesRepo:
    """In-memory time entries; enforces at most one open entry per employee like the unique index does."""

    def __init__(self, employees: FakeEmployeesRepo):
        self._employees = employees
        employees.entries = self
        self._next_id = 1
        self.rows: dict[int, TimeEntry] = {}

    def _build(self, entry_id, employee_id, fields, notes):
        return TimeEntry(
            entry_id=entry_id,
            employee_id=int(employee_id),
            clock_in=fields.clock_in,
            clock_out=fields.clock_out,
            break_minutes=fields.break_minutes,
            hours_worked=fields.hours_worked,
            minutes_worked=fields.minutes_worked,
            total_minutes=fields.total_minutes,
            notes=notes,
            entry_date=fields.bucket.date,
            entry_week=fields.bucket.week,
            entry_month=fields.bucket.month,
            entry_year=fields.bucket.year,
            created_at=datetime(2024, 1, 1),
        )

    def _insert(self, employee_id, fields, notes):
        eid = self._next_id
        self._next_id += 1
        self.rows[eid] = self._build(eid, employee_id, fields, notes)
        return eid

    def get_by_id(self, entry_id):
        return self.rows.get(int(entry_id))

    def get_open_for_employee(self, employee_id):
        for e in self.rows.values():
            if e.employee_id == int(employee_id) and e.clock_out is None:
                return e
        return None

    def create_open_entry(self, *, employee_id, fields):
        if self.get_open_for_employee(employee_id):
            raise AlreadyOpenError("Already clocked in. Please clock out first.")
        return self._insert(employee_id, fields, None)

    def close_entry(self, *, entry_id, fields, notes):
        current = self.rows.get(int(entry_id))
        if not current or current.clock_out is not None:
            return False
        self.rows[int(entry_id)] = replace(
            current,
            clock_out=fields.clock_out,
            hours_worked=fields.hours_worked,
            minutes_worked=fields.minutes_worked,
            total_minutes=fields.total_minutes,
            notes=notes,
        )
        return True

    def create_closed_entry(self, *, employee_id, fields, notes):
        return self._insert(employee_id, fields, notes)

    def update_entry(self, *, entry_id, fields, notes):
        current = self.rows.get(int(entry_id))
        if not current:
            return False
        self.rows[int(entry_id)] = self._build(current.entry_id, current.employee_id, fields, notes)
        return True

    def delete_entry(self, entry_id):
        return self.rows.pop(int(entry_id), None) is not None

    def list_entries(self, query, *, with_employee=False):
        out = []
        for e in self.rows.values():
            if query.employee_id is not None and e.employee_id != query.employee_id:
                continue
            if query.start_date and query.end_date and not (query.start_date <= e.entry_date <= query.end_date):
                continue
            if query.week is not None and e.entry_week != query.week:
                continue
            if query.month is not None and e.entry_month != query.month:
                continue
            if query.year is not None and e.entry_year != query.year:
                continue
            if with_employee:
                emp = self._employees.get_by_id(e.employee_id)
                e = replace(e, employee_name=emp.name, employee_type=emp.employee_type.value)
            out.append(e)
        return sorted(out, key=lambda e: e.clock_in, reverse=True)

    def get_report_employees(self, *, employee_id=None):
        rows = [
            ReportEmployee(employee_id=e.employee_id, name=e.name, employee_type=e.employee_type, hourly_rate=e.hourly_rate)
            for e in self._employees.rows.values()
            if e.is_active and (employee_id is None or e.employee_id == employee_id)
        ]
        return sorted(rows, key=lambda r: r.name.casefold())

    def get_report_entries(self, *, employee_id=None, week=None, month=None, year=None):
        entries = self.list_entries(EntryQuery(employee_id=employee_id, week=week, month=month, year=year))
        return [ReportEntry(employee_id=e.employee_id, entry_date=e.entry_date, total_minutes=e.total_minutes) for e in entries]


@pytest.fixture
def admins_repo():
    return FakeAdminsRepo()


@pytest.fixture
def employees_repo():
    return FakeEmployeesRepo()


@pytest.fixture
def entries_repo(employees_repo):
    return FakeEntriesRepo(employees_repo)


@pytest.fixture
def tokens():
    return TokenService("test-jwt-secret", expires_minutes=60)


@pytest.fixture
def container(admins_repo, employees_repo, entries_repo, tokens):
    return build_services(
        conn=None,
        admins_repo=admins_repo,
        employees_repo=employees_repo,
        entries_repo=entries_repo,
        tokens=tokens,
    )


@pytest.fixture
def client(container, monkeypatch):
    from calong_tick.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


@pytest.fixture
def admin_token(client):
    resp = client.post(
        "/api/admin/signup",
        json={"username": "boss", "email": "boss@calong.test", "password": "s3cret!"},
    )
    assert resp.status_code == 201
    return resp.get_json()["data"]["token"]


@pytest.fixture
def auth(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
