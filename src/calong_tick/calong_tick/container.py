from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.service import AdminService
from .admins.tokens import TokenService
from .attendance.mysql_time_entry_repository import MySQLTimeEntryRepository
from .attendance.repository import TimeEntryRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_PIN_MAX_ATTEMPTS, DEFAULT_TOKEN_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.pin_allocator import PinAllocator
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.service import ReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    admins_repo: AdminRepository
    employees_repo: EmployeeRepository
    entries_repo: TimeEntryRepository

    admin_service: AdminService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: ReportService


def build_services(
    *,
    conn: Optional[DatabaseConnection],
    admins_repo: AdminRepository,
    employees_repo: EmployeeRepository,
    entries_repo: TimeEntryRepository,
    tokens: TokenService,
    pin_max_attempts: Optional[int] = DEFAULT_PIN_MAX_ATTEMPTS,
) -> Container:
    """Wire services on top of already built repositories."""
    pins = PinAllocator(employees_repo, max_attempts=pin_max_attempts)

    return Container(
        conn=conn,
        admins_repo=admins_repo,
        employees_repo=employees_repo,
        entries_repo=entries_repo,
        admin_service=AdminService(admins_repo, tokens),
        employee_service=EmployeeService(employees_repo, pins),
        attendance_service=AttendanceService(entries_repo, employees_repo),
        report_service=ReportService(entries_repo),
    )


def build_container(
    *,
    db_config: dict,
    jwt_secret: str,
    jwt_algorithm: str = "HS256",
    token_minutes: int = DEFAULT_TOKEN_MINUTES,
    pin_max_attempts: Optional[int] = DEFAULT_PIN_MAX_ATTEMPTS,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    return build_services(
        conn=conn,
        admins_repo=MySQLAdminRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        entries_repo=MySQLTimeEntryRepository(conn),
        tokens=TokenService(jwt_secret, algorithm=jwt_algorithm, expires_minutes=token_minutes),
        pin_max_attempts=pin_max_attempts,
    )
