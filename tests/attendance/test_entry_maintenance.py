from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from calong_tick.attendance.model import EntryChanges
from calong_tick.attendance.service import AttendanceService
from calong_tick.core.enums import ReportPeriod
from calong_tick.core.exceptions import AuthorizationError, NotFoundError


@pytest.fixture
def svc(entries_repo, employees_repo):
    return AttendanceService(entries_repo, employees_repo)


@pytest.fixture
def emp(employees_repo):
    return employees_repo.add(name="Lan", pin="123456")


def test_manual_entry_derives_everything(svc, emp):
    entry = svc.create_manual_entry(
        employee_id=emp.employee_id,
        clock_in=datetime(2024, 12, 30, 9, 0),
        clock_out=datetime(2024, 12, 30, 17, 0),
        break_minutes=30,
        notes="forgot to clock",
    )

    assert entry.total_minutes == 450
    assert entry.hours_worked == Decimal("7.50")
    assert entry.entry_date == date(2024, 12, 30)
    assert (entry.entry_week, entry.entry_month, entry.entry_year) == (1, 12, 2024)


def test_manual_entry_for_unknown_employee(svc):
    with pytest.raises(NotFoundError):
        svc.create_manual_entry(
            employee_id=99,
            clock_in=datetime(2024, 1, 2, 9, 0),
            clock_out=datetime(2024, 1, 2, 17, 0),
        )


def test_manual_entry_with_reversed_times_is_clamped(svc, emp):
    entry = svc.create_manual_entry(
        employee_id=emp.employee_id,
        clock_in=datetime(2024, 1, 2, 17, 0),
        clock_out=datetime(2024, 1, 2, 9, 0),
    )

    assert entry.total_minutes == 0
    assert entry.hours_worked == Decimal("0.00")


def test_partial_update_recomputes_from_merged_values(svc, emp):
    entry = svc.create_own_entry(
        employee_id=emp.employee_id,
        clock_in=datetime(2024, 1, 2, 9, 0),
        clock_out=datetime(2024, 1, 2, 17, 0),
        break_minutes=60,
    )

    updated = svc.update_entry(entry.entry_id, EntryChanges(clock_out=datetime(2024, 1, 2, 18, 0)))

    assert updated.clock_in == datetime(2024, 1, 2, 9, 0)
    assert updated.break_minutes == 60
    assert updated.total_minutes == 480


def test_moving_clock_in_moves_the_calendar_bucket(svc, emp):
    entry = svc.create_own_entry(
        employee_id=emp.employee_id,
        clock_in=datetime(2024, 1, 2, 9, 0),
        clock_out=datetime(2024, 1, 2, 17, 0),
    )

    updated = svc.update_entry(
        entry.entry_id,
        EntryChanges(clock_in=datetime(2023, 12, 31, 9, 0), clock_out=datetime(2023, 12, 31, 10, 0)),
    )

    assert updated.entry_date == date(2023, 12, 31)
    assert (updated.entry_week, updated.entry_year) == (52, 2023)
    assert updated.total_minutes == 60


def test_own_entries_are_protected(svc, emp, employees_repo):
    other = employees_repo.add(name="Minh", pin="654321")
    entry = svc.create_own_entry(
        employee_id=emp.employee_id,
        clock_in=datetime(2024, 1, 2, 9, 0),
        clock_out=datetime(2024, 1, 2, 17, 0),
    )

    with pytest.raises(AuthorizationError):
        svc.update_entry(entry.entry_id, EntryChanges(notes="mine now"), owner_id=other.employee_id)
    with pytest.raises(AuthorizationError):
        svc.delete_entry(entry.entry_id, owner_id=other.employee_id)

    svc.delete_entry(entry.entry_id, owner_id=emp.employee_id)
    with pytest.raises(NotFoundError):
        svc.delete_entry(entry.entry_id)


def test_list_own_entries_by_period(svc, emp):
    now = datetime(2024, 3, 20, 12, 0)
    for day in (18, 19):
        svc.create_own_entry(
            employee_id=emp.employee_id,
            clock_in=datetime(2024, 3, day, 9, 0),
            clock_out=datetime(2024, 3, day, 10, 30),
        )
    svc.create_own_entry(
        employee_id=emp.employee_id,
        clock_in=datetime(2024, 2, 1, 9, 0),
        clock_out=datetime(2024, 2, 1, 10, 0),
    )

    week = svc.list_own_entries(emp.employee_id, period=ReportPeriod.WEEK, now=now)
    month = svc.list_own_entries(emp.employee_id, period=ReportPeriod.MONTH, now=now)
    everything = svc.list_own_entries(emp.employee_id, now=now)

    assert len(week.entries) == 2
    assert week.summary == {"total_entries": 2, "total_hours": 3, "total_minutes": 0, "total_time": "3h 0m"}
    assert len(month.entries) == 2
    assert len(everything.entries) == 3
    assert everything.entries[0].clock_in == datetime(2024, 3, 19, 9, 0)


def test_explicit_date_range_wins_over_period(svc, emp):
    svc.create_own_entry(
        employee_id=emp.employee_id,
        clock_in=datetime(2024, 2, 1, 9, 0),
        clock_out=datetime(2024, 2, 1, 10, 0),
    )

    listing = svc.list_own_entries(
        emp.employee_id,
        start_date=date(2024, 2, 1),
        end_date=date(2024, 2, 1),
        period=ReportPeriod.WEEK,
        now=datetime(2024, 3, 20),
    )

    assert len(listing.entries) == 1


def test_admin_listing_ignores_week_without_year(svc, emp):
    svc.create_own_entry(
        employee_id=emp.employee_id,
        clock_in=datetime(2024, 1, 2, 9, 0),
        clock_out=datetime(2024, 1, 2, 10, 0),
    )

    assert len(svc.list_entries(week=30)) == 1
    assert len(svc.list_entries(week=30, year=2024)) == 0
    assert svc.list_entries(week=1, year=2024)[0].employee_name == "Lan"
