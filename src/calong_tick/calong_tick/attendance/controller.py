from __future__ import annotations

from flask import Flask

from ..admins.guards import admin_required
from ..common.http import ok, parse_body, parse_query
from ..container import Container
from ..employees.schemas import PinPayload
from .schemas import (
    ClockOutRequest,
    EntryListQuery,
    EntryUpdateRequest,
    ManualEntryRequest,
    OwnEntriesRequest,
    OwnEntryRequest,
    OwnEntryUpdateRequest,
    SummaryQuery,
)


def register(app: Flask, container: Container) -> None:
    admin_only = admin_required(container.admin_service)
    attendance = container.attendance_service
    employees = container.employee_service

    # ----- employee kiosk (PIN) -----------------------------------------

    @app.route("/api/time-entries/clock-in", methods=["POST"], endpoint="clock_in")
    def clock_in():
        employee = employees.verify_pin(parse_body(PinPayload).pin)
        entry = attendance.clock_in(employee.employee_id)
        return ok(
            {"entry_id": entry.entry_id, "employee_name": employee.name, "clock_in": entry.clock_in},
            message=f"{employee.name} clocked in successfully.",
            status=201,
        )

    @app.route("/api/time-entries/clock-out", methods=["POST"], endpoint="clock_out")
    def clock_out():
        body = parse_body(ClockOutRequest)
        employee = employees.verify_pin(body.pin)
        result = attendance.clock_out(employee.employee_id, notes=body.notes)
        return ok(
            {
                "entry_id": result.entry.entry_id,
                "employee_name": employee.name,
                "clock_in": result.entry.clock_in,
                "clock_out": result.entry.clock_out,
                "hours_worked": result.worked.hours,
                "minutes_worked": result.worked.minutes,
                "hours_decimal": result.worked.hours_decimal,
                "total_time": result.worked.label,
            },
            message=f"{employee.name} clocked out successfully.",
        )

    @app.route("/api/time-entries/status", methods=["POST"], endpoint="clock_status")
    def clock_status():
        employee = employees.verify_pin(parse_body(PinPayload).pin)
        status = attendance.status(employee.employee_id)
        current = None
        if status.open_entry:
            current = {"id": status.open_entry.entry_id, "clock_in": status.open_entry.clock_in}
        return ok(
            {
                "employee_name": employee.name,
                "state": status.state.value,
                "is_clocked_in": status.is_clocked_in,
                "current_entry": current,
            }
        )

    @app.route("/api/time-entries/my-entries", methods=["POST"], endpoint="my_entries")
    def my_entries():
        body = parse_body(OwnEntriesRequest)
        employee = employees.verify_pin(body.pin)
        listing = attendance.list_own_entries(
            employee.employee_id,
            start_date=body.start_date,
            end_date=body.end_date,
            period=body.period,
        )
        return ok(
            {
                "employee_name": employee.name,
                "entries": [e.to_dict() for e in listing.entries],
                "summary": listing.summary,
            }
        )

    @app.route("/api/time-entries/employee-entry", methods=["POST"], endpoint="create_own_entry")
    def create_own_entry():
        body = parse_body(OwnEntryRequest)
        employee = employees.verify_pin(body.pin)
        entry = attendance.create_own_entry(employee_id=employee.employee_id, **body.entry_kwargs())
        data = entry.to_dict()
        data["employee_name"] = employee.name
        return ok(data, message="Time entry created successfully.", status=201)

    @app.route("/api/time-entries/employee-entry/<int:entry_id>", methods=["PUT"], endpoint="update_own_entry")
    def update_own_entry(entry_id: int):
        body = parse_body(OwnEntryUpdateRequest)
        employee = employees.verify_pin(body.pin)
        entry = attendance.update_entry(entry_id, body.to_changes(), owner_id=employee.employee_id)
        return ok(entry.to_dict(), message="Time entry updated successfully.")

    @app.route("/api/time-entries/employee-entry/<int:entry_id>", methods=["DELETE"], endpoint="delete_own_entry")
    def delete_own_entry(entry_id: int):
        employee = employees.verify_pin(parse_body(PinPayload).pin)
        attendance.delete_entry(entry_id, owner_id=employee.employee_id)
        return ok(message="Time entry deleted successfully.")

    # ----- admin --------------------------------------------------------

    @app.route("/api/time-entries", methods=["GET"], endpoint="list_entries")
    @admin_only
    def list_entries():
        q = parse_query(EntryListQuery)
        entries = attendance.list_entries(
            employee_id=q.employee_id,
            start_date=q.start_date,
            end_date=q.end_date,
            week=q.week,
            month=q.month,
            year=q.year,
        )
        return ok([e.to_dict() for e in entries])

    @app.route("/api/time-entries/<int:entry_id>", methods=["PUT"], endpoint="update_entry")
    @admin_only
    def update_entry(entry_id: int):
        body = parse_body(EntryUpdateRequest)
        entry = attendance.update_entry(entry_id, body.to_changes())
        return ok(entry.to_dict(), message="Time entry updated successfully.")

    @app.route("/api/time-entries/<int:entry_id>", methods=["DELETE"], endpoint="delete_entry")
    @admin_only
    def delete_entry(entry_id: int):
        attendance.delete_entry(entry_id)
        return ok(message="Time entry deleted successfully.")

    @app.route("/api/time-entries/manual", methods=["POST"], endpoint="create_manual_entry")
    @admin_only
    def create_manual_entry():
        body = parse_body(ManualEntryRequest)
        entry = attendance.create_manual_entry(employee_id=body.employee_id, **body.entry_kwargs())
        return ok(entry.to_dict(), message="Time entry created successfully.", status=201)

    @app.route("/api/time-entries/reports/summary", methods=["GET"], endpoint="summary_report")
    @admin_only
    def summary_report():
        q = parse_query(SummaryQuery)
        rows = container.report_service.summarize(q.to_filter())
        return ok([r.to_dict() for r in rows])
