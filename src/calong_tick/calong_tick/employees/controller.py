from __future__ import annotations

from flask import Flask, g

from ..admins.guards import admin_required
from ..common.http import ok, parse_body
from ..container import Container
from .schemas import EmployeeCreateRequest, EmployeeUpdateRequest, PinPayload


def register(app: Flask, container: Container) -> None:
    admin_only = admin_required(container.admin_service)
    employees = container.employee_service

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @admin_only
    def create_employee():
        body = parse_body(EmployeeCreateRequest)
        employee = employees.create_employee(body.to_new_employee(), created_by=g.admin_id)
        return ok(employee.to_dict(), message="Employee created successfully.", status=201)

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @admin_only
    def list_employees():
        return ok([e.to_dict() for e in employees.list_employees()])

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    @admin_only
    def get_employee(employee_id: int):
        return ok(employees.get_employee(employee_id).to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @admin_only
    def update_employee(employee_id: int):
        body = parse_body(EmployeeUpdateRequest)
        employee = employees.update_employee(employee_id, body.to_changes())
        return ok(employee.to_dict(), message="Employee updated successfully.")

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_only
    def delete_employee(employee_id: int):
        employees.delete_employee(employee_id)
        return ok(message="Employee deleted successfully.")

    @app.route("/api/employees/verify-pin", methods=["POST"], endpoint="verify_pin")
    def verify_pin():
        body = parse_body(PinPayload)
        return ok(employees.verify_pin(body.pin).to_dict())
