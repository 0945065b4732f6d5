from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty, require_pin
from ..core.exceptions import AuthenticationError, DuplicatePinError, NotFoundError, ValidationError
from .model import Employee, EmployeeChanges, NewEmployee
from .pin_allocator import PinAllocator
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees (admin) and identify them by PIN."""

    def __init__(self, employees: EmployeeRepository, pins: PinAllocator):
        self._employees = employees
        self._pins = pins

    def create_employee(self, data: NewEmployee, *, created_by: Optional[int] = None) -> Employee:
        require_non_empty(data.name, "Name")

        pin = self._pins.allocate()
        employee_id = self._employees.create(data, pin=pin, created_by=created_by)
        logger.info("employee %s created by admin %s", employee_id, created_by)
        return self.get_employee(employee_id)

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found.")
        return employee

    def update_employee(self, employee_id: int, changes: EmployeeChanges) -> Employee:
        self.get_employee(employee_id)

        if changes.name is not None:
            require_non_empty(changes.name, "Name")
        if changes.pin is not None:
            require_pin(changes.pin)
            if self._employees.pin_exists(changes.pin, exclude_id=int(employee_id)):
                raise DuplicatePinError("PIN already in use by another employee.")

        self._employees.update(int(employee_id), changes)
        if changes.pin is not None:
            logger.info("employee %s PIN reassigned", employee_id)
        return self.get_employee(employee_id)

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete(int(employee_id)):
            raise NotFoundError("Employee not found.")
        logger.info("employee %s deleted", employee_id)

    def verify_pin(self, pin: Optional[str]) -> Employee:
        """Resolve an active employee from a PIN; the identity check of every kiosk call."""
        if not pin or not str(pin).strip():
            raise ValidationError("PIN is required.")
        employee = self._employees.get_active_by_pin(str(pin).strip())
        if not employee:
            logger.warning("PIN verification failed")
            raise AuthenticationError("Invalid PIN or inactive employee.")
        return employee
