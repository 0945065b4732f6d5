from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeChanges, NewEmployee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this protocol, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_active_by_pin(self, pin: str) -> Optional[Employee]:
        raise NotImplementedError

    def pin_exists(self, pin: str, *, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError

    def create(self, employee: NewEmployee, *, pin: str, created_by: Optional[int]) -> int:
        """Insert; raises DuplicatePinError if ``pin`` is taken."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees, newest first."""

        raise NotImplementedError

    def update(self, employee_id: int, changes: EmployeeChanges) -> bool:
        """Apply the set fields; raises DuplicatePinError if a new PIN is taken."""

        raise NotImplementedError

    def delete(self, employee_id: int) -> bool:
        """Delete the employee; owned time entries go with it."""

        raise NotImplementedError
