from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import EmployeeRole, EmployeeType


@dataclass(frozen=True)
class Employee:
    """Domain entity: restaurant employee identified at the terminal by a PIN."""

    employee_id: int
    name: str
    pin: str
    employee_type: EmployeeType
    role: EmployeeRole
    hourly_rate: Decimal
    phone: Optional[str] = None
    email: Optional[str] = None
    is_active: bool = True
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "pin": self.pin,
            "employee_type": self.employee_type.value,
            "role": self.role.value,
            "hourly_rate": self.hourly_rate,
            "phone": self.phone,
            "email": self.email,
            "is_active": self.is_active,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class NewEmployee:
    name: str
    employee_type: EmployeeType
    role: EmployeeRole = EmployeeRole.WAITER
    hourly_rate: Decimal = Decimal("0.00")
    phone: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class EmployeeChanges:
    """Partial edit; None keeps the stored value."""

    name: Optional[str] = None
    employee_type: Optional[EmployeeType] = None
    role: Optional[EmployeeRole] = None
    hourly_rate: Optional[Decimal] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_active: Optional[bool] = None
    pin: Optional[str] = None

    def as_columns(self) -> dict:
        values = {
            "name": self.name,
            "employee_type": self.employee_type.value if self.employee_type else None,
            "role": self.role.value if self.role else None,
            "hourly_rate": self.hourly_rate,
            "phone": self.phone,
            "email": self.email,
            "is_active": self.is_active,
            "pin": self.pin,
        }
        return {k: v for k, v in values.items() if v is not None}
