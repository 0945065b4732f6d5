from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, Field

from ..core.enums import EmployeeRole, EmployeeType
from .model import EmployeeChanges, NewEmployee


def _pin_as_text(v: Any) -> Any:
    # Kiosk clients sometimes post the PIN as a JSON number.
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


PinText = Annotated[str, BeforeValidator(_pin_as_text)]
NewPin = Annotated[str, BeforeValidator(_pin_as_text), Field(pattern=r"^\d{6}$")]
Rate = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]


class PinPayload(BaseModel):
    pin: Optional[PinText] = None


class EmployeeCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    employee_type: EmployeeType
    role: Optional[EmployeeRole] = None
    hourly_rate: Optional[Rate] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=100)

    def to_new_employee(self) -> NewEmployee:
        return NewEmployee(
            name=self.name.strip(),
            employee_type=self.employee_type,
            role=self.role or EmployeeRole.WAITER,
            hourly_rate=self.hourly_rate if self.hourly_rate is not None else Decimal("0.00"),
            phone=self.phone or None,
            email=self.email or None,
        )


class EmployeeUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=100)
    employee_type: Optional[EmployeeType] = None
    role: Optional[EmployeeRole] = None
    hourly_rate: Optional[Rate] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    email: Optional[str] = Field(default=None, max_length=100)
    is_active: Optional[bool] = None
    pin: Optional[NewPin] = None

    def to_changes(self) -> EmployeeChanges:
        return EmployeeChanges(
            name=self.name.strip() if self.name is not None else None,
            employee_type=self.employee_type,
            role=self.role,
            hourly_rate=self.hourly_rate,
            phone=self.phone,
            email=self.email,
            is_active=self.is_active,
            pin=self.pin,
        )
