from __future__ import annotations

from typing import Optional

from ..core.constants import PIN_LENGTH
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required.")
    return value.strip()


def require_pin(value: Optional[str]) -> str:
    pin = (value or "").strip()
    if not pin:
        raise ValidationError("PIN is required.")
    if len(pin) != PIN_LENGTH or not pin.isdigit():
        raise ValidationError(f"PIN must be {PIN_LENGTH} digits.")
    return pin
