from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Admin:
    """Domain entity: the single administrator account."""

    admin_id: int
    username: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.admin_id,
            "username": self.username,
            "email": self.email,
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class AdminSession:
    """What signup/signin hand back to the client."""

    admin: Admin
    token: str

    def to_dict(self) -> dict:
        return {
            "id": self.admin.admin_id,
            "username": self.admin.username,
            "email": self.admin.email,
            "token": self.token,
        }
