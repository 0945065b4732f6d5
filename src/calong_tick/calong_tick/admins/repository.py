from __future__ import annotations

from typing import Optional, Protocol

from .model import Admin


class AdminRepository(Protocol):
    def any_exists(self) -> bool:
        raise NotImplementedError

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        raise NotImplementedError

    def get_by_login(self, login: str) -> Optional[Admin]:
        """Match ``login`` against username or email."""

        raise NotImplementedError

    def username_or_email_taken(self, username: str, email: str) -> bool:
        raise NotImplementedError

    def create(self, *, username: str, email: str, password_hash: str) -> int:
        """Insert; raises DuplicateAdminError on a username/email clash."""

        raise NotImplementedError
