from __future__ import annotations

from typing import Any, Optional

import mysql.connector

from ..core.exceptions import DuplicateAdminError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, is_duplicate_key
from .model import Admin
from .repository import AdminRepository


def _to_admin(r: dict[str, Any]) -> Admin:
    return Admin(
        admin_id=int(r["id"]),
        username=r["username"],
        email=r["email"],
        password_hash=r["password"],
        created_at=r.get("created_at"),
    )


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def any_exists(self) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM admins LIMIT 1")
            return fetchone(cur) is not None

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, username, email, password, created_at FROM admins WHERE id=%s", (int(admin_id),))
            r = fetchone(cur)
            return _to_admin(r) if r else None

    def get_by_login(self, login: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, username, email, password, created_at
                FROM admins
                WHERE username=%s OR email=%s
                LIMIT 1
                """,
                (login, login),
            )
            r = fetchone(cur)
            return _to_admin(r) if r else None

    def username_or_email_taken(self, username: str, email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id FROM admins WHERE username=%s OR email=%s", (username, email))
            return fetchone(cur) is not None

    def create(self, *, username: str, email: str, password_hash: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO admins(username, email, password) VALUES(%s,%s,%s)",
                    (username, email, password_hash),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateAdminError("Admin with this username or email already exists.")
            raise
