from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.constants import MYSQL_DUPLICATE_KEY
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def is_duplicate_key(err: Exception, key_name: Optional[str] = None) -> bool:
    """True when ``err`` is a MySQL unique-constraint violation.

    ``key_name`` narrows the match to one index (MySQL names it in the message).
    """
    if not isinstance(err, mysql.connector.IntegrityError):
        return False
    if getattr(err, "errno", None) != MYSQL_DUPLICATE_KEY:
        return False
    if key_name is None:
        return True
    return key_name in str(getattr(err, "msg", "") or err)
