"""Schema bootstrap: runs ``database/schema.sql`` against the configured server."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

_CREATE_DB_OR_USE = re.compile(r"(?im)^\s*(CREATE\s+DATABASE\b|USE\b).*?;\s*$")
_LINE_COMMENT = re.compile(r"(?m)^\s*--.*$")


def _prepare(sql: str) -> str:
    # The database name comes from DB_CONFIG, not from the file.
    return _LINE_COMMENT.sub("", _CREATE_DB_OR_USE.sub("", sql))


def iter_sql_statements(sql: str) -> Iterator[str]:
    """Split a script on ``;`` outside of quoted strings."""
    start = 0
    quote = None
    i = 0
    while i < len(sql):
        ch = sql[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ";":
            stmt = sql[start:i].strip()
            if stmt:
                yield stmt
            start = i + 1
        i += 1

    tail = sql[start:].strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{conn_factory.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path) -> None:
    """Create the admins, employees and time_entries tables if missing."""
    ensure_database_exists(conn_factory)

    schema_path = Path(schema_path)
    statements = list(iter_sql_statements(_prepare(schema_path.read_text(encoding="utf-8"))))

    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema applied from %s (%d statements)", schema_path, len(statements))


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    conn = conn_factory.connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
