from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StoreError
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


def normalize_emp_id(value: Any) -> Optional[int]:
    """Normalize an ``emp_id`` column value to ``int``.

    Rows written by other tools may hold the id as BIGINT, DECIMAL, DOUBLE or
    a numeric string; the API only ever exposes plain ints.
    """

    if value is None:
        return None

    if isinstance(value, bool):
        raise TypeError(f"Unsupported emp_id value type: {type(value)!r}")

    if isinstance(value, int):
        return value

    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")

    if isinstance(value, str):
        return int(float(value.strip())) if "." in value else int(value.strip())

    return int(value)


@contextmanager
def store_step(step: str):
    """Re-raise connector errors as ``StoreError`` tagged with ``step``."""

    try:
        yield
    except mysql.connector.Error as e:
        raise StoreError(step, e) from e
