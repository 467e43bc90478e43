from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional

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


def normalize_mysql_decimal(value: Any) -> Optional[Decimal]:
    """Normalize DECIMAL columns across connector implementations.

    mysql-connector returns DECIMAL as decimal.Decimal, but the pure-python
    driver may hand back str or bytes depending on settings.
    """

    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bytes):
        value = value.decode("ascii")
    return Decimal(str(value))
