from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Sequence

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Short-lived connection + cursor; commits on success, rolls back on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        logger.warning("Rolling back transaction on %s", conn_factory.config.database)
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """Run a read query and return its rows as dicts."""
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return fetchall(cur)
