from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, roll back on any error.

    Driver errors are surfaced as :class:`StoreError` so callers only deal
    with domain errors.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.exception("Could not open a MySQL connection")
        raise StoreError("Could not connect to the database.") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.exception("MySQL operation failed")
        raise StoreError("Database operation failed.") from e
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
