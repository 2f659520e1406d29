"""
SQLite connection factory utilities for bidbook.

Every store operation borrows a connection through `sqlite_connection`, which
guarantees the connection is closed on every exit path, including failures.
Transaction boundaries are left to the caller (`with conn:`).
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from bidbook.config import get_settings
from bidbook.utils.logging import get_logger

log = get_logger(__name__)


def resolve_db_path(override: Optional[str | Path] = None) -> str:
    """
    Return the database file to use: the override when given, else settings.
    """
    if override is not None:
        return str(override)
    return get_settings().db_path


def _ensure_parent_dir(db_path: str) -> None:
    parent = Path(db_path).parent
    if not parent.exists():
        parent.mkdir(parents=True, exist_ok=True)


@contextmanager
def sqlite_connection(db_path: Optional[str | Path] = None) -> Generator[sqlite3.Connection, None, None]:
    """
    Context manager yielding a dedicated SQLite connection.

    Example
    -------
        with sqlite_connection("bids.db") as conn:
            with conn:
                conn.execute("SELECT 1")

    Raises
    ------
    sqlite3.Error
        If the database file cannot be opened.
    OSError
        If the parent directory cannot be created.
    """
    path = resolve_db_path(db_path)
    _ensure_parent_dir(path)
    conn = sqlite3.connect(path)
    log.debug("Opened SQLite connection", extra={"db_path": path})
    try:
        yield conn
    finally:
        conn.close()


__all__ = ["resolve_db_path", "sqlite_connection"]
