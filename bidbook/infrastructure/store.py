"""
Durable single-table store for accepted bids.

The store trusts its caller: it never validates what it is asked to append.
Every failure of the underlying SQLite file surfaces as a PersistenceError.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import List, Optional

from bidbook.domain.errors import PersistenceError
from bidbook.domain.models import Bid
from bidbook.infrastructure.db_factory import resolve_db_path, sqlite_connection
from bidbook.utils.logging import get_logger

log = get_logger(__name__)

CREATE_TABLE_SQL = (
    "CREATE TABLE IF NOT EXISTS bids ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "bidderName TEXT NOT NULL, "
    "amount REAL NOT NULL)"
)
INSERT_SQL = "INSERT INTO bids (bidderName, amount) VALUES (?, ?)"
SELECT_ALL_SQL = "SELECT bidderName, amount FROM bids ORDER BY id"
COUNT_SQL = "SELECT COUNT(*) FROM bids"
IN_MEMORY_PATH = ":memory:"


class BidStore:
    """
    Append-only SQLite table of bids, read back in insertion order.

    A connection is opened per operation and closed before the call returns,
    so the store needs a database file: SQLite in-memory databases vanish
    with their connection and are refused.
    """

    def __init__(self, db_path: Optional[str | Path] = None) -> None:
        self.db_path = resolve_db_path(db_path)
        if self.db_path == IN_MEMORY_PATH:
            raise ValueError(f"BidStore needs a database file, got {self.db_path!r}")

    def _fail(self, operation: str, exc: Exception) -> PersistenceError:
        log.warning(
            f"[STORE FAILED] {operation}",
            extra={"operation": operation, "db_path": self.db_path, "error": str(exc)},
        )
        return PersistenceError(operation, str(exc))

    def initialize(self) -> None:
        """
        Create the bids table if it does not exist. Safe to call on every start.
        """
        try:
            with sqlite_connection(self.db_path) as conn:
                with conn:
                    conn.execute(CREATE_TABLE_SQL)
        except (sqlite3.Error, OSError) as exc:
            raise self._fail("initialize", exc) from exc
        log.debug("Bid store initialized", extra={"db_path": self.db_path})

    def append(self, bid: Bid) -> None:
        """
        Insert one bid in its own transaction; nothing is written on failure.
        """
        try:
            with sqlite_connection(self.db_path) as conn:
                with conn:
                    conn.execute(INSERT_SQL, (bid.bidder_name, bid.amount))
        except (sqlite3.Error, OSError) as exc:
            raise self._fail("append", exc) from exc
        log.debug(
            "Bid appended",
            extra={"bidder_name": bid.bidder_name, "amount": bid.amount},
        )

    def list_all(self) -> List[Bid]:
        """
        Return every stored bid, oldest first.
        """
        try:
            with sqlite_connection(self.db_path) as conn:
                rows = conn.execute(SELECT_ALL_SQL).fetchall()
        except (sqlite3.Error, OSError) as exc:
            raise self._fail("list_all", exc) from exc
        log.debug("Bids listed", extra={"rows": len(rows)})
        return [Bid(bidder_name=name, amount=amount) for name, amount in rows]

    def count(self) -> int:
        """Number of stored bids."""
        try:
            with sqlite_connection(self.db_path) as conn:
                (total,) = conn.execute(COUNT_SQL).fetchone()
        except (sqlite3.Error, OSError) as exc:
            raise self._fail("count", exc) from exc
        return int(total)


__all__ = ["BidStore"]
