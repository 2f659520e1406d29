"""
Infrastructure package for bidbook.

Centralizes storage concerns (SQLite connection scoping and the bid store).
Keep this layer focused on I/O and resource management, decoupled from the
controller and listeners.
"""

from bidbook.infrastructure.db_factory import resolve_db_path, sqlite_connection
from bidbook.infrastructure.store import BidStore

__all__ = [
    "BidStore",
    "resolve_db_path",
    "sqlite_connection",
]
