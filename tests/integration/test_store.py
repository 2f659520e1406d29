from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from bidbook.domain.errors import PersistenceError
from bidbook.domain.models import Bid
from bidbook.infrastructure.db_factory import sqlite_connection
from bidbook.infrastructure.store import BidStore


def _schema(db_path: Path) -> list:
    with sqlite_connection(db_path) as conn:
        return conn.execute("PRAGMA table_info(bids)").fetchall()


def _reject_inserts(db_path: Path) -> None:
    with sqlite_connection(db_path) as conn:
        with conn:
            conn.execute(
                "CREATE TRIGGER reject_insert BEFORE INSERT ON bids "
                "BEGIN SELECT RAISE(ABORT, 'disk full'); END"
            )


def test_initialize_creates_bids_table(store: BidStore, db_path: Path) -> None:
    columns = [(row[1], row[2], row[3], row[5]) for row in _schema(db_path)]

    assert columns == [
        ("id", "INTEGER", 0, 1),
        ("bidderName", "TEXT", 1, 0),
        ("amount", "REAL", 1, 0),
    ]
    assert store.list_all() == []


def test_initialize_is_idempotent(store: BidStore, db_path: Path) -> None:
    store.append(Bid(bidder_name="Bob", amount=25.5))
    schema_before = _schema(db_path)

    store.initialize()
    store.initialize()

    assert _schema(db_path) == schema_before
    assert store.list_all() == [Bid(bidder_name="Bob", amount=25.5)]


def test_append_then_list_all_round_trips_last_bid(store: BidStore) -> None:
    store.append(Bid(bidder_name="Ann", amount=3.0))
    bid = Bid(bidder_name="Zoë O'Brien", amount=1234.56)

    store.append(bid)

    assert store.list_all()[-1] == bid


def test_list_all_preserves_insertion_order(store: BidStore) -> None:
    bids = [
        Bid(bidder_name="Zed", amount=900.0),
        Bid(bidder_name="Amy", amount=0.5),
        Bid(bidder_name="Mia", amount=42.0),
        Bid(bidder_name="Amy", amount=0.5),
    ]
    for bid in bids:
        store.append(bid)

    assert store.list_all() == bids
    assert store.count() == len(bids)


def test_store_survives_reopening(store: BidStore, db_path: Path) -> None:
    store.append(Bid(bidder_name="Bob", amount=25.5))

    reopened = BidStore(db_path)
    reopened.initialize()

    assert reopened.list_all() == [Bid(bidder_name="Bob", amount=25.5)]


def test_append_failure_raises_and_writes_nothing(store: BidStore, db_path: Path) -> None:
    store.append(Bid(bidder_name="Bob", amount=25.5))
    _reject_inserts(db_path)

    with pytest.raises(PersistenceError, match="disk full") as excinfo:
        store.append(Bid(bidder_name="Alice", amount=50.0))

    assert excinfo.value.operation == "append"
    assert isinstance(excinfo.value.__cause__, sqlite3.Error)
    assert store.list_all() == [Bid(bidder_name="Bob", amount=25.5)]


def test_operations_on_uninitialized_store_raise(db_path: Path) -> None:
    store = BidStore(db_path)

    with pytest.raises(PersistenceError) as excinfo:
        store.list_all()
    assert excinfo.value.operation == "list_all"

    with pytest.raises(PersistenceError):
        store.append(Bid(bidder_name="Bob", amount=1.0))


def test_unopenable_database_raises_persistence_error(tmp_path: Path) -> None:
    store = BidStore(tmp_path)

    with pytest.raises(PersistenceError) as excinfo:
        store.initialize()

    assert excinfo.value.operation == "initialize"


def test_in_memory_database_is_refused() -> None:
    with pytest.raises(ValueError, match="database file"):
        BidStore(":memory:")
