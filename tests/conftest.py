"""
Pytest configuration for bidbook.

Provides fixtures for:
- A throwaway SQLite database under tmp_path
- Initialized stores and controllers over that database
- Settings pointed at the test database
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator, List

import pytest

from bidbook.config import Settings, get_settings
from bidbook.controller import BidController
from bidbook.domain.models import Bid
from bidbook.infrastructure.store import BidStore


class RecordingListener:
    """Listener that remembers every bid it was handed, in order."""

    def __init__(self) -> None:
        self.calls: List[Bid] = []

    def on_bid_placed(self, bid: Bid) -> None:
        self.calls.append(bid)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "bids.db"


@pytest.fixture
def store(db_path: Path) -> BidStore:
    """
    Initialized store over an empty database file.
    """
    bid_store = BidStore(db_path)
    bid_store.initialize()
    return bid_store


@pytest.fixture
def recorder() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def controller(store: BidStore, recorder: RecordingListener) -> BidController:
    bid_controller = BidController(store)
    bid_controller.register_listener(recorder)
    return bid_controller


@pytest.fixture
def test_settings(db_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Settings, None, None]:
    """
    Point BID_DB_PATH at the test database and reset the settings cache.
    """
    monkeypatch.setenv("BID_DB_PATH", str(db_path))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    try:
        yield get_settings()
    finally:
        get_settings.cache_clear()
