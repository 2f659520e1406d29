"""
bidbook - validate, store and announce bids.

A small pipeline behind a bid-entry form:

- Acceptance rules for a bidder name and amount
- An append-only SQLite table of accepted bids
- Synchronous fan-out of accepted bids to registered listeners
- Startup replay of stored bids through the same listeners

The form itself lives outside this package; `bidbook.main` offers a terminal
front end over the same controller.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from bidbook.config import Settings, get_settings
from bidbook.controller import BidController, build_controller
from bidbook.domain import Bid, BidError, PersistenceError, ValidationError, is_valid
from bidbook.infrastructure import BidStore
from bidbook.listeners import (
    AbstractBidListener,
    BidListener,
    CallbackListener,
    DisplayListener,
)
from bidbook.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Pipeline
    "BidController",
    "build_controller",
    "BidStore",
    # Domain
    "Bid",
    "is_valid",
    "BidError",
    "PersistenceError",
    "ValidationError",
    # Listeners
    "BidListener",
    "AbstractBidListener",
    "CallbackListener",
    "DisplayListener",
    # Logging
    "configure_logging",
    "get_logger",
]
