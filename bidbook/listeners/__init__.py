"""
Listeners package for bidbook.

Re-exports the listener interfaces and the stock listeners so downstream code
can import from `bidbook.listeners` directly.
"""

from bidbook.listeners.abstract import (
    AbstractBidListener,
    BidListener,
    CallbackListener,
)
from bidbook.listeners.display import DisplayListener, EchoListener, LoggingListener

__all__ = [
    # Interfaces
    "AbstractBidListener",
    "BidListener",
    "CallbackListener",
    # Stock listeners
    "DisplayListener",
    "EchoListener",
    "LoggingListener",
]
