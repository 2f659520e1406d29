"""
Listener interfaces for accepted-bid notifications.

Any object with an `on_bid_placed(bid)` method satisfies BidListener; plain
functions can be registered through CallbackListener. Listeners are called
synchronously, in registration order, with a bid that is already stored.
"""

from __future__ import annotations

import abc
from typing import Callable, Protocol, runtime_checkable

from bidbook.domain.models import Bid


@runtime_checkable
class BidListener(Protocol):
    """
    Common interface all bid listeners must implement.
    """

    def on_bid_placed(self, bid: Bid) -> None:
        """
        Receive one accepted, persisted bid.

        Implementations should not raise for a well-formed Bid: an exception
        here propagates to whoever called `submit` or `replay_all`.
        """
        ...


class AbstractBidListener(abc.ABC):
    """
    Optional ABC helper for class-based listeners.
    """

    @abc.abstractmethod
    def on_bid_placed(self, bid: Bid) -> None:  # pragma: no cover - interface only
        """Handle one accepted bid."""
        raise NotImplementedError


class CallbackListener(AbstractBidListener):
    """Adapts a plain `Callable[[Bid], None]` to the listener interface."""

    def __init__(self, callback: Callable[[Bid], None]) -> None:
        self.callback = callback

    def on_bid_placed(self, bid: Bid) -> None:
        self.callback(bid)

    def __repr__(self) -> str:
        return f"CallbackListener({self.callback!r})"


__all__ = [
    "AbstractBidListener",
    "BidListener",
    "CallbackListener",
]
