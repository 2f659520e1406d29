"""
Exceptions raised by the bid pipeline.

The store and the controller raise these instead of logging and carrying on;
callers decide what the user sees.
"""

from __future__ import annotations

from typing import Any


class BidError(Exception):
    """Base class for every error raised by bidbook."""


class ValidationError(BidError):
    """A submitted name/amount pair failed the acceptance rules."""

    def __init__(self, bidder_name: Any, amount: Any) -> None:
        self.bidder_name = bidder_name
        self.amount = amount
        super().__init__(f"Invalid Bid! (bidder_name={bidder_name!r}, amount={amount!r})")


class PersistenceError(BidError):
    """The bid store could not be opened, written or read."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"Bid store {operation} failed: {message}")


__all__ = ["BidError", "ValidationError", "PersistenceError"]
