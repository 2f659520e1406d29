"""
Domain models for bidbook.

Defines the Bid record persisted in the `bids` table. The table's identity
column is storage-internal and deliberately absent here.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class Bid(BaseModel):
    """
    One bidder's name and offered amount.
    """

    bidder_name: str = Field(..., description="Bidder name, already trimmed.")
    amount: float = Field(..., description="Offered amount, strictly positive.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def __str__(self) -> str:
        return f"{self.bidder_name} - ${self.amount}"


__all__ = ["Bid"]
