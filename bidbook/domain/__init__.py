"""
Domain package for bidbook.

Exports the Bid model, the acceptance rules and the error taxonomy. Keep this
package focused on data definitions and validation concerns.
"""

from bidbook.domain.errors import BidError, PersistenceError, ValidationError
from bidbook.domain.models import Bid
from bidbook.domain.validation import as_amount, is_valid

__all__ = [
    "Bid",
    "BidError",
    "PersistenceError",
    "ValidationError",
    "as_amount",
    "is_valid",
]
