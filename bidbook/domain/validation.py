"""
Acceptance rules for incoming bids.

`is_valid` is a pure predicate: it never raises, whatever it is handed, and
leaves the decision of how to report a rejection to the caller.
"""

from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real
from typing import Any, Optional


def as_amount(amount: Any) -> Optional[float]:
    """
    Return `amount` as the float that will be stored, or None when that float
    is not finite and strictly positive.

    The check runs on the converted value: a Decimal or Fraction too small
    or too large for a float is rejected rather than stored as 0.0 or inf.
    """
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        return None
    try:
        value = float(amount)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def is_valid(bidder_name: Any, amount: Any) -> bool:
    """
    Return True iff the name is non-blank after trimming and the amount is a
    finite number strictly greater than zero.

    No upper bound is applied and duplicate names are accepted.
    """
    if not isinstance(bidder_name, str) or not bidder_name.strip():
        return False
    return as_amount(amount) is not None


__all__ = ["as_amount", "is_valid"]
