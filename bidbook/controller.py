"""
Pipeline controller: validate, persist, then notify.

Usage (example from a front end):
    from bidbook.controller import build_controller
    from bidbook.listeners import DisplayListener

    display = DisplayListener()
    controller = build_controller(listeners=[display])
    controller.replay_all()            # populate the display from storage
    controller.submit("  Bob ", 25.5)  # display now ends with "Bob - $25.5"

Only a durably stored bid is announced. A rejected or unsaved bid raises
before any listener runs; a raising listener is not caught here.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from bidbook.config import Settings, get_settings
from bidbook.domain.errors import ValidationError
from bidbook.domain.models import Bid
from bidbook.domain.validation import as_amount, is_valid
from bidbook.infrastructure.store import BidStore
from bidbook.listeners.abstract import BidListener, CallbackListener
from bidbook.utils.logging import get_logger

log = get_logger(__name__)

ListenerLike = Union[BidListener, Callable[[Bid], None]]


class BidController:
    """
    Orchestrates the bid pipeline over a store and a growing listener list.
    """

    def __init__(
        self,
        store: BidStore,
        validator: Callable[[Any, Any], bool] = is_valid,
    ) -> None:
        self.store = store
        self._validator = validator
        self._listeners: List[BidListener] = []

    @property
    def listeners(self) -> Tuple[BidListener, ...]:
        return tuple(self._listeners)

    def register_listener(self, listener: ListenerLike) -> BidListener:
        """
        Add a listener to the fan-out list and return the registered object.

        Plain callables are wrapped in a CallbackListener. Listeners added
        while a bid is being announced start with the next bid.
        """
        if isinstance(listener, type):
            raise TypeError(f"Register a listener instance, not the class {listener.__name__}")
        if not isinstance(listener, BidListener):
            if not callable(listener):
                raise TypeError(f"Listener must define on_bid_placed or be callable, got {listener!r}")
            listener = CallbackListener(listener)
        self._listeners.append(listener)
        return listener

    def _notify(self, bid: Bid) -> None:
        for listener in tuple(self._listeners):
            listener.on_bid_placed(bid)

    def submit(self, raw_name: Any, raw_amount: Any) -> Bid:
        """
        Validate, store and announce one bid.

        Raises
        ------
        ValidationError
            The trimmed name is blank or the amount is not a finite positive
            number. Nothing is stored and no listener is called.
        PersistenceError
            The store rejected the write. No listener is called.
        """
        name = raw_name.strip() if isinstance(raw_name, str) else raw_name
        amount = as_amount(raw_amount)
        if amount is None or not self._validator(name, raw_amount):
            log.info(
                "[BID REJECTED]",
                extra={"bidder_name": repr(name), "amount": repr(raw_amount)},
            )
            raise ValidationError(name, raw_amount)

        bid = Bid(bidder_name=name, amount=amount)
        self.store.append(bid)
        log.info(
            f"[BID ACCEPTED] {bid}",
            extra={"bidder_name": bid.bidder_name, "amount": bid.amount},
        )
        self._notify(bid)
        return bid

    def replay_all(self) -> int:
        """
        Push every stored bid through the listeners, oldest first.

        Stored bids are trusted and not re-validated. Returns how many bids
        were replayed.
        """
        bids = self.store.list_all()
        for bid in bids:
            self._notify(bid)
        log.info("Replayed stored bids", extra={"rows": len(bids), "listeners": len(self._listeners)})
        return len(bids)


def build_controller(
    settings: Optional[Settings] = None,
    listeners: Iterable[ListenerLike] = (),
) -> BidController:
    """
    Create a store from settings, initialize it and register the listeners.
    """
    settings = settings or get_settings()
    store = BidStore(settings.db_path)
    store.initialize()
    controller = BidController(store)
    for listener in listeners:
        controller.register_listener(listener)
    return controller


__all__ = ["BidController", "ListenerLike", "build_controller"]
