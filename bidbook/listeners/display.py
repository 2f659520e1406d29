"""
Stock listeners used by the terminal front end.

DisplayListener keeps the running list of display lines the way the bid list
widget does; EchoListener prints each line as it arrives; LoggingListener
records accepted bids in the application log.
"""

from __future__ import annotations

from typing import Callable, List

import typer

from bidbook.domain.models import Bid
from bidbook.listeners.abstract import AbstractBidListener
from bidbook.utils.logging import get_logger

log = get_logger(__name__)


class DisplayListener(AbstractBidListener):
    """
    Accumulates one display line per notified bid, in notification order.
    """

    def __init__(self) -> None:
        self.bids: List[Bid] = []

    def on_bid_placed(self, bid: Bid) -> None:
        self.bids.append(bid)

    @property
    def lines(self) -> List[str]:
        return [str(bid) for bid in self.bids]

    def render(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


class EchoListener(AbstractBidListener):
    """Writes each accepted bid's display line to the terminal."""

    def __init__(self, echo: Callable[[str], None] = typer.echo) -> None:
        self._echo = echo

    def on_bid_placed(self, bid: Bid) -> None:
        self._echo(str(bid))


class LoggingListener(AbstractBidListener):
    """Records each accepted bid in the application log at INFO."""

    def on_bid_placed(self, bid: Bid) -> None:
        log.info(
            f"[BID PLACED] {bid}",
            extra={"bidder_name": bid.bidder_name, "amount": bid.amount},
        )


__all__ = ["DisplayListener", "EchoListener", "LoggingListener"]
