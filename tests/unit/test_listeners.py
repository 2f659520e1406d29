from __future__ import annotations

import logging

from bidbook.domain.models import Bid
from bidbook.listeners import BidListener, DisplayListener, EchoListener, LoggingListener


def test_stock_listeners_satisfy_protocol() -> None:
    assert isinstance(DisplayListener(), BidListener)
    assert isinstance(EchoListener(), BidListener)
    assert isinstance(LoggingListener(), BidListener)


def test_display_listener_renders_one_line_per_bid() -> None:
    display = DisplayListener()
    display.on_bid_placed(Bid(bidder_name="Bob", amount=25.5))
    display.on_bid_placed(Bid(bidder_name="Ann", amount=10.0))

    assert display.render() == "Bob - $25.5\nAnn - $10.0\n"


def test_echo_listener_writes_display_line() -> None:
    written: list[str] = []
    EchoListener(echo=written.append).on_bid_placed(Bid(bidder_name="Bob", amount=25.5))

    assert written == ["Bob - $25.5"]


def test_logging_listener_emits_structured_record(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="bidbook.listeners.display"):
        LoggingListener().on_bid_placed(Bid(bidder_name="Bob", amount=25.5))

    record = caplog.records[-1]
    assert record.bidder_name == "Bob"
    assert record.amount == 25.5
    assert record.getMessage() == "[BID PLACED] Bob - $25.5"
    assert LoggingListener.__doc__
