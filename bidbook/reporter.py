from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from bidbook.domain.models import Bid


def print_bids(bids: Sequence[Bid], console: Optional[Console] = None) -> None:
    """
    Render stored bids as a rich table, in the order they were placed.
    """
    console = console or Console()

    if not bids:
        console.print("[yellow]No bids placed yet.[/yellow]")
        return

    table = Table(
        title="Bids",
        box=box.ROUNDED,
        caption=f"{len(bids)} bid(s), oldest first",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Bidder", style="cyan", no_wrap=True)
    table.add_column("Amount", justify="right", style="bold green")

    for position, bid in enumerate(bids, start=1):
        table.add_row(str(position), bid.bidder_name, f"${bid.amount}")

    console.print(table)


__all__ = ["print_bids"]
