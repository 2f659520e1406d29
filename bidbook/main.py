from __future__ import annotations

import sys
from pathlib import Path

import typer

from bidbook.config import get_settings
from bidbook.controller import build_controller
from bidbook.domain.errors import PersistenceError, ValidationError
from bidbook.infrastructure.store import BidStore
from bidbook.listeners import DisplayListener, EchoListener, LoggingListener
from bidbook.reporter import print_bids
from bidbook.utils.logging import configure_logging

app = typer.Typer(help="Place bids and review the running bid list.")

EXIT_INVALID = 1
EXIT_STORAGE = 2


def _setup_logging() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values and the number of stored bids.

    Read-only: a missing database file is reported as zero bids, not created.
    """
    _setup_logging()
    settings = get_settings()
    total = 0
    try:
        if Path(settings.db_path).exists():
            total = BidStore(settings.db_path).count()
    except PersistenceError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_STORAGE)
    typer.echo(
        f"DB={settings.db_path} | env={settings.app_env} | "
        f"log_level={settings.log_level} | bids={total}"
    )


@app.command()
def place(
    name: str = typer.Argument(..., help="Bidder name."),
    amount: str = typer.Argument(..., help="Bid amount, a positive number."),
) -> None:
    """
    Validate, store and display one bid.
    """
    _setup_logging()
    try:
        parsed_amount = float(amount)
    except ValueError:
        typer.echo("Please enter a valid amount.", err=True)
        raise typer.Exit(EXIT_INVALID)

    try:
        controller = build_controller(listeners=[LoggingListener(), EchoListener()])
        controller.submit(name, parsed_amount)
    except ValidationError:
        typer.echo("Invalid Bid!", err=True)
        raise typer.Exit(EXIT_INVALID)
    except PersistenceError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_STORAGE)


@app.command("list")
def list_bids(
    table: bool = typer.Option(False, "--table", "-t", help="Render a table instead of plain lines."),
) -> None:
    """
    Replay every stored bid, oldest first.
    """
    _setup_logging()
    display = DisplayListener()
    try:
        controller = build_controller(listeners=[display])
        controller.replay_all()
    except PersistenceError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_STORAGE)

    if table:
        print_bids(display.bids)
        return
    for line in display.lines:
        typer.echo(line)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
