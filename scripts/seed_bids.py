"""
Sample data script for bidbook.

Generates deterministic pseudo-random bids and submits them through the
controller, so seeded rows satisfy the same acceptance rules as user input.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional, Tuple

import typer

from bidbook.config import get_settings
from bidbook.controller import build_controller
from bidbook.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Seed the bid store with sample bids.")
log = get_logger(__name__)

_FIRST_NAMES = ["Alice", "Bob", "Carol", "Dmitri", "Esi", "Farah", "Gus", "Hana"]


def _generate_bids(count: int, seed: int) -> List[Tuple[str, float]]:
    rng = random.Random(seed)
    return [
        (rng.choice(_FIRST_NAMES), round(rng.uniform(1, 1_000), 2))
        for _ in range(count)
    ]


@app.command()
def main(
    count: int = typer.Option(10, "--count", "-n", min=1, help="Number of bids to place."),
    seed: int = typer.Option(42, "--seed", help="Random seed for reproducible data."),
    db_path: Optional[Path] = typer.Option(None, "--db-path", help="Override BID_DB_PATH."),
) -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    if db_path is not None:
        settings = settings.model_copy(update={"db_path": str(db_path)})

    controller = build_controller(settings)
    for name, amount in _generate_bids(count, seed):
        controller.submit(name, amount)
    log.info("Seeded bids", extra={"rows": count, "db_path": settings.db_path})
    typer.echo(f"Placed {count} bids into {settings.db_path}.")


if __name__ == "__main__":
    app()
