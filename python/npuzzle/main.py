"""N-Puzzle sliding tile game.

Usage::

    npuzzle                         # 3×3 in the Rich terminal
    npuzzle -s 4                    # 4×4
    npuzzle --seed 7 --delay-max 1  # reproducible shuffle, quicker reveal
"""

import logging
from typing import Optional

import typer

from npuzzle.backend.config import (
    DEFAULT_SIZE,
    REVEAL_DELAY_OFFSET,
    REVEAL_DELAY_SPAN,
    PuzzleConfig,
)

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=2, max=8,
        help="Grid size (2-8).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle and reveal delays.",
    ),
    delay_min: float = typer.Option(
        REVEAL_DELAY_OFFSET, "--delay-min",
        min=0.0,
        help="Shortest reveal delay per tile, in seconds.",
    ),
    delay_max: float = typer.Option(
        REVEAL_DELAY_OFFSET + REVEAL_DELAY_SPAN, "--delay-max",
        min=0.0,
        help="Longest reveal delay per tile, in seconds.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity to stderr.",
    ),
) -> None:
    """N-Puzzle sliding tile game."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = PuzzleConfig(
            size=size, delay_min=delay_min, delay_max=delay_max, seed=seed
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    from npuzzle.frontend.cli.rich.app import run

    run(config)


if __name__ == "__main__":
    app()
