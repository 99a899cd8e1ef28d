"""CLI for bowling-split.

The single command is registered on a ``typer.Typer`` app and exposed via
the ``bowling-split`` console entry-point (and ``python -m bowling_split``).
"""

from __future__ import annotations

import logging
from typing import Annotated, Optional

import typer

from .pipeline import evaluate

app = typer.Typer(
    name="bowling-split",
    help="Tell whether the pins left standing after the first ball are a split.",
    add_completion=False,
)


@app.command(
    context_settings={"ignore_unknown_options": True},
)
def judge(
    pins: Annotated[
        Optional[list[str]],
        typer.Argument(help="Numbers (1–10) of the pins still standing.", show_default=False),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log each step to stderr.")
    ] = False,
) -> None:
    """Print one line describing the leave.

    Ten pins is a gutter ball, none is a strike.  Tokens such as ``-1`` are
    taken as pins, not options.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    result = evaluate(pins or [])
    print(result.message)


def main() -> None:
    """Console entry point."""
    app()
