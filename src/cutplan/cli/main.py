"""Typer CLI for cutting plans."""

import logging
from typing import Annotated

import typer

from cutplan.cli.commands import optimize_command, serve_command, validate_command

app = typer.Typer(
    name="cutplan",
    help="Plan cuts of stock bars into required pieces with minimal waste.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Plan cuts of stock bars into required pieces with minimal waste."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="optimize")(optimize_command)
app.command(name="validate")(validate_command)
app.command(name="serve")(serve_command)


if __name__ == "__main__":
    app()
