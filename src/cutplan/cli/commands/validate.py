"""Validate command for checking job files.

Checks a JSON job file against the job schema and runs the same stock
and cut checks the optimizer applies before searching.
"""

from pathlib import Path
from typing import Annotated

import typer

from cutplan.application import OptimizerSettings
from cutplan.application.config import ConfigError, job_to_request, load_job
from cutplan.cli.commands.display import display_config_error
from cutplan.domain import ValidationError, normalize


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a cutting job file.

    Exit codes:
        0 - Job is valid
        1 - Job has errors

    Example:
        cutplan validate job.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        job = load_job(config_file)
    except ConfigError as e:
        display_config_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    request = job_to_request(job)
    settings = OptimizerSettings()
    try:
        pool = normalize(
            request.stock,
            request.cuts,
            max_rows=settings.max_cut_rows,
            max_pieces=settings.max_pieces,
        )
    except ValidationError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  {e.field or 'job'}: {e.message}", err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Validation passed: {len(pool)} pieces from {len(job.cuts)} cut rows, "
        f"{job.stock.quantity} bars of {job.stock.length:g} in stock."
    )
