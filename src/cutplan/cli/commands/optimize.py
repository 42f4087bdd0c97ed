"""Optimize command: compute and print a cutting plan.

The job can come from a JSON file (``--config``), from command-line
options, or from both, with command-line options taking precedence.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cutplan.application import OptimizeCutsCommand, OptimizerSettings
from cutplan.application.config import (
    ConfigError,
    job_to_request,
    load_job,
    merge_job_with_cli,
)
from cutplan.cli.commands.display import display_config_error
from cutplan.domain import CutPlanError, CutRow, GroupingStrategy
from cutplan.infrastructure import JsonPlanExporter, PlanFormatter

logger = logging.getLogger(__name__)


def parse_cut_spec(spec: str) -> CutRow:
    """Parse a ``--cut`` value.

    Accepted forms are ``LENGTH``, ``QTYxLENGTH`` and either of those
    followed by ``:LABEL``.

    Examples:
        >>> parse_cut_spec("3x60:Shelf")
        CutRow(quantity=3, length=60.0, label='Shelf')
        >>> parse_cut_spec("125.5")
        CutRow(quantity=1, length=125.5, label='')
    """
    body, _, label = spec.partition(":")
    quantity_text, sep, length_text = body.lower().partition("x")
    if not sep:
        quantity_text, length_text = "1", quantity_text
    try:
        quantity = int(quantity_text.strip())
        length = float(length_text.strip())
    except ValueError:
        raise typer.BadParameter(
            f"Invalid cut '{spec}'. Use QTYxLENGTH[:LABEL], e.g. 3x60:Shelf"
        )
    return CutRow(quantity=quantity, length=length, label=label.strip())


def optimize_command(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a JSON job file"),
    ] = None,
    stock_length: Annotated[
        float | None,
        typer.Option("--stock-length", "-l", help="Length of each stock bar"),
    ] = None,
    stock_quantity: Annotated[
        int | None,
        typer.Option("--stock-quantity", "-q", help="Number of stock bars available"),
    ] = None,
    stock_label: Annotated[
        str | None,
        typer.Option("--stock-label", help="Material description"),
    ] = None,
    cuts: Annotated[
        list[str] | None,
        typer.Option(
            "--cut",
            help="Required cut as QTYxLENGTH[:LABEL]; repeat for several rows",
        ),
    ] = None,
    grouping: Annotated[
        GroupingStrategy | None,
        typer.Option("--grouping", "-g", help="Pattern grouping strategy"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", "-t", help="Time limit in seconds"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the plan to this file"),
    ] = None,
) -> None:
    """Compute a cutting plan that minimizes waste.

    Exit codes:
        0 - Plan computed
        1 - Invalid job, oversized piece, insufficient stock, or timeout

    Example:
        cutplan optimize -l 6000 -q 10 --cut 4x1200:Frame --cut 2x850:Rail
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)

    cut_rows = [parse_cut_spec(c) for c in cuts] if cuts else None

    try:
        job = load_job(config_file) if config_file else None
        job = merge_job_with_cli(
            job,
            stock_length=stock_length,
            stock_quantity=stock_quantity,
            stock_label=stock_label,
            cuts=cut_rows,
            grouping=grouping,
            timeout_seconds=timeout,
        )
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    command = OptimizeCutsCommand(OptimizerSettings())
    try:
        plan = command.execute(job_to_request(job))
    except CutPlanError as e:
        logger.debug("Optimization failed: %s", e.error_type)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        rendered = JsonPlanExporter().export(plan)
    else:
        rendered = PlanFormatter().format(plan)

    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(rendered + "\n", encoding="utf-8")
        typer.echo(f"Plan written to {output_file}")
    else:
        typer.echo(rendered)
