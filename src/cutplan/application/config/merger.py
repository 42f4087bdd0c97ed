"""Merging of CLI options into job configurations.

Precedence is CLI options > job file values > defaults. Only options
that were actually given (not None) override the file.
"""

from typing import Any

from cutplan.application.config.loader import load_job_from_dict
from cutplan.application.config.schemas import JobConfiguration
from cutplan.domain.value_objects import CutRow, GroupingStrategy


def merge_job_with_cli(
    job: JobConfiguration | None,
    *,
    stock_length: float | None = None,
    stock_quantity: int | None = None,
    stock_label: str | None = None,
    cuts: list[CutRow] | None = None,
    grouping: GroupingStrategy | None = None,
    timeout_seconds: float | None = None,
) -> JobConfiguration:
    """Apply CLI overrides to ``job``.

    With no job file, the job is built from the CLI options alone, and
    the stock and at least one cut must then be given on the command line.
    Cuts given on the command line replace the file's cuts.

    Returns:
        A new, validated JobConfiguration.

    Raises:
        ConfigError: If the merged data does not form a valid job.

    Example:
        >>> merged = merge_job_with_cli(job, stock_quantity=20)
        >>> merged.stock.quantity
        20
    """
    data: dict[str, Any] = job.model_dump(mode="json") if job else {}

    stock = dict(data.get("stock") or {})
    if stock_length is not None:
        stock["length"] = stock_length
    if stock_quantity is not None:
        stock["quantity"] = stock_quantity
    if stock_label is not None:
        stock["label"] = stock_label
    data["stock"] = stock

    if cuts is not None:
        data["cuts"] = [
            {"quantity": c.quantity, "length": c.length, "label": c.label} for c in cuts
        ]
    data.setdefault("cuts", [])

    options = dict(data.get("options") or {})
    if grouping is not None:
        options["grouping"] = grouping.value
    if timeout_seconds is not None:
        options["timeout_seconds"] = timeout_seconds
    data["options"] = options

    return load_job_from_dict(data)
