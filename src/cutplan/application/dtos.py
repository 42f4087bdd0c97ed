"""Data transfer objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from cutplan.domain.value_objects import ClientInfo, CutRow, GroupingStrategy, StockSpec


@dataclass(frozen=True)
class OptimizeRequest:
    """Input for one optimization run.

    Per-request ``grouping`` and ``timeout_seconds`` override the
    command's settings when given.
    """

    stock: StockSpec
    cuts: tuple[CutRow, ...] = field(default_factory=tuple)
    client: ClientInfo | None = None
    grouping: GroupingStrategy | None = None
    timeout_seconds: float | None = None
