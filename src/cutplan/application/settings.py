"""Optimizer settings shared by the CLI and the REST API."""

from __future__ import annotations

from dataclasses import dataclass, replace

from cutplan.domain.services.pattern_search import DEFAULT_TOLERANCE
from cutplan.domain.value_objects import GroupingStrategy


@dataclass(frozen=True)
class OptimizerSettings:
    """Tunable behaviour of an optimization run.

    Attributes:
        tolerance: Floating-point slack for fit tests and comparisons.
        grouping: How identical patterns are detected.
        timeout_seconds: Time limit per run, or None for no limit.
        max_cut_rows: Maximum number of cut rows per request, or None.
        max_pieces: Maximum number of pieces per request after expanding
            row quantities, or None.
    """

    tolerance: float = DEFAULT_TOLERANCE
    grouping: GroupingStrategy = GroupingStrategy.ORDERED
    timeout_seconds: float | None = 30.0
    max_cut_rows: int | None = None
    max_pieces: int | None = 10_000

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError("Tolerance must be non-negative")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("Timeout must be positive")
        if self.max_cut_rows is not None and self.max_cut_rows < 1:
            raise ValueError("Maximum cut rows must be at least 1")
        if self.max_pieces is not None and self.max_pieces < 1:
            raise ValueError("Maximum pieces must be at least 1")

    def with_overrides(
        self,
        grouping: GroupingStrategy | None = None,
        timeout_seconds: float | None = None,
    ) -> OptimizerSettings:
        """Return a copy with the non-None overrides applied."""
        changes: dict[str, object] = {}
        if grouping is not None:
            changes["grouping"] = grouping
        if timeout_seconds is not None:
            changes["timeout_seconds"] = timeout_seconds
        return replace(self, **changes)
