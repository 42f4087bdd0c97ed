"""Domain entities produced while planning cuts.

All entities are frozen dataclasses. A plan is built once per request
and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .value_objects import ClientInfo, GroupingStrategy, Piece, StockSpec


@dataclass(frozen=True)
class Pattern:
    """The pieces assigned to one stock bar.

    Attributes:
        pieces: Pieces in cutting order.
        bar_length: Length of the bar the pieces are cut from.
        waste: Leftover length on the bar.
    """

    pieces: tuple[Piece, ...]
    bar_length: float
    waste: float

    def __post_init__(self) -> None:
        if self.waste < 0:
            raise ValueError("Pattern waste must be non-negative")

    @classmethod
    def from_pieces(cls, pieces: Sequence[Piece], bar_length: float) -> Pattern:
        """Build a pattern, deriving waste from the piece lengths.

        Waste is clamped at zero so that a fit accepted within tolerance
        never produces a negative remainder.
        """
        used = sum(p.length for p in pieces)
        return cls(
            pieces=tuple(pieces),
            bar_length=bar_length,
            waste=max(bar_length - used, 0.0),
        )

    @property
    def used_length(self) -> float:
        """Total length of the pieces on this bar."""
        return sum(p.length for p in self.pieces)

    @property
    def piece_count(self) -> int:
        return len(self.pieces)


@dataclass(frozen=True)
class PatternKey:
    """Canonical key used to detect identical patterns.

    Attributes:
        items: ``(label, length)`` pairs identifying the pattern.
    """

    items: tuple[tuple[str, float], ...]

    @classmethod
    def for_pattern(
        cls,
        pattern: Pattern,
        strategy: GroupingStrategy = GroupingStrategy.ORDERED,
    ) -> PatternKey:
        """Build the key of ``pattern`` under ``strategy``.

        ORDERED keeps placement order. UNORDERED sorts the pairs so that
        any permutation of the same pieces yields the same key.
        """
        items = tuple(piece.identity for piece in pattern.pieces)
        if strategy is GroupingStrategy.UNORDERED:
            items = tuple(sorted(items))
        return cls(items=items)


@dataclass(frozen=True)
class PatternGroup:
    """Identical patterns cut on ``multiplicity`` bars.

    Attributes:
        key: Canonical key shared by every pattern in the group.
        pattern: Representative pattern (the first one seen).
        multiplicity: Number of bars cut to this pattern.
    """

    key: PatternKey
    pattern: Pattern
    multiplicity: int = 1

    def __post_init__(self) -> None:
        if self.multiplicity < 1:
            raise ValueError("Multiplicity must be at least 1")

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return self.pattern.pieces

    @property
    def waste(self) -> float:
        return self.pattern.waste

    @property
    def bar_length(self) -> float:
        return self.pattern.bar_length

    @property
    def total_waste(self) -> float:
        """Waste summed over every bar in the group."""
        return self.pattern.waste * self.multiplicity


@dataclass(frozen=True)
class CuttingPlan:
    """Final result of an optimization run.

    Attributes:
        stock: Stock the plan was computed for.
        groups: Distinct patterns in order of first appearance.
        bars_needed: Number of bars the plan uses.
        total_waste: Waste summed over all bars.
        client: Optional customer reference carried from the request.
    """

    stock: StockSpec
    groups: tuple[PatternGroup, ...]
    bars_needed: int
    total_waste: float
    client: ClientInfo | None = None

    @property
    def bars_available(self) -> int:
        return self.stock.bar_count

    @property
    def bars_remaining(self) -> int:
        """Bars left in stock after cutting the plan."""
        return self.stock.bar_count - self.bars_needed

    @property
    def piece_count(self) -> int:
        """Total number of pieces cut, counting multiplicity."""
        return sum(g.pattern.piece_count * g.multiplicity for g in self.groups)

    @property
    def utilization(self) -> float:
        """Fraction of the used bars' length that ends up in pieces."""
        total_length = self.bars_needed * self.stock.bar_length
        if total_length == 0:
            return 0.0
        return 1 - self.total_waste / total_length
