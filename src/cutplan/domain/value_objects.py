"""Value objects for the cutting-pattern domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class GroupingStrategy(str, Enum):
    """How patterns are compared when counting identical bars.

    ORDERED treats two patterns as the same only when their pieces are
    placed in the same order on the bar. UNORDERED compares the multiset
    of pieces and ignores placement order.
    """

    ORDERED = "ordered"
    UNORDERED = "unordered"


@dataclass(frozen=True)
class Piece:
    """A single piece to be cut from a stock bar.

    Attributes:
        length: Required length of the piece.
        label: Free-form description shown on the cutting plan.
    """

    length: float
    label: str = ""

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Piece length must be positive")

    @property
    def identity(self) -> tuple[str, float]:
        """Grouping identity of the piece."""
        return (self.label, self.length)


@dataclass(frozen=True)
class CutRow:
    """A raw cut request row: ``quantity`` pieces of ``length``."""

    quantity: int
    length: float
    label: str = ""


@dataclass(frozen=True)
class StockSpec:
    """Stock material available for cutting.

    Values are not checked here; ``normalize`` rejects invalid stock.

    Attributes:
        bar_length: Length of every stock bar.
        bar_count: Number of bars available.
        label: Material description (e.g. "Aluminium tube 20x20").
    """

    bar_length: float
    bar_count: int
    label: str = ""


@dataclass(frozen=True)
class ClientInfo:
    """Customer reference printed on the cutting plan."""

    code: str = ""
    name: str = ""
