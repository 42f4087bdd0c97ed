"""Exceptions raised by the cutting-pattern optimizer.

Every failure is all-or-nothing: when one of these is raised no partial
plan exists. Callers (CLI, REST API) translate them into user-facing
messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .value_objects import Piece


class CutPlanError(Exception):
    """Base class for all optimizer errors."""

    error_type: str = "cut_plan"


class ValidationError(CutPlanError):
    """Raised when stock or cut input is malformed or empty.

    Attributes:
        field: Dotted path of the offending input, if known.
    """

    error_type = "validation"

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class OversizedPieceError(CutPlanError):
    """Raised when remaining pieces are longer than the stock bar.

    Attributes:
        piece: The smallest remaining piece that still exceeds the bar.
        pieces: All remaining pieces that exceed the bar.
        bar_length: Length of the stock bar.
    """

    error_type = "oversized_piece"

    def __init__(self, pieces: Sequence[Piece], bar_length: float) -> None:
        self.pieces = tuple(pieces)
        self.piece = min(self.pieces, key=lambda p: p.length)
        self.bar_length = bar_length
        label = f"'{self.piece.label}' " if self.piece.label else ""
        super().__init__(
            f"Piece {label}({self.piece.length:g}) is longer than the stock "
            f"bar ({bar_length:g}); {len(self.pieces)} piece(s) cannot be cut"
        )


class InsufficientStockError(CutPlanError):
    """Raised when the plan needs more bars than are available.

    Attributes:
        needed: Number of bars the plan requires.
        available: Number of bars in stock.
    """

    error_type = "insufficient_stock"

    def __init__(self, needed: int, available: int) -> None:
        self.needed = needed
        self.available = available
        super().__init__(
            f"Insufficient stock: {needed} bars are needed but only "
            f"{available} are available"
        )


class ComputationCancelledError(CutPlanError):
    """Raised when a computation is cancelled or exceeds its time limit."""

    error_type = "cancelled"

    def __init__(self, reason: str = "Computation was cancelled") -> None:
        self.reason = reason
        super().__init__(reason)
