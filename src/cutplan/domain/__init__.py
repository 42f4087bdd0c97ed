"""Domain layer - core cutting-pattern logic."""

from .entities import CuttingPlan, Pattern, PatternGroup, PatternKey
from .exceptions import (
    ComputationCancelledError,
    CutPlanError,
    InsufficientStockError,
    OversizedPieceError,
    ValidationError,
)
from .services import (
    BarAllocator,
    CancellationToken,
    PatternSearchEngine,
    aggregate,
    allocate,
    normalize,
    validate_stock_quantity,
)
from .value_objects import ClientInfo, CutRow, GroupingStrategy, Piece, StockSpec

__all__ = [
    "BarAllocator",
    "CancellationToken",
    "ClientInfo",
    "ComputationCancelledError",
    "CutPlanError",
    "CutRow",
    "CuttingPlan",
    "GroupingStrategy",
    "InsufficientStockError",
    "OversizedPieceError",
    "Pattern",
    "PatternGroup",
    "PatternKey",
    "PatternSearchEngine",
    "Piece",
    "StockSpec",
    "ValidationError",
    "aggregate",
    "allocate",
    "normalize",
    "validate_stock_quantity",
]
