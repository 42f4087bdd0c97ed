"""Cut planning for standard-length stock bars.

Plans how to cut bars, tubes and profiles into required pieces with
minimal waste, and checks the plan against the bars in stock.

Example:
    >>> from cutplan import OptimizeCutsCommand, OptimizeRequest, CutRow, StockSpec
    >>> request = OptimizeRequest(
    ...     stock=StockSpec(bar_length=100, bar_count=10),
    ...     cuts=(CutRow(quantity=2, length=60), CutRow(quantity=1, length=40)),
    ... )
    >>> plan = OptimizeCutsCommand().execute(request)
    >>> plan.bars_needed
    2
"""

from cutplan.application import OptimizeCutsCommand, OptimizeRequest, OptimizerSettings
from cutplan.domain import (
    ClientInfo,
    ComputationCancelledError,
    CutPlanError,
    CutRow,
    CuttingPlan,
    GroupingStrategy,
    InsufficientStockError,
    OversizedPieceError,
    StockSpec,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    "ClientInfo",
    "ComputationCancelledError",
    "CutPlanError",
    "CutRow",
    "CuttingPlan",
    "GroupingStrategy",
    "InsufficientStockError",
    "OptimizeCutsCommand",
    "OptimizeRequest",
    "OptimizerSettings",
    "OversizedPieceError",
    "StockSpec",
    "ValidationError",
]
