"""Application layer - use cases and configuration."""

from .commands import OptimizeCutsCommand, RunningOptimization
from .dtos import OptimizeRequest
from .settings import OptimizerSettings

__all__ = [
    "OptimizeCutsCommand",
    "OptimizeRequest",
    "OptimizerSettings",
    "RunningOptimization",
]
