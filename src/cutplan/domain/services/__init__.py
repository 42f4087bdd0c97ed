"""Domain services for the cutting-pattern pipeline."""

from .aggregator import aggregate
from .allocator import BarAllocator, allocate
from .cancellation import NEVER_CANCELLED, CancellationToken
from .normalizer import normalize, validate_stock
from .pattern_search import (
    DEFAULT_TOLERANCE,
    Combination,
    PatternSearchEngine,
    find_best_combination,
)
from .stock_validator import validate_stock_quantity

__all__ = [
    "BarAllocator",
    "CancellationToken",
    "Combination",
    "DEFAULT_TOLERANCE",
    "NEVER_CANCELLED",
    "PatternSearchEngine",
    "aggregate",
    "allocate",
    "find_best_combination",
    "normalize",
    "validate_stock",
    "validate_stock_quantity",
]
