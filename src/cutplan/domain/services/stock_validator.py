"""Final stock check producing the cutting plan."""

from __future__ import annotations

import logging
from typing import Sequence

from cutplan.domain.entities import CuttingPlan, PatternGroup
from cutplan.domain.exceptions import InsufficientStockError
from cutplan.domain.value_objects import ClientInfo, StockSpec

logger = logging.getLogger(__name__)


def validate_stock_quantity(
    groups: Sequence[PatternGroup],
    stock: StockSpec,
    client: ClientInfo | None = None,
) -> CuttingPlan:
    """Check the plan against available stock and build the result.

    Args:
        groups: Aggregated pattern groups.
        stock: Stock the plan is cut from.
        client: Optional customer reference to attach.

    Returns:
        The cutting plan with bar and waste totals.

    Raises:
        InsufficientStockError: If the plan needs more bars than available.
    """
    bars_needed = sum(g.multiplicity for g in groups)
    if bars_needed > stock.bar_count:
        logger.info(
            "Plan rejected: %d bars needed, %d available", bars_needed, stock.bar_count
        )
        raise InsufficientStockError(needed=bars_needed, available=stock.bar_count)

    return CuttingPlan(
        stock=stock,
        groups=tuple(groups),
        bars_needed=bars_needed,
        total_waste=sum(g.total_waste for g in groups),
        client=client,
    )
