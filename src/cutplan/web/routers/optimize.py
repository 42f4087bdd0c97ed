"""Cutting plan endpoints."""

import asyncio

from fastapi import APIRouter

from cutplan.application import OptimizeRequest
from cutplan.domain import ClientInfo, CuttingPlan, CutRow, StockSpec
from cutplan.web.dependencies import OptimizeCommandDep
from cutplan.web.schemas.requests import OptimizeRequestSchema
from cutplan.web.schemas.responses import (
    ClientOutputSchema,
    ErrorResponseSchema,
    PatternSchema,
    PieceSchema,
    PlanResponseSchema,
)

router = APIRouter(prefix="/optimize", tags=["optimize"])


def _schema_to_request(body: OptimizeRequestSchema) -> OptimizeRequest:
    """Convert the request body to command input."""
    return OptimizeRequest(
        stock=StockSpec(
            bar_length=body.stock.length,
            bar_count=body.stock.quantity,
            label=body.stock.label,
        ),
        cuts=tuple(
            CutRow(quantity=c.quantity, length=c.length, label=c.label)
            for c in body.cuts
        ),
        client=ClientInfo(code=body.client.code, name=body.client.name)
        if body.client
        else None,
        grouping=body.options.grouping,
        timeout_seconds=body.options.timeout_seconds,
    )


def _plan_to_schema(plan: CuttingPlan) -> PlanResponseSchema:
    """Convert a CuttingPlan to the response schema."""
    patterns = [
        PatternSchema(
            multiplicity=group.multiplicity,
            waste=round(group.waste, 2),
            bar_length=group.bar_length,
            pieces=[
                PieceSchema(label=p.label, length=round(p.length, 2))
                for p in group.pieces
            ],
        )
        for group in plan.groups
    ]
    client = None
    if plan.client is not None:
        client = ClientOutputSchema(code=plan.client.code, name=plan.client.name)

    return PlanResponseSchema(
        patterns=patterns,
        bars_needed=plan.bars_needed,
        bars_available=plan.bars_available,
        total_waste=plan.total_waste,
        stock_label=plan.stock.label,
        client=client,
    )


@router.post(
    "",
    response_model=PlanResponseSchema,
    responses={422: {"model": ErrorResponseSchema}, 408: {"model": ErrorResponseSchema}},
)
async def optimize_cuts(
    body: OptimizeRequestSchema,
    command: OptimizeCommandDep,
) -> PlanResponseSchema:
    """Compute a cutting plan for the given stock and cuts.

    The search runs in a worker thread so the event loop stays free.

    Raises:
        ValidationError, OversizedPieceError, InsufficientStockError:
            Rendered as 422 responses by the registered handlers.
        ComputationCancelledError: Rendered as a 408 response.
    """
    plan = await asyncio.to_thread(command.execute, _schema_to_request(body))
    return _plan_to_schema(plan)
