"""Error handlers mapping optimizer exceptions to JSON responses."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cutplan.application.config import ConfigError
from cutplan.domain.exceptions import (
    ComputationCancelledError,
    CutPlanError,
    InsufficientStockError,
    OversizedPieceError,
    ValidationError,
)


def _error_details(exc: CutPlanError) -> Any:
    if isinstance(exc, InsufficientStockError):
        return {"needed": exc.needed, "available": exc.available}
    if isinstance(exc, OversizedPieceError):
        return {
            "label": exc.piece.label,
            "length": exc.piece.length,
            "bar_length": exc.bar_length,
            "count": len(exc.pieces),
        }
    if isinstance(exc, ValidationError):
        return {"field": exc.field}
    return None


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CutPlanError)
    async def cut_plan_error_handler(request: Request, exc: CutPlanError) -> JSONResponse:
        status_code = 408 if isinstance(exc, ComputationCancelledError) else 422
        return JSONResponse(
            status_code=status_code,
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": _error_details(exc),
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            },
        )
