"""Pydantic schemas for the REST API."""

from cutplan.web.schemas.requests import (
    ClientSchema,
    CutSchema,
    JobValidateRequest,
    OptimizeRequestSchema,
    OptionsSchema,
    StockSchema,
)
from cutplan.web.schemas.responses import (
    ClientOutputSchema,
    ErrorResponseSchema,
    PatternSchema,
    PieceSchema,
    PlanResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ClientSchema",
    "CutSchema",
    "JobValidateRequest",
    "OptimizeRequestSchema",
    "OptionsSchema",
    "StockSchema",
    # Responses
    "ClientOutputSchema",
    "ErrorResponseSchema",
    "PatternSchema",
    "PieceSchema",
    "PlanResponseSchema",
    "ValidationResultSchema",
]
