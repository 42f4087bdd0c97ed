"""Pydantic request schemas for the REST API.

Numeric ranges are deliberately not constrained here: the optimizer
validates stock and cuts itself and reports domain validation errors.
"""

from typing import Any

from pydantic import BaseModel, Field

from cutplan.domain.value_objects import GroupingStrategy


class StockSchema(BaseModel):
    """Stock bars available for cutting."""

    quantity: int = Field(..., description="Number of bars in stock")
    length: float = Field(..., description="Bar length")
    label: str = Field(default="", description="Material description")


class CutSchema(BaseModel):
    """One row of required cuts."""

    quantity: int = Field(..., description="Number of pieces")
    length: float = Field(..., description="Piece length")
    label: str = Field(default="", description="Piece description")


class ClientSchema(BaseModel):
    """Customer reference."""

    code: str = Field(default="", description="Client code")
    name: str = Field(default="", description="Client name")


class OptionsSchema(BaseModel):
    """Per-request optimizer options."""

    grouping: GroupingStrategy | None = Field(
        default=None, description="Pattern grouping: 'ordered' or 'unordered'"
    )
    timeout_seconds: float | None = Field(
        default=None, gt=0, le=300, description="Time limit in seconds"
    )


class OptimizeRequestSchema(BaseModel):
    """Request for computing a cutting plan."""

    stock: StockSchema = Field(..., description="Stock bars")
    cuts: list[CutSchema] = Field(default_factory=list, description="Required cuts")
    client: ClientSchema | None = Field(default=None, description="Client reference")
    options: OptionsSchema = Field(
        default_factory=OptionsSchema, description="Optimizer options"
    )


class JobValidateRequest(BaseModel):
    """Request for validating a job without optimizing it."""

    job: dict[str, Any] = Field(..., description="Job configuration JSON")
