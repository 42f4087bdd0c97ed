"""Pydantic response schemas for the REST API.

Response fields are serialized in camelCase.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PieceSchema(_CamelModel):
    """A piece placed on a bar."""

    label: str = Field(..., description="Piece description")
    length: float = Field(..., description="Piece length, 2 decimals")


class PatternSchema(_CamelModel):
    """A distinct cutting pattern and the number of bars using it."""

    multiplicity: int = Field(..., description="Number of bars cut to this pattern")
    waste: float = Field(..., description="Waste per bar, 2 decimals")
    bar_length: float = Field(..., description="Stock bar length")
    pieces: list[PieceSchema] = Field(..., description="Pieces in cutting order")


class ClientOutputSchema(_CamelModel):
    code: str
    name: str


class PlanResponseSchema(_CamelModel):
    """Response for a computed cutting plan."""

    patterns: list[PatternSchema] = Field(..., description="Distinct patterns")
    bars_needed: int = Field(..., description="Bars used by the plan")
    bars_available: int = Field(..., description="Bars in stock")
    total_waste: float = Field(..., description="Waste over all bars")
    stock_label: str = Field(default="", description="Material description")
    client: ClientOutputSchema | None = Field(default=None, description="Client")


class ValidationResultSchema(_CamelModel):
    """Response for job validation."""

    is_valid: bool = Field(..., description="Whether the job can be optimized")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    piece_count: int = Field(default=0, description="Pieces after expanding rows")


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None
