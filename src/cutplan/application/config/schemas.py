"""Pydantic models for cutting job files.

A job file describes one optimization request:

    {
        "schema_version": "1.0",
        "client": {"code": "C-042", "name": "Acme Windows"},
        "stock": {"quantity": 10, "length": 6000, "label": "Alu 20x20"},
        "cuts": [
            {"quantity": 4, "length": 1200, "label": "Frame"},
            {"quantity": 2, "length": 850.5, "label": "Rail"}
        ],
        "options": {"grouping": "ordered", "timeout_seconds": 10}
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cutplan.domain.value_objects import (
    ClientInfo,
    CutRow,
    GroupingStrategy,
    StockSpec,
)

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class StockConfig(BaseModel):
    """Stock bars available for cutting."""

    model_config = ConfigDict(extra="forbid")

    quantity: int = Field(..., ge=1, description="Number of bars in stock")
    length: float = Field(..., gt=0, allow_inf_nan=False, description="Bar length")
    label: str = Field(default="", description="Material description")

    def to_domain(self) -> StockSpec:
        return StockSpec(bar_length=self.length, bar_count=self.quantity, label=self.label)


class CutConfig(BaseModel):
    """One row of required cuts.

    Rows with a zero quantity or length are accepted and skipped by the
    optimizer, matching blank rows in an input form.
    """

    model_config = ConfigDict(extra="forbid")

    quantity: int = Field(..., ge=0, description="Number of pieces")
    length: float = Field(..., ge=0, allow_inf_nan=False, description="Piece length")
    label: str = Field(default="", description="Piece description")

    def to_domain(self) -> CutRow:
        return CutRow(quantity=self.quantity, length=self.length, label=self.label)


class ClientConfig(BaseModel):
    """Customer reference printed with the plan."""

    model_config = ConfigDict(extra="forbid")

    code: str = ""
    name: str = ""

    def to_domain(self) -> ClientInfo:
        return ClientInfo(code=self.code, name=self.name)


class OptionsConfig(BaseModel):
    """Per-job optimizer options."""

    model_config = ConfigDict(extra="forbid")

    grouping: GroupingStrategy | None = Field(
        default=None, description="Pattern grouping: 'ordered' or 'unordered'"
    )
    timeout_seconds: float | None = Field(
        default=None, gt=0, description="Time limit for the run in seconds"
    )


class JobConfiguration(BaseModel):
    """Root model of a cutting job file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", description="Job file format version")
    client: ClientConfig | None = None
    stock: StockConfig
    cuts: list[CutConfig] = Field(..., min_length=1)
    options: OptionsConfig = Field(default_factory=OptionsConfig)

    @field_validator("schema_version")
    @classmethod
    def check_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{value}'. Supported: {supported}"
            )
        return value
