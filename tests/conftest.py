"""Pytest configuration and shared fixtures for cutplan tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from cutplan.application import OptimizeCutsCommand, OptimizeRequest
from cutplan.domain import CutRow, StockSpec


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def command() -> OptimizeCutsCommand:
    """Create an OptimizeCutsCommand with default settings."""
    return OptimizeCutsCommand()


@pytest.fixture
def scenario_a_cuts() -> tuple[CutRow, ...]:
    """Two pieces of 60 and one of 40."""
    return (CutRow(quantity=2, length=60.0), CutRow(quantity=1, length=40.0))


@pytest.fixture
def scenario_a_request(scenario_a_cuts: tuple[CutRow, ...]) -> OptimizeRequest:
    """100-long bars, 10 in stock, cuts 60, 60, 40."""
    return OptimizeRequest(
        stock=StockSpec(bar_length=100.0, bar_count=10),
        cuts=scenario_a_cuts,
    )


@pytest.fixture
def job_data() -> dict[str, Any]:
    """A valid job dictionary."""
    return {
        "schema_version": "1.0",
        "client": {"code": "C-042", "name": "Acme Windows"},
        "stock": {"quantity": 10, "length": 100, "label": "Alu 20x20"},
        "cuts": [
            {"quantity": 2, "length": 60, "label": "Frame"},
            {"quantity": 1, "length": 40, "label": "Rail"},
        ],
    }


@pytest.fixture
def job_file(tmp_path: Path, job_data: dict[str, Any]) -> Path:
    """Write the valid job to a temporary JSON file."""
    path = tmp_path / "job.json"
    path.write_text(json.dumps(job_data), encoding="utf-8")
    return path
