"""FastAPI dependency injection for optimizer services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from cutplan.application import OptimizeCutsCommand, OptimizerSettings


@lru_cache(maxsize=1)
def get_settings() -> OptimizerSettings:
    """Get cached optimizer settings."""
    return OptimizerSettings()


def get_optimize_command(
    settings: Annotated[OptimizerSettings, Depends(get_settings)],
) -> OptimizeCutsCommand:
    """Dependency for OptimizeCutsCommand."""
    return OptimizeCutsCommand(settings=settings)


SettingsDep = Annotated[OptimizerSettings, Depends(get_settings)]
OptimizeCommandDep = Annotated[OptimizeCutsCommand, Depends(get_optimize_command)]
