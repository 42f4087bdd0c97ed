"""Job file schema, loading and CLI merging.

Public API:
    - JobConfiguration: Root job model
    - StockConfig, CutConfig, ClientConfig, OptionsConfig: Job sections
    - load_job: Load a job from a JSON file
    - load_job_from_dict: Load a job from a dictionary
    - merge_job_with_cli: Apply CLI overrides to a job
    - job_to_request: Convert a job into an OptimizeRequest
    - ConfigError: Exception for job loading errors

Example:
    >>> from pathlib import Path
    >>> from cutplan.application.config import load_job, ConfigError
    >>>
    >>> try:
    ...     job = load_job(Path("job.json"))
    ...     print(f"{len(job.cuts)} cut rows on {job.stock.length} bars")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cutplan.application.config.adapter import job_to_request
from cutplan.application.config.loader import (
    ConfigError,
    load_job,
    load_job_from_dict,
)
from cutplan.application.config.merger import merge_job_with_cli
from cutplan.application.config.schemas import (
    SUPPORTED_VERSIONS,
    ClientConfig,
    CutConfig,
    JobConfiguration,
    OptionsConfig,
    StockConfig,
)

__all__ = [
    "ClientConfig",
    "ConfigError",
    "CutConfig",
    "JobConfiguration",
    "OptionsConfig",
    "SUPPORTED_VERSIONS",
    "StockConfig",
    "job_to_request",
    "load_job",
    "load_job_from_dict",
    "merge_job_with_cli",
]
