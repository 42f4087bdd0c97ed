"""Conversion of validated job configurations into command input."""

from cutplan.application.config.schemas import JobConfiguration
from cutplan.application.dtos import OptimizeRequest


def job_to_request(job: JobConfiguration) -> OptimizeRequest:
    """Convert a job configuration to an ``OptimizeRequest``."""
    return OptimizeRequest(
        stock=job.stock.to_domain(),
        cuts=tuple(cut.to_domain() for cut in job.cuts),
        client=job.client.to_domain() if job.client else None,
        grouping=job.options.grouping,
        timeout_seconds=job.options.timeout_seconds,
    )
