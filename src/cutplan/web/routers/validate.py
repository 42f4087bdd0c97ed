"""Job validation endpoints."""

from fastapi import APIRouter

from cutplan.application.config import ConfigError, job_to_request, load_job_from_dict
from cutplan.domain import ValidationError, normalize
from cutplan.web.dependencies import SettingsDep
from cutplan.web.schemas.requests import JobValidateRequest
from cutplan.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_job(
    request: JobValidateRequest,
    settings: SettingsDep,
) -> ValidationResultSchema:
    """Validate a job without running the optimizer.

    Checks the job schema, then the stock and cut rows the way the
    optimizer would before searching.
    """
    try:
        job = load_job_from_dict(request.job)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[{"message": d["message"], "path": d["path"]} for d in e.details],
        )

    optimize_request = job_to_request(job)
    try:
        pool = normalize(
            optimize_request.stock,
            optimize_request.cuts,
            max_rows=settings.max_cut_rows,
            max_pieces=settings.max_pieces,
        )
    except ValidationError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[{"message": e.message, "path": e.field}],
        )

    return ValidationResultSchema(is_valid=True, piece_count=len(pool))
