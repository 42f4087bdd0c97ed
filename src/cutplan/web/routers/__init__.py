"""API routers for the REST API."""

from cutplan.web.routers.optimize import router as optimize_router
from cutplan.web.routers.validate import router as validate_router

__all__ = [
    "optimize_router",
    "validate_router",
]
