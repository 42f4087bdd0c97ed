"""FastAPI REST API for cutting plans.

Usage:
    uvicorn cutplan.web:app --reload
"""

from cutplan.web.app import app, create_app

__all__ = ["app", "create_app"]
