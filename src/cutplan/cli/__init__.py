"""Command-line interface for cutplan."""

from cutplan.cli.main import app

__all__ = ["app"]
