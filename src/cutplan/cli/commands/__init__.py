"""CLI command implementations for the cutplan application.

This package contains the subcommands of the cutplan CLI:
- optimize: Compute a cutting plan
- validate: Validate a job file
- serve: Run the REST API
"""

from cutplan.cli.commands.optimize import optimize_command
from cutplan.cli.commands.serve import serve_command
from cutplan.cli.commands.validate import validate_command

__all__ = ["optimize_command", "serve_command", "validate_command"]
