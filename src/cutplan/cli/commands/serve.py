"""Serve command: run the REST API with uvicorn."""

from typing import Annotated

import typer
import uvicorn


def serve_command(
    host: Annotated[
        str,
        typer.Option("--host", help="Interface to bind"),
    ] = "127.0.0.1",
    port: Annotated[
        int,
        typer.Option("--port", "-p", help="Port to listen on"),
    ] = 8000,
    reload: Annotated[
        bool,
        typer.Option("--reload", help="Restart on code changes"),
    ] = False,
) -> None:
    """Run the cutting plan REST API.

    Example:
        cutplan serve --port 8080
    """
    uvicorn.run("cutplan.web:app", host=host, port=port, reload=reload)
