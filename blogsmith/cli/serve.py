"""Serve command implementation."""

from typing import Optional

import typer
import uvicorn
from rich.console import Console

from ..api import create_app
from .common import load_cli_config, load_services

console = Console()


def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Bind host (default from config)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default from config)"),
) -> None:
    """Run the HTTP API."""
    config = load_cli_config()
    services = load_services(config)
    server_config = config.config.server
    host = host or server_config.host
    port = port or server_config.port

    console.print(f"[bold]Serving Blogsmith API on http://{host}:{port}[/bold]")
    uvicorn.run(create_app(services), host=host, port=port)
