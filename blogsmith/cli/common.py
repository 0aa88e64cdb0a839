"""Helpers shared by CLI commands."""

from typing import Optional

import typer
from rich.console import Console

from ..config import Config
from ..errors import ConfigurationError
from ..pipeline import Services, build_services

console = Console()


def load_cli_config() -> Config:
    """Load the config file or exit with a helpful message."""
    config = Config()
    try:
        config.config  # load and validate now
    except FileNotFoundError:
        console.print("[red]Config file not found. Run 'blogsmith init' first.[/red]")
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    return config


def load_services(config: Optional[Config] = None) -> Services:
    """Build services from the config or exit with a helpful message."""
    if config is None:
        config = load_cli_config()
    try:
        return build_services(config)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
