"""Init command implementation."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import Config, ConfigModel, IngestionConfig, default_config_path, save_config
from ..db import init_database, validate_connection

console = Console()


def init_command(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file to write (default: $BLOGSMITH_CONFIG or ~/.config/blogsmith/config.yaml)",
    ),
    target_root: str = typer.Option(
        IngestionConfig().target_root,
        "--target-root",
        help="Blog listing URL to ingest from",
    ),
    db_host: str = typer.Option("localhost", "--db-host", help="Postgres host"),
    db_port: int = typer.Option(5432, "--db-port", help="Postgres port"),
    db_name: str = typer.Option("blogsmith", "--db-name", help="Database name"),
    db_user: str = typer.Option("blogsmith", "--db-user", help="Database user"),
    skip_db: bool = typer.Option(False, "--skip-db", help="Only write the config file"),
) -> None:
    """Initialize Blogsmith configuration and database."""
    console.print(Panel.fit("📰 Blogsmith - Initialization", style="bold blue"))

    if config_path is None:
        config_path = default_config_path()

    config = ConfigModel(
        postgres={
            "host": db_host,
            "port": db_port,
            "database": db_name,
            "user": db_user,
            "password_env": "BLOGSMITH_DB_PASSWORD",
        },
        ingestion={"target_root": target_root},
    )

    save_config(config, config_path)
    console.print(f"✅ Created config: {config_path}")

    if skip_db:
        return

    # Validate database connection
    console.print("\n[bold]Testing database connection...[/bold]")
    db_config = Config(config_path, model=config).get_db_config()

    if not validate_connection(db_config):
        console.print(
            "[red]❌ Database connection failed![/red]\n"
            "Please ensure Postgres is running and credentials are correct.\n"
            "Set the password via environment variable: [bold]export BLOGSMITH_DB_PASSWORD=your_password[/bold]"
        )
        raise typer.Exit(1)

    console.print("✅ Database connection successful")

    # Initialize database schema
    console.print("\n[bold]Initializing database schema...[/bold]")
    try:
        init_database(db_config)
        console.print("✅ Database schema initialized")
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        Panel(
            f"[green]✅ Blogsmith initialized successfully![/green]\n\n"
            f"Configuration: {config_path}\n\n"
            f"Next steps:\n"
            f"1. Set extraction API key: [bold]export FIRECRAWL_API_KEY=your_key[/bold]\n"
            f"2. Set LLM API key: [bold]export LLM_API_KEY=your_key[/bold]\n"
            f"3. Run: [bold]blogsmith scrape[/bold]",
            style="green",
        )
    )
