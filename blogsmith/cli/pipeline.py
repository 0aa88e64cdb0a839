"""Scrape and enhance commands."""

import typer
from rich.console import Console
from rich.table import Table

from ..errors import ArticleNotFoundError, MissingFieldError
from .common import load_services

console = Console()


def scrape_command() -> None:
    """Ingest the latest articles from the configured blog."""
    services = load_services()
    try:
        result = services.ingestion.scrape_latest()
    finally:
        services.close()

    if not result.success:
        console.print(f"[red]❌ {result.message}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ {result.message}[/green]")
    if result.articles:
        table = Table(title="Ingested Articles")
        table.add_column("ID", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("URL", style="blue")
        for article in result.articles:
            table.add_row(article.id, article.title, article.source_url)
        console.print(table)


def enhance_command(
    article_id: str = typer.Argument(..., help="ID of the article to enhance"),
) -> None:
    """Enhance one article with references and an AI rewrite."""
    services = load_services()
    try:
        result = services.enhancement.enhance(article_id)
        stats = services.enhancement.llm_provider.get_usage_stats()
    except (ArticleNotFoundError, MissingFieldError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    finally:
        services.close()

    console.print(
        f"[dim]LLM usage: {stats['api_calls']} calls, {stats['total_tokens']} tokens ({stats['model']})[/dim]"
    )

    if not result.success:
        console.print(f"[red]❌ Enhancement failed ({result.reason}): {result.message}[/red]")
        raise typer.Exit(1)

    article = result.article
    console.print(f"[green]✅ {result.message}[/green]")
    console.print(f"References: {len(article.reference_urls)}")
    for url in article.reference_urls:
        console.print(f"  - {url}")
