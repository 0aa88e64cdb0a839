"""Article management commands."""

from datetime import timedelta
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ..db import find_stale_processing
from ..errors import ArticleNotFoundError
from ..models import ArticleStatus
from .common import load_cli_config, load_services

console = Console()
articles_app = typer.Typer(help="Inspect and manage stored articles")

STATUS_STYLES = {
    ArticleStatus.SCRAPED: "white",
    ArticleStatus.PROCESSING: "yellow",
    ArticleStatus.ENHANCED: "green",
    ArticleStatus.ERROR: "red",
}


def _articles_table(title: str, articles) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Status")
    table.add_column("Updated", style="magenta")
    table.add_column("URL", style="blue")

    for article in articles:
        style = STATUS_STYLES.get(article.status, "white")
        updated = article.updated_at.strftime("%Y-%m-%d %H:%M") if article.updated_at else "-"
        table.add_row(
            article.id,
            article.title,
            f"[{style}]{article.status.value}[/{style}]",
            updated,
            article.source_url,
        )
    return table


@articles_app.command("list")
def articles_list(
    status: Optional[ArticleStatus] = typer.Option(None, "--status", "-s", help="Only this status"),
) -> None:
    """List stored articles, newest first."""
    services = load_services()
    articles = services.store.list()
    if status is not None:
        articles = [a for a in articles if a.status == status]

    if not articles:
        console.print("[yellow]No articles stored.[/yellow]")
        return
    console.print(_articles_table("Articles", articles))


@articles_app.command("show")
def articles_show(
    article_id: str = typer.Argument(..., help="Article ID"),
    original: bool = typer.Option(False, "--original", help="Show original content even if enhanced"),
) -> None:
    """Show one article."""
    services = load_services()
    try:
        article = services.store.get(article_id)
    except ArticleNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    header = f"{article.title}\n{article.source_url}\nStatus: {article.status.value}"
    if article.author:
        header += f"\nAuthor: {article.author}"
    if article.error_message:
        header += f"\n[red]Error: {article.error_message}[/red]"
    console.print(Panel(header, style="bold"))

    if article.enhanced_content and not original:
        console.print(Markdown(article.enhanced_content))
    else:
        console.print(Markdown(article.original_content))


@articles_app.command("delete")
def articles_delete(
    article_id: str = typer.Argument(..., help="Article ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Delete an article permanently."""
    if not yes:
        typer.confirm(f"Delete article {article_id}?", abort=True)

    services = load_services()
    try:
        services.store.delete(article_id)
    except ArticleNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✅ Deleted article: {article_id}[/green]")


@articles_app.command("stale")
def articles_stale(
    minutes: Optional[int] = typer.Option(
        None,
        "--minutes",
        "-m",
        help="Age in minutes after which processing counts as stuck (default from config)",
    ),
) -> None:
    """List articles stuck in processing; re-run 'blogsmith enhance' on them."""
    config = load_cli_config()
    services = load_services(config)
    if minutes is None:
        minutes = config.config.enhancement.stale_after_minutes

    stale = find_stale_processing(services.store, timedelta(minutes=minutes))
    if not stale:
        console.print(f"[green]No articles processing for more than {minutes} minutes.[/green]")
        return
    console.print(_articles_table(f"Stuck in processing (> {minutes} min)", stale))
