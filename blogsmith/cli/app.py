"""Main CLI application."""

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from .articles import articles_app
from .init import init_command
from .pipeline import enhance_command, scrape_command
from .serve import serve_command

app = typer.Typer(
    name="blogsmith",
    help="Blogsmith - blog article ingestion and AI enhancement",
    no_args_is_help=True,
)

# Register commands
app.command("init")(init_command)
app.command("scrape")(scrape_command)
app.command("enhance")(enhance_command)
app.command("serve")(serve_command)
app.add_typer(articles_app, name="articles", help="Inspect and manage stored articles")


if __name__ == "__main__":
    app()
