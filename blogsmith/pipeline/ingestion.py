"""Ingestion of the latest articles from the configured blog."""

from typing import List

from rich.console import Console

from ..config import IngestionConfig
from ..db import ArticleStore
from ..errors import BlogsmithError
from ..extraction import FirecrawlClient, ScrapedPage
from ..models import NewArticle, ScrapeResult
from .filters import UrlFilter

console = Console()


def page_to_article(page: ScrapedPage) -> NewArticle:
    """Convert an extracted page into an insert payload."""
    return NewArticle(
        title=page.title,
        original_content=page.markdown,
        source_url=page.url,
        author=page.author,
        published_at=page.published_at,
    )


class IngestionPipeline:
    """Discover, extract and store the most recent articles of one site."""

    def __init__(
        self,
        store: ArticleStore,
        extractor: FirecrawlClient,
        config: IngestionConfig,
    ) -> None:
        self.store = store
        self.extractor = extractor
        self.config = config
        self.url_filter = UrlFilter.from_config(config)

    def select_urls(self, links: List[str]) -> List[str]:
        """Filter discovered links and keep the trailing batch."""
        urls = self.url_filter.filter(links)
        console.print(f"[dim]ingest: {len(urls)} article URLs out of {len(links)} links[/dim]")

        if self.config.skip_known_urls and urls:
            known = {a.source_url for a in self.store.list()}
            urls = [url for url in urls if url not in known]

        return urls[-self.config.batch_size:]

    def extract_pages(self, urls: List[str]) -> List[ScrapedPage]:
        """Extract each URL in turn. A failed page is logged and skipped."""
        pages = []
        for url in urls:
            console.print(f"[dim]ingest: scraping {url}[/dim]")
            try:
                pages.append(self.extractor.scrape(url))
            except BlogsmithError as e:
                console.print(f"[yellow]ingest: failed to scrape {url}: {e}[/yellow]")
        return pages

    def scrape_latest(self) -> ScrapeResult:
        """
        Run one ingestion pass.

        Discovery failure fails the run; per page extraction failures only
        reduce the number of stored articles. Store errors propagate.
        """
        root = self.config.target_root
        console.print(f"[bold]ingest: mapping {root}[/bold]")
        try:
            links = self.extractor.map_urls(root, limit=self.config.map_limit)
        except BlogsmithError as e:
            console.print(f"[red]ingest: failed to map {root}: {e}[/red]")
            return ScrapeResult(success=False, message=f"Failed to map {root}: {e}")

        urls = self.select_urls(links)
        pages = self.extract_pages(urls)

        if not pages:
            console.print("[yellow]ingest: no articles extracted[/yellow]")
            return ScrapeResult(success=True, message="No articles found to scrape", articles=[])

        stored = self.store.insert_batch([page_to_article(page) for page in pages])
        console.print(f"[green]ingest: stored {len(stored)} articles[/green]")
        return ScrapeResult(
            success=True,
            message=f"Scraped and stored {len(stored)} articles",
            articles=stored,
        )
