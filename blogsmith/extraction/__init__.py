"""Remote content extraction, URL discovery and web search."""

from .client import FirecrawlClient
from .models import ScrapedPage, SearchResult

__all__ = ["FirecrawlClient", "ScrapedPage", "SearchResult"]
