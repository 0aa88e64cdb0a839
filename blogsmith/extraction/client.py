"""Client for the remote scrape/search/map service."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx
import pendulum
from pydantic import ValidationError
from rich.console import Console

from ..errors import PaymentRequiredError, ProviderFailure, RateLimitedError, TransportError
from .models import ScrapedPage, SearchResult

console = Console()


def _parse_published(value: Any) -> Optional[datetime]:
    """Parse a metadata timestamp, tolerating junk."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = pendulum.parse(value, strict=False)
    except ValueError:
        return None
    return parsed if isinstance(parsed, datetime) else None


def _text(value: Any) -> Optional[str]:
    """First non-empty string of a metadata value; duplicated meta tags arrive as lists."""
    if isinstance(value, list):
        value = next((v for v in value if isinstance(v, str) and v), None)
    return value if isinstance(value, str) and value else None


class FirecrawlClient:
    """Discover URLs, extract page content and search the web."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.firecrawl.dev/v1",
        timeout: float = 60.0,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_key: Service API key, sent as a bearer token
            base_url: Service base URL
            timeout: Per request timeout in seconds
            http_client: Preconfigured client (for testing)
        """
        self.base_url = base_url.rstrip("/")
        self.client = http_client or httpx.Client(timeout=timeout)
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def close(self) -> None:
        self.client.close()

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON payload and return the decoded success body."""
        url = f"{self.base_url}/{path}"
        try:
            response = self.client.post(url, json=payload, headers=self.headers)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {path} timed out") from e
        except httpx.TransportError as e:
            raise TransportError(f"Request to {path} failed: {e}") from e

        if response.status_code == 429:
            raise RateLimitedError(f"Extraction service rate limited /{path}")
        if response.status_code == 402:
            raise PaymentRequiredError(f"Extraction service requires payment for /{path}")
        if response.status_code >= 400:
            raise ProviderFailure(
                f"Extraction service error on /{path}: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderFailure(
                f"Extraction service returned invalid JSON for /{path}",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict) or not data.get("success"):
            error = data.get("error") if isinstance(data, dict) else None
            raise ProviderFailure(
                f"Extraction service reported failure for /{path}: {error or 'unknown error'}",
                status_code=response.status_code,
            )
        return data

    def map_urls(self, root: str, limit: int = 100) -> List[str]:
        """Discover links under ``root``. Returns raw links, unfiltered."""
        data = self._post(
            "map",
            {"url": root, "limit": limit, "includeSubdomains": False},
        )
        links = data.get("links")
        if not isinstance(links, list):
            raise ProviderFailure(f"Map of {root} returned no links")

        urls = []
        for link in links:
            # Newer API versions return objects instead of bare strings
            if isinstance(link, dict):
                link = link.get("url")
            if isinstance(link, str) and link:
                urls.append(link)
        return urls

    def scrape(self, url: str) -> ScrapedPage:
        """Extract the main content of one page as markdown."""
        data = self._post(
            "scrape",
            {"url": url, "formats": ["markdown"], "onlyMainContent": True},
        )
        page = data.get("data")
        if not isinstance(page, dict):
            raise ProviderFailure(f"Scrape of {url} returned no data")

        metadata = page.get("metadata")
        if not isinstance(metadata, dict):
            metadata = {}
        try:
            return ScrapedPage(
                url=url,
                title=_text(metadata.get("title")) or "Untitled",
                markdown=_text(page.get("markdown")) or "",
                author=_text(metadata.get("author")),
                published_at=_parse_published(_text(metadata.get("publishedTime"))),
            )
        except ValidationError as e:
            raise ProviderFailure(f"Scrape of {url} returned malformed data") from e

    def search(self, query: str, limit: int = 2) -> List[SearchResult]:
        """Search the web and scrape the hits as markdown."""
        data = self._post(
            "search",
            {"query": query, "limit": limit, "scrapeOptions": {"formats": ["markdown"]}},
        )
        hits = data.get("data")
        if not isinstance(hits, list):
            raise ProviderFailure(f"Search for {query!r} returned no data")

        results = []
        for hit in hits:
            if not isinstance(hit, dict):
                continue
            url = _text(hit.get("url"))
            if not url:
                continue
            metadata = hit.get("metadata") if isinstance(hit.get("metadata"), dict) else {}
            try:
                result = SearchResult(
                    url=url,
                    title=_text(hit.get("title")) or _text(metadata.get("title")),
                    markdown=_text(hit.get("markdown")),
                    description=_text(hit.get("description")),
                )
            except ValidationError as e:
                console.print(f"[yellow]Skipping malformed search hit {url} ({e.error_count()} errors)[/yellow]")
                continue
            results.append(result)
        return results
