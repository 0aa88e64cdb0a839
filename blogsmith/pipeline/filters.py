"""Article URL filtering for discovered links."""

from typing import Iterable, List, Optional
from urllib.parse import urlparse

from ..config import IngestionConfig


class UrlFilter:
    """Decide which discovered links are article pages."""

    def __init__(
        self,
        target_root: str,
        article_path_prefix: Optional[str] = None,
        exclude_segments: Iterable[str] = (),
    ) -> None:
        self.target_root = target_root.rstrip("/")
        if article_path_prefix is None:
            article_path_prefix = (urlparse(self.target_root).path.rstrip("/") or "") + "/"
        self.article_path_prefix = article_path_prefix
        self.exclude_segments = list(exclude_segments)

    @classmethod
    def from_config(cls, config: IngestionConfig) -> "UrlFilter":
        return cls(
            target_root=config.target_root,
            article_path_prefix=config.article_path_prefix,
            exclude_segments=config.exclude_segments,
        )

    def is_article(self, url: str) -> bool:
        """True for article pages, False for listings, navigation and the root."""
        if not url or "#" in url:
            return False
        if url.rstrip("/") == self.target_root:
            return False
        if self.article_path_prefix not in url:
            return False
        return not any(segment in url for segment in self.exclude_segments)

    def filter(self, urls: Iterable[str]) -> List[str]:
        """Keep article URLs, preserving discovery order."""
        return [url for url in urls if self.is_article(url)]
