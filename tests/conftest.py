"""Shared fixtures: in-memory store and fake remote services."""

from typing import Dict, Iterable, List, Optional

import pytest

from blogsmith.config import EnhancementConfig, IngestionConfig
from blogsmith.db import InMemoryArticleStore
from blogsmith.errors import ProviderFailure
from blogsmith.extraction import ScrapedPage, SearchResult
from blogsmith.generation import MockLLMProvider
from blogsmith.models import NewArticle
from blogsmith.pipeline import EnhancementPipeline, IngestionPipeline, Services

ROOT = "https://example.com/blog"


class FakeExtractor:
    """Stands in for FirecrawlClient."""

    def __init__(
        self,
        links: Optional[List[str]] = None,
        pages: Optional[Dict[str, ScrapedPage]] = None,
        failing: Iterable[str] = (),
        search_results: Optional[List[SearchResult]] = None,
        map_error: Optional[Exception] = None,
        search_error: Optional[Exception] = None,
    ):
        self.links = links or []
        self.pages = pages or {}
        self.failing = set(failing)
        self.search_results = search_results or []
        self.map_error = map_error
        self.search_error = search_error
        self.calls = []
        self.closed = False

    def map_urls(self, root, limit=100):
        self.calls.append(("map", root, limit))
        if self.map_error is not None:
            raise self.map_error
        return list(self.links)

    def scrape(self, url):
        self.calls.append(("scrape", url))
        if url in self.failing:
            raise ProviderFailure(f"Scrape of {url} failed")
        if url in self.pages:
            return self.pages[url]
        slug = url.rstrip("/").rsplit("/", 1)[-1]
        return ScrapedPage(url=url, title=f"Post {slug}", markdown=f"Body of {slug}")

    def search(self, query, limit=2):
        self.calls.append(("search", query, limit))
        if self.search_error is not None:
            raise self.search_error
        return list(self.search_results[:limit])

    def close(self):
        self.closed = True


@pytest.fixture
def store():
    return InMemoryArticleStore()


@pytest.fixture
def extractor():
    return FakeExtractor()


@pytest.fixture
def llm():
    return MockLLMProvider(response="Enhanced body\n\n## References\n1. https://ref.example.org/a")


@pytest.fixture
def ingestion_config():
    return IngestionConfig(target_root=ROOT)


@pytest.fixture
def make_article(store):
    def _make(**overrides):
        data = {
            "title": "Chatbots in healthcare",
            "original_content": "Original body",
            "source_url": f"{ROOT}/chatbots-in-healthcare",
        }
        data.update(overrides)
        return store.create(NewArticle(**data))

    return _make


@pytest.fixture
def services(store, extractor, llm, ingestion_config):
    return Services(
        store=store,
        ingestion=IngestionPipeline(store, extractor, ingestion_config),
        enhancement=EnhancementPipeline(store, extractor, llm, EnhancementConfig()),
    )
