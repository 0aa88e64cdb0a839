"""Wiring of stores, clients and pipelines from configuration."""

from dataclasses import dataclass

from rich.console import Console

from ..config import Config
from ..db import ArticleStore, PostgresArticleStore
from ..errors import ConfigurationError
from ..extraction import FirecrawlClient
from ..generation import LLMProvider, MockLLMProvider, OpenAIProvider
from .enhancement import EnhancementPipeline
from .ingestion import IngestionPipeline

console = Console()


@dataclass
class Services:
    """Everything the API and CLI need, constructed once."""

    store: ArticleStore
    ingestion: IngestionPipeline
    enhancement: EnhancementPipeline

    def close(self) -> None:
        """Release the database pool and the HTTP clients."""
        self.store.close()
        self.ingestion.extractor.close()
        if self.enhancement.searcher is not self.ingestion.extractor:
            self.enhancement.searcher.close()
        self.enhancement.llm_provider.close()


def get_llm_provider(config: Config) -> LLMProvider:
    """Get configured LLM provider."""
    llm_config = config.get_llm_config()
    provider = llm_config.get("provider")

    if provider == "openai":
        api_key = llm_config.get("api_key")
        if not api_key:
            raise ConfigurationError(
                f"LLM API key not configured (set {llm_config.get('api_key_env') or 'llm.api_key'})"
            )
        return OpenAIProvider(
            api_key=api_key,
            model=llm_config.get("model"),
            base_url=llm_config.get("base_url"),
            timeout=llm_config.get("timeout"),
        )
    if provider == "mock":
        console.print("[yellow]Warning: using mock LLM provider.[/yellow]")
        return MockLLMProvider()
    raise ConfigurationError(f"Unknown LLM provider: {provider}")


def get_extraction_client(config: Config) -> FirecrawlClient:
    """Get configured extraction client."""
    fc_config = config.get_firecrawl_config()
    api_key = fc_config.get("api_key")
    if not api_key:
        raise ConfigurationError(
            f"Extraction API key not configured (set {fc_config.get('api_key_env') or 'firecrawl.api_key'})"
        )
    return FirecrawlClient(
        api_key=api_key,
        base_url=fc_config.get("base_url"),
        timeout=fc_config.get("timeout"),
    )


def build_services(config: Config) -> Services:
    """Construct the store, clients and both pipelines."""
    store = PostgresArticleStore(config.get_db_config())
    extractor = get_extraction_client(config)
    llm_provider = get_llm_provider(config)

    return Services(
        store=store,
        ingestion=IngestionPipeline(store, extractor, config.config.ingestion),
        enhancement=EnhancementPipeline(store, extractor, llm_provider, config.config.enhancement),
    )
