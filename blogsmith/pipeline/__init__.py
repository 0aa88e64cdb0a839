"""Ingestion and enhancement pipelines."""

from .enhancement import EnhancementPipeline
from .filters import UrlFilter
from .ingestion import IngestionPipeline, page_to_article
from .services import Services, build_services, get_extraction_client, get_llm_provider

__all__ = [
    "EnhancementPipeline",
    "IngestionPipeline",
    "Services",
    "UrlFilter",
    "build_services",
    "get_extraction_client",
    "get_llm_provider",
    "page_to_article",
]
