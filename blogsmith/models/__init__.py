"""Data models for Blogsmith."""

from .article import Article, ArticleStatus, NewArticle
from .results import EnhanceResult, ScrapeResult

__all__ = ["Article", "ArticleStatus", "NewArticle", "EnhanceResult", "ScrapeResult"]
