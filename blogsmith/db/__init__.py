"""Database management for Blogsmith."""

from .articles import ArticleStore, PostgresArticleStore, find_stale_processing
from .connection import close_connection_pool, get_connection, get_connection_pool
from .init import init_database, validate_connection
from .memory import InMemoryArticleStore

__all__ = [
    "ArticleStore",
    "InMemoryArticleStore",
    "PostgresArticleStore",
    "close_connection_pool",
    "find_stale_processing",
    "get_connection",
    "get_connection_pool",
    "init_database",
    "validate_connection",
]
