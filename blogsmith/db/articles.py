"""Article storage."""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import pendulum
from psycopg import sql

from ..errors import ArticleNotFoundError
from ..models import Article, ArticleStatus, NewArticle
from .connection import close_connection_pool, get_connection

UPDATABLE_FIELDS = (
    "title",
    "original_content",
    "enhanced_content",
    "source_url",
    "author",
    "published_at",
    "reference_urls",
    "status",
    "error_message",
)


def clean_update_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Validate a partial update and normalise enum values."""
    unknown = set(fields) - set(UPDATABLE_FIELDS)
    if unknown:
        raise ValueError(f"Cannot update unknown fields: {', '.join(sorted(unknown))}")

    cleaned = dict(fields)
    if "status" in cleaned and cleaned["status"] is not None:
        cleaned["status"] = ArticleStatus(cleaned["status"]).value
    if "reference_urls" in cleaned and cleaned["reference_urls"] is None:
        cleaned["reference_urls"] = []
    return cleaned


class ArticleStore(ABC):
    """CRUD boundary over the articles table."""

    @abstractmethod
    def list(self) -> List[Article]:
        """All articles, newest first."""
        pass

    @abstractmethod
    def get(self, article_id: str) -> Article:
        """Fetch one article or raise ArticleNotFoundError."""
        pass

    @abstractmethod
    def insert_batch(self, articles: List[NewArticle]) -> List[Article]:
        """Insert new articles and return the stored rows in input order."""
        pass

    @abstractmethod
    def update(self, article_id: str, fields: Dict[str, Any]) -> Article:
        """Apply a partial update and return the stored row."""
        pass

    @abstractmethod
    def delete(self, article_id: str) -> None:
        """Permanently remove an article."""
        pass

    def create(self, article: NewArticle) -> Article:
        """Insert a single article."""
        return self.insert_batch([article])[0]

    def close(self) -> None:
        """Release connections held by the store."""
        pass


class PostgresArticleStore(ArticleStore):
    """Article store backed by Postgres."""

    def __init__(self, db_config: Dict[str, Any]) -> None:
        """Initialize with a database config dict (see Config.get_db_config)."""
        self.db_config = db_config

    def close(self) -> None:
        close_connection_pool()

    def list(self) -> List[Article]:
        with get_connection(self.db_config) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT * FROM articles ORDER BY created_at DESC")
                return [Article(**row) for row in cur.fetchall()]

    def get(self, article_id: str) -> Article:
        with get_connection(self.db_config) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT * FROM articles WHERE id::text = %s", (article_id,))
                row = cur.fetchone()
        if row is None:
            raise ArticleNotFoundError(article_id)
        return Article(**row)

    def insert_batch(self, articles: List[NewArticle]) -> List[Article]:
        if not articles:
            return []

        stored = []
        with get_connection(self.db_config) as conn:
            with conn.cursor() as cur:
                for article in articles:
                    cur.execute(
                        """
                        INSERT INTO articles (
                            title, original_content, source_url, author,
                            published_at, reference_urls, status
                        ) VALUES (%s, %s, %s, %s, %s, %s, %s)
                        RETURNING *
                        """,
                        (
                            article.title,
                            article.original_content,
                            article.source_url,
                            article.author,
                            article.published_at,
                            list(article.reference_urls),
                            article.status.value,
                        ),
                    )
                    stored.append(Article(**cur.fetchone()))
            conn.commit()
        return stored

    def update(self, article_id: str, fields: Dict[str, Any]) -> Article:
        fields = clean_update_fields(fields)
        if not fields:
            return self.get(article_id)

        assignments = sql.SQL(", ").join(
            sql.SQL("{} = {}").format(sql.Identifier(name), sql.Placeholder(name))
            for name in fields
        )
        query = sql.SQL("UPDATE articles SET {} WHERE id::text = {} RETURNING *").format(
            assignments, sql.Placeholder("article_id")
        )

        with get_connection(self.db_config) as conn:
            with conn.cursor() as cur:
                cur.execute(query, {**fields, "article_id": article_id})
                row = cur.fetchone()
            conn.commit()
        if row is None:
            raise ArticleNotFoundError(article_id)
        return Article(**row)

    def delete(self, article_id: str) -> None:
        with get_connection(self.db_config) as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM articles WHERE id::text = %s", (article_id,))
                deleted = cur.rowcount
            conn.commit()
        if not deleted:
            raise ArticleNotFoundError(article_id)


def find_stale_processing(
    store: ArticleStore,
    older_than: timedelta,
    now: Optional[datetime] = None,
) -> List[Article]:
    """
    Articles left in processing longer than ``older_than``.

    An enhancement run that crashed after marking the article can leave it
    in this state; such articles need a manual re-enhance.
    """
    if now is None:
        now = pendulum.now("UTC")
    cutoff = now - older_than
    return [
        article
        for article in store.list()
        if article.status == ArticleStatus.PROCESSING
        and article.updated_at is not None
        and article.updated_at < cutoff
    ]
