"""In-memory article store for tests and dry runs."""

import threading
import uuid
from typing import Any, Dict, List

import pendulum

from ..errors import ArticleNotFoundError
from ..models import Article, NewArticle
from .articles import ArticleStore, clean_update_fields


class InMemoryArticleStore(ArticleStore):
    """Dict backed store with the same semantics as the Postgres one."""

    def __init__(self) -> None:
        self._rows: Dict[str, Article] = {}
        self._sequence: Dict[str, int] = {}
        self._counter = 0
        self._lock = threading.Lock()
        self.writes: List[tuple] = []

    def list(self) -> List[Article]:
        with self._lock:
            rows = sorted(
                self._rows.values(),
                key=lambda a: (a.created_at, self._sequence[a.id]),
                reverse=True,
            )
            return [a.model_copy(deep=True) for a in rows]

    def get(self, article_id: str) -> Article:
        with self._lock:
            article = self._rows.get(article_id)
            if article is None:
                raise ArticleNotFoundError(article_id)
            return article.model_copy(deep=True)

    def insert_batch(self, articles: List[NewArticle]) -> List[Article]:
        stored = []
        with self._lock:
            for new in articles:
                now = pendulum.now("UTC")
                article = Article(
                    id=str(uuid.uuid4()),
                    created_at=now,
                    updated_at=now,
                    **new.model_dump(),
                )
                self._counter += 1
                self._rows[article.id] = article
                self._sequence[article.id] = self._counter
                self.writes.append(("insert", article.id, new.model_dump()))
                stored.append(article.model_copy(deep=True))
        return stored

    def update(self, article_id: str, fields: Dict[str, Any]) -> Article:
        fields = clean_update_fields(fields)
        with self._lock:
            current = self._rows.get(article_id)
            if current is None:
                raise ArticleNotFoundError(article_id)
            data = current.model_dump()
            data.update(fields)
            data["updated_at"] = pendulum.now("UTC")
            article = Article(**data)
            self._rows[article_id] = article
            self.writes.append(("update", article_id, dict(fields)))
            return article.model_copy(deep=True)

    def delete(self, article_id: str) -> None:
        with self._lock:
            if article_id not in self._rows:
                raise ArticleNotFoundError(article_id)
            del self._rows[article_id]
            del self._sequence[article_id]
            self.writes.append(("delete", article_id, None))
