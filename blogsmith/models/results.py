"""Outcome models returned by the pipelines."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .article import Article


class ScrapeResult(BaseModel):
    """Result of an ingestion run."""

    success: bool = Field(..., description="Whether the run completed")
    message: str = Field(..., description="Human readable summary")
    articles: List[Article] = Field(default_factory=list, description="Inserted articles")

    @property
    def count(self) -> int:
        return len(self.articles)


class EnhanceResult(BaseModel):
    """Result of a single article enhancement."""

    success: bool = Field(..., description="Whether the article reached enhanced")
    message: str = Field(..., description="Human readable outcome")
    article: Optional[Article] = Field(None, description="Final article state on success")
    reason: Optional[str] = Field(None, description="Failure code when unsuccessful")
