"""Article model for ingested and enhanced blog posts."""

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .base import DBModel


class ArticleStatus(str, Enum):
    """Lifecycle state of an article."""

    SCRAPED = "scraped"
    PROCESSING = "processing"
    ENHANCED = "enhanced"
    ERROR = "error"


class Article(DBModel):
    """Article model."""

    title: str = Field(..., description="Article title")
    original_content: str = Field(..., description="Raw extracted markdown")
    enhanced_content: Optional[str] = Field(None, description="AI rewritten content")
    source_url: str = Field(..., description="URL of the originating page")
    author: Optional[str] = Field(None, description="Article author")
    published_at: Optional[datetime] = Field(None, description="Publication timestamp")
    reference_urls: List[str] = Field(default_factory=list, description="Cited reference URLs")
    status: ArticleStatus = Field(ArticleStatus.SCRAPED, description="Lifecycle status")
    error_message: Optional[str] = Field(None, description="Failure reason when status is error")


class NewArticle(BaseModel):
    """Insert payload for a freshly ingested article."""

    title: str = Field(..., description="Article title")
    original_content: str = Field("", description="Raw extracted markdown")
    source_url: str = Field(..., description="URL of the originating page")
    author: Optional[str] = Field(None, description="Article author")
    published_at: Optional[datetime] = Field(None, description="Publication timestamp")
    status: Literal[ArticleStatus.SCRAPED] = ArticleStatus.SCRAPED
    reference_urls: List[str] = Field(default_factory=list, max_length=0)
