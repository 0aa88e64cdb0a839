"""Request bodies for the HTTP API."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import ArticleStatus


class EnhanceRequest(BaseModel):
    """Body of POST /enhance."""

    articleId: Optional[str] = Field(None, description="Article to enhance")


class ArticleCreate(BaseModel):
    """Body of POST /articles."""

    title: str
    original_content: str = ""
    source_url: str
    author: Optional[str] = None
    published_at: Optional[datetime] = None


class ArticleUpdate(BaseModel):
    """Body of PUT /articles/{id}; only the fields sent are written."""

    title: Optional[str] = None
    original_content: Optional[str] = None
    enhanced_content: Optional[str] = None
    source_url: Optional[str] = None
    author: Optional[str] = None
    published_at: Optional[datetime] = None
    reference_urls: Optional[List[str]] = None
    status: Optional[ArticleStatus] = None
    error_message: Optional[str] = None
