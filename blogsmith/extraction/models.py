"""Data models for the extraction service."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ScrapedPage(BaseModel):
    """Main content extracted from one page."""

    url: str = Field(..., description="Page URL")
    title: str = Field("Untitled", description="Page title")
    markdown: str = Field("", description="Main content as markdown")
    author: Optional[str] = Field(None, description="Author from page metadata")
    published_at: Optional[datetime] = Field(None, description="Publication time from metadata")


class SearchResult(BaseModel):
    """One web search hit."""

    url: str = Field(..., description="Result URL")
    title: Optional[str] = Field(None, description="Result title")
    markdown: Optional[str] = Field(None, description="Scraped markdown, when requested")
    description: Optional[str] = Field(None, description="Search snippet")

    @property
    def excerpt(self) -> str:
        """Best available text for the result."""
        return self.markdown or self.description or ""
