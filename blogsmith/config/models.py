"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class PostgresConfig(BaseModel):
    """Postgres configuration."""

    host: str = Field("localhost", description="Database host")
    port: int = Field(5432, description="Database port")
    database: str = Field("blogsmith", description="Database name")
    user: str = Field("blogsmith", description="Database user")
    password: Optional[str] = Field(None, description="Database password")
    password_env: Optional[str] = Field(None, description="Environment variable for password")


class FirecrawlConfig(BaseModel):
    """Scrape/search/map service configuration."""

    base_url: str = Field("https://api.firecrawl.dev/v1", description="Service base URL")
    api_key_env: Optional[str] = Field("FIRECRAWL_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    timeout: float = Field(60.0, ge=1.0, le=600.0, description="Request timeout in seconds")


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: str = Field("openai", description="LLM provider (openai, mock)")
    model: str = Field("google/gemini-2.5-flash", description="Model name")
    api_key_env: Optional[str] = Field("LLM_API_KEY", description="Environment variable for API key")
    api_key: Optional[str] = Field(None, description="API key (prefer api_key_env)")
    base_url: Optional[str] = Field(
        "https://ai.gateway.lovable.dev/v1",
        description="Base URL of an OpenAI compatible chat completions gateway",
    )
    timeout: float = Field(120.0, ge=1.0, le=600.0, description="Request timeout in seconds")


class IngestionConfig(BaseModel):
    """Which site to ingest and how to recognise article URLs on it."""

    target_root: str = Field("https://beyondchats.com/blog", description="Listing root to map")
    map_limit: int = Field(100, ge=1, le=5000, description="Max links requested from the map call")
    batch_size: int = Field(5, ge=1, le=100, description="Trailing number of articles to extract")
    article_path_prefix: Optional[str] = Field(
        None,
        description="Path segment every article URL contains (default: target root path + '/')",
    )
    exclude_segments: List[str] = Field(
        default_factory=lambda: ["/page/", "/tag/", "/category/"],
        description="Path segments marking listing/navigation pages",
    )
    skip_known_urls: bool = Field(
        False,
        description="Skip candidates whose source_url is already stored",
    )

    @field_validator("target_root")
    @classmethod
    def validate_target_root(cls, v: str) -> str:
        """Require an absolute http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"target_root must be an http(s) URL, got {v!r}")
        return v


class EnhancementConfig(BaseModel):
    """Enhancement pipeline tuning."""

    search_limit: int = Field(2, ge=0, le=10, description="Reference search result limit")
    max_reference_chars: int = Field(2000, ge=100, description="Characters kept per reference excerpt")
    stale_after_minutes: int = Field(
        30, ge=1, description="Age after which a processing article is considered stuck"
    )


class ServerConfig(BaseModel):
    """HTTP server settings."""

    host: str = Field("127.0.0.1", description="Bind host")
    port: int = Field(8000, ge=1, le=65535, description="Bind port")


class ConfigModel(BaseModel):
    """Main configuration model."""

    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    firecrawl: FirecrawlConfig = Field(default_factory=FirecrawlConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    ingestion: IngestionConfig = Field(default_factory=IngestionConfig)
    enhancement: EnhancementConfig = Field(default_factory=EnhancementConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
