"""Schema bootstrap for the articles table."""

from typing import Any, Dict

import psycopg
from psycopg_pool import PoolTimeout
from rich.console import Console

from .connection import get_connection

console = Console()

SCHEMA_SQL = """
-- One row per ingested blog post
CREATE TABLE IF NOT EXISTS articles (
    id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
    title TEXT NOT NULL,
    original_content TEXT NOT NULL DEFAULT '',
    enhanced_content TEXT,
    source_url TEXT NOT NULL,
    author TEXT,
    published_at TIMESTAMPTZ,
    reference_urls TEXT[] NOT NULL DEFAULT '{}',
    status TEXT NOT NULL DEFAULT 'scraped'
        CHECK (status IN ('scraped', 'processing', 'enhanced', 'error')),
    error_message TEXT,
    created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
);

-- Listing is newest first; lookups by status and source URL
CREATE INDEX IF NOT EXISTS idx_articles_created_at ON articles(created_at DESC);
CREATE INDEX IF NOT EXISTS idx_articles_status ON articles(status);
CREATE INDEX IF NOT EXISTS idx_articles_source_url ON articles(source_url);

-- Keep updated_at current on every write
CREATE OR REPLACE FUNCTION update_updated_at_column()
RETURNS TRIGGER AS $$
BEGIN
    NEW.updated_at = CURRENT_TIMESTAMP;
    RETURN NEW;
END;
$$ language 'plpgsql';

DROP TRIGGER IF EXISTS update_articles_updated_at ON articles;
CREATE TRIGGER update_articles_updated_at BEFORE UPDATE ON articles
    FOR EACH ROW EXECUTE FUNCTION update_updated_at_column();
"""


def validate_connection(config: Dict[str, Any]) -> bool:
    """Return True when the database answers a trivial query."""
    try:
        with get_connection(config) as conn:
            row = conn.execute("SELECT 1 AS ok").fetchone()
    except (psycopg.Error, PoolTimeout) as e:
        console.print(f"[red]Database connection failed: {e}[/red]")
        return False
    return row is not None and row["ok"] == 1


def init_database(config: Dict[str, Any]) -> None:
    """Create the articles table, its indexes and the updated_at trigger."""
    with get_connection(config) as conn:
        conn.execute(SCHEMA_SQL)
        conn.commit()
    console.print("[dim]articles schema is up to date[/dim]")
