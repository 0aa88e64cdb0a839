"""Blogsmith - blog article ingestion and AI enhancement pipeline."""

__version__ = "0.1.0"
