"""HTTP API for Blogsmith."""

from .main import create_app

__all__ = ["create_app"]
