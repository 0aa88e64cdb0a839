"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from rich.console import Console

from .. import __version__
from ..errors import ArticleNotFoundError, BlogsmithError, MissingFieldError
from ..pipeline import Services
from .routers import articles, pipeline

console = Console()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        yield
    finally:
        services = app.state.services
        if services is not None:
            services.close()
            console.print("[dim]Closed database pool and HTTP clients[/dim]")


def create_app(services: Optional[Services] = None) -> FastAPI:
    """
    Build the API.

    Args:
        services: Prebuilt services; when omitted they are built from the
            config file on the first request.
    """
    app = FastAPI(
        title="Blogsmith API",
        description="Blog article ingestion and AI enhancement",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    @app.exception_handler(MissingFieldError)
    async def missing_field_handler(request: Request, exc: MissingFieldError):
        return _error(400, str(exc))

    @app.exception_handler(ArticleNotFoundError)
    async def not_found_handler(request: Request, exc: ArticleNotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(BlogsmithError)
    async def blogsmith_error_handler(request: Request, exc: BlogsmithError):
        console.print(f"[red]{request.method} {request.url.path}: {exc}[/red]")
        return _error(500, str(exc))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        console.print(f"[red]{request.method} {request.url.path}: unexpected error: {exc}[/red]")
        return _error(500, str(exc) or "Unknown error")

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    app.include_router(articles.router)
    app.include_router(pipeline.router)
    return app
