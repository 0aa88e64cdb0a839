"""Ingestion and enhancement trigger endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ...pipeline import Services
from ..dependencies import get_services
from ..schemas import EnhanceRequest

router = APIRouter(tags=["pipeline"])


@router.post("/scrape-latest")
def scrape_latest(services: Annotated[Services, Depends(get_services)]):
    """Ingest the latest articles from the configured blog."""
    result = services.ingestion.scrape_latest()
    if not result.success:
        return JSONResponse(status_code=500, content={"success": False, "error": result.message})
    return {
        "success": True,
        "message": result.message,
        "articles": [a.model_dump(mode="json") for a in result.articles],
    }


@router.post("/enhance")
def enhance_article(
    services: Annotated[Services, Depends(get_services)],
    body: Annotated[Optional[EnhanceRequest], Body()] = None,
):
    """Enhance one article with references and an AI rewrite."""
    article_id = body.articleId if body else None
    result = services.enhancement.enhance(article_id)
    if not result.success:
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": result.message, "reason": result.reason},
        )
    return {
        "success": True,
        "message": result.message,
        "article": result.article.model_dump(mode="json"),
    }
