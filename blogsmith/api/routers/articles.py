"""Article CRUD endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...models import NewArticle
from ...pipeline import Services
from ..dependencies import get_services
from ..schemas import ArticleCreate, ArticleUpdate

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("")
def list_articles(services: Annotated[Services, Depends(get_services)]):
    """List all articles, newest first."""
    articles = services.store.list()
    return {"success": True, "data": [a.model_dump(mode="json") for a in articles]}


@router.get("/{article_id}")
def get_article(article_id: str, services: Annotated[Services, Depends(get_services)]):
    """Get a single article by ID."""
    article = services.store.get(article_id)
    return {"success": True, "data": article.model_dump(mode="json")}


@router.post("", status_code=201)
def create_article(body: ArticleCreate, services: Annotated[Services, Depends(get_services)]):
    """Create an article in the scraped state."""
    article = services.store.create(NewArticle(**body.model_dump()))
    return JSONResponse(
        status_code=201,
        content={"success": True, "data": article.model_dump(mode="json")},
    )


@router.put("/{article_id}")
def update_article(
    article_id: str,
    body: ArticleUpdate,
    services: Annotated[Services, Depends(get_services)],
):
    """Write the supplied fields of an article."""
    article = services.store.update(article_id, body.model_dump(exclude_unset=True))
    return {"success": True, "data": article.model_dump(mode="json")}


@router.delete("/{article_id}")
def delete_article(article_id: str, services: Annotated[Services, Depends(get_services)]):
    """Delete an article permanently."""
    services.store.delete(article_id)
    return {"success": True, "message": "Article deleted"}
