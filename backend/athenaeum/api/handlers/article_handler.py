"""
Article Handler
"""

from fastapi import Depends

from athenaeum.api.dependencies.services import get_article_service
from athenaeum.api.handlers.content_handler import build_content_router
from athenaeum.shared.schemas.article import ArticleCreate, ArticleResponse, ArticleUpdate
from athenaeum.shared.services.article_service import ArticleService


router = build_content_router(
    get_service=get_article_service,
    create_schema=ArticleCreate,
    update_schema=ArticleUpdate,
    response_schema=ArticleResponse,
)


@router.get("/title/{title}", response_model=ArticleResponse)
async def get_by_title(
    title: str,
    service: ArticleService = Depends(get_article_service),
):
    """Fetch an article by its exact title."""
    return await service.get_by_title(title)
