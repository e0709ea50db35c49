"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per request around the request's session. The slug
normalizer and SEO deriver are stateless, so one instance of each is
shared by every service in the process.

Usage:
======
    from athenaeum.api.dependencies.services import get_article_service

    @router.get("/{article_id}")
    async def get_article(
        article_id: int,
        service: ArticleService = Depends(get_article_service),
    ):
        return await service.get_by_id(article_id)
"""

from functools import lru_cache
from typing import Callable, Type

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.api.dependencies.database import get_db
from athenaeum.shared.services import (
    ArticleService,
    BiographyAnnexService,
    BiographyEntryService,
    CatalogItemService,
    ContentService,
    DialogueTranscriptService,
    GlossaryTermService,
    ResearchNoteService,
)
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer


@lru_cache
def get_slug_normalizer() -> SlugNormalizer:
    """Process-wide SlugNormalizer."""
    return SlugNormalizer()


@lru_cache
def get_seo_deriver() -> SEOMetaDeriver:
    """Process-wide SEOMetaDeriver."""
    return SEOMetaDeriver()


def _content_service(service_class: Type[ContentService]) -> Callable:
    """Build the per-request dependency for a slugged content service."""

    async def dependency(db: AsyncSession = Depends(get_db)) -> ContentService:
        return service_class(db, get_slug_normalizer(), get_seo_deriver())

    dependency.__name__ = f"get_{service_class.__name__}"
    return dependency


get_biography_service = _content_service(BiographyEntryService)
get_article_service = _content_service(ArticleService)
get_research_note_service = _content_service(ResearchNoteService)
get_glossary_term_service = _content_service(GlossaryTermService)
get_dialogue_transcript_service = _content_service(DialogueTranscriptService)
get_catalog_item_service = _content_service(CatalogItemService)


async def get_biography_annex_service(
    db: AsyncSession = Depends(get_db),
) -> BiographyAnnexService:
    """
    Dependency to get BiographyAnnexService instance.
    """
    return BiographyAnnexService(db)
