"""
Catalog Item Repository
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.models.catalog_item import CatalogItem
from athenaeum.shared.repositories.content import ContentRepository
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer


class CatalogItemRepository(ContentRepository[CatalogItem]):
    """Repository for CatalogItem."""

    title_field = "title"
    body_fields = ("desc",)

    def __init__(
        self,
        session: AsyncSession,
        normalizer: Optional[SlugNormalizer] = None,
        seo: Optional[SEOMetaDeriver] = None,
    ) -> None:
        super().__init__(CatalogItem, session, normalizer, seo)

    async def get_by_title(self, title: str) -> Optional[CatalogItem]:
        return await self.get_by("title", title)
