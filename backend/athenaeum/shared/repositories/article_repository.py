"""
Article Repository

Data access for articles. Slug and meta title derive from ``title``,
meta description from ``content``.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.models.article import Article
from athenaeum.shared.repositories.content import ContentRepository
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer


class ArticleRepository(ContentRepository[Article]):
    """Repository for Article."""

    title_field = "title"
    body_fields = ("content",)

    def __init__(
        self,
        session: AsyncSession,
        normalizer: Optional[SlugNormalizer] = None,
        seo: Optional[SEOMetaDeriver] = None,
    ) -> None:
        super().__init__(Article, session, normalizer, seo)

    async def get_by_title(self, title: str) -> Optional[Article]:
        """Exact-title lookup."""
        return await self.get_by("title", title)
