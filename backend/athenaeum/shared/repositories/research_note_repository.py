"""
Research Note Repository
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.models.research_note import ResearchNote
from athenaeum.shared.repositories.content import ContentRepository
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer


class ResearchNoteRepository(ContentRepository[ResearchNote]):
    """Repository for ResearchNote; slug from research_title, description from research_sum."""

    title_field = "research_title"
    body_fields = ("research_sum",)

    def __init__(
        self,
        session: AsyncSession,
        normalizer: Optional[SlugNormalizer] = None,
        seo: Optional[SEOMetaDeriver] = None,
    ) -> None:
        super().__init__(ResearchNote, session, normalizer, seo)

    async def get_by_research_title(self, research_title: str) -> Optional[ResearchNote]:
        return await self.get_by("research_title", research_title)
