"""
Glossary Term Repository

Lookups by slug, by the exact term and by the exact definition text.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.models.glossary_term import GlossaryTerm
from athenaeum.shared.repositories.content import ContentRepository
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer


class GlossaryTermRepository(ContentRepository[GlossaryTerm]):
    """Repository for GlossaryTerm."""

    title_field = "term"
    body_fields = ("definition",)

    def __init__(
        self,
        session: AsyncSession,
        normalizer: Optional[SlugNormalizer] = None,
        seo: Optional[SEOMetaDeriver] = None,
    ) -> None:
        super().__init__(GlossaryTerm, session, normalizer, seo)

    async def get_by_term(self, term: str) -> Optional[GlossaryTerm]:
        return await self.get_by("term", term)

    async def get_by_definition(self, definition: str) -> Optional[GlossaryTerm]:
        return await self.get_by("definition", definition)
