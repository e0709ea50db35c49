"""
Dialogue Transcript Repository
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.models.dialogue_transcript import DialogueTranscript
from athenaeum.shared.repositories.content import ContentRepository
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer


class DialogueTranscriptRepository(ContentRepository[DialogueTranscript]):
    """Repository for DialogueTranscript; ``judul`` is the title, ``dialog`` the body."""

    title_field = "judul"
    body_fields = ("dialog",)

    def __init__(
        self,
        session: AsyncSession,
        normalizer: Optional[SlugNormalizer] = None,
        seo: Optional[SEOMetaDeriver] = None,
    ) -> None:
        super().__init__(DialogueTranscript, session, normalizer, seo)

    async def get_by_judul(self, judul: str) -> Optional[DialogueTranscript]:
        return await self.get_by("judul", judul)
