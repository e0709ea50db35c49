"""
Biography Repositories

Data access for biography entries and their analysis annexes.

Relationships:
==============
    biography_entries.id  ◄──  biography_annexes.biography_id  (ON DELETE RESTRICT)

Deleting an entry that still has annexes fails with RelatedRecordsError;
the annexes have to go first.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.models.biography import BiographyAnnex, BiographyEntry
from athenaeum.shared.repositories.base import BaseRepository
from athenaeum.shared.repositories.content import ContentRepository
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer


class BiographyEntryRepository(ContentRepository[BiographyEntry]):
    """
    Repository for BiographyEntry.

    The slug comes from the philosopher's name. There is no single body
    column, so the meta description is built from origin, place and years:

        "Prussia, Königsberg, 1724 - 1804"
    """

    title_field = "philosofer"
    body_fields = ("geoorigin", "detail_location", "years")
    body_separator = ", "

    def __init__(
        self,
        session: AsyncSession,
        normalizer: Optional[SlugNormalizer] = None,
        seo: Optional[SEOMetaDeriver] = None,
    ) -> None:
        super().__init__(BiographyEntry, session, normalizer, seo)

    async def get_by_philosofer(self, philosofer: str) -> Optional[BiographyEntry]:
        return await self.get_by("philosofer", philosofer)


class BiographyAnnexRepository(BaseRepository[BiographyAnnex]):
    """Repository for BiographyAnnex (no slug or SEO meta)."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(BiographyAnnex, session)

    async def get_by_biography_id(self, biography_id: int) -> Optional[BiographyAnnex]:
        """
        Get the annex written for a biography entry.

        SQL Generated:
            SELECT * FROM biography_annexes WHERE biography_id = 3 ORDER BY id LIMIT 1
        """
        return await self.get_by("biography_id", biography_id)
