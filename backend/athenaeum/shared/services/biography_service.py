"""
Biography Services

BiographyEntryService handles the slugged philosopher profiles;
BiographyAnnexService handles the analysis annexes attached to them.

Annex Rules:
============
- An annex must point at an existing biography entry, both on create and
  when biography_id is changed.
- A biography entry with annexes cannot be deleted (RelatedRecordsError
  from the repository); delete the annexes first.
"""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.core.exceptions import NotFoundError
from athenaeum.shared.models.biography import BiographyAnnex, BiographyEntry
from athenaeum.shared.repositories.biography_repository import (
    BiographyAnnexRepository,
    BiographyEntryRepository,
)
from athenaeum.shared.services.base import CrudService, payload_values
from athenaeum.shared.services.content_service import ContentService


class BiographyEntryService(ContentService[BiographyEntry]):
    """Service for biography entries."""

    repository_class = BiographyEntryRepository
    resource = "BiographyEntry"
    required_fields = ("philosofer", "geoorigin", "detail_location", "years")

    async def get_by_philosofer(self, philosofer: str) -> BiographyEntry:
        return await self._get_by_field("philosofer", philosofer)


class BiographyAnnexService(CrudService[BiographyAnnex]):
    """
    Service for biography annexes.

    Annexes have no slug, so this builds on CrudService directly.
    """

    resource = "BiographyAnnex"
    required_fields = ("biography_id", "metafisika", "epsimologi", "aksiologi", "conclusion")

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize the service.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = BiographyAnnexRepository(session)
        self.biography_repo = BiographyEntryRepository(session)

    async def _require_biography(self, biography_id: int) -> None:
        if not await self.biography_repo.exists(biography_id):
            raise NotFoundError("BiographyEntry", biography_id)

    async def create(self, payload: Any, admin_id: Optional[int]) -> BiographyAnnex:
        """
        Attach an annex to a biography entry.

        Raises:
            ValidationError: Missing admin or blank required field
            NotFoundError: If the biography entry does not exist
        """
        self._require_admin(admin_id)
        values = payload_values(payload)
        self._validate_create(values)
        await self._require_biography(values["biography_id"])

        values["admin_id"] = admin_id
        return await self.repo.create(**values)

    async def get_by_biography_id(self, biography_id: int) -> BiographyAnnex:
        """
        Raises:
            NotFoundError: If the biography has no annex
        """
        return await self._get_by_field("biography_id", biography_id)

    async def update_by_id(self, record_id: int, payload: Any) -> BiographyAnnex:
        """
        Apply a partial update.

        Raises:
            NotFoundError: If the annex, or a newly referenced biography, does not exist
        """
        changes = payload_values(payload, partial=True)
        self._validate_update(changes)
        if "biography_id" in changes:
            await self._require_biography(changes["biography_id"])

        return await self.repo.update_by_id(record_id, **changes)
