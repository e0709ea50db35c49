"""
Content Service

Business logic shared by every slugged content type.

Flow (create):
==============
    payload ──► required fields non-blank ──► image present (if required)
            ──► repo.create(**values, admin_id=admin_id)
                    └── slug resolved, meta derived, retried on slug race

Flow (update):
==============
    payload.model_dump(exclude_unset=True)      ← absent vs null preserved
            ──► required fields not blanked ──► repo.update_by_id(id, **changes)

Usage:
======
    service = ArticleService(db, normalizer, seo)
    article = await service.create(ArticleCreate(...), admin_id=1)
    page = await service.get_all(PaginationParams(page=2), is_published=True)
"""

from typing import Any, Generic, Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.core.exceptions import ValidationError
from athenaeum.shared.repositories.base import ModelType
from athenaeum.shared.repositories.content import ContentRepository
from athenaeum.shared.services.base import CrudService, payload_values
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer


class ContentService(CrudService[ModelType], Generic[ModelType]):
    """
    Service for a slugged content type.

    Subclasses set ``repository_class``, ``resource``, ``required_fields``
    and ``requires_image``.
    """

    repository_class: Type[ContentRepository]
    requires_image: bool = False
    rederived_fields = ("slug",)

    repo: ContentRepository[ModelType]

    def __init__(
        self,
        session: AsyncSession,
        normalizer: Optional[SlugNormalizer] = None,
        seo: Optional[SEOMetaDeriver] = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            session: Async database session
            normalizer: Process-wide SlugNormalizer
            seo: Process-wide SEOMetaDeriver
        """
        self.session = session
        self.repo = self.repository_class(session, normalizer, seo)

    async def create(self, payload: Any, admin_id: Optional[int]) -> ModelType:
        """
        Create a record owned by ``admin_id``.

        Raises:
            ValidationError: Missing admin, blank required field or missing image
            InvalidTitleError: Title with no sluggable characters
            SlugExhaustedError: Every slug suffix taken
        """
        self._require_admin(admin_id)
        values = payload_values(payload)
        self._validate_create(values)
        if self.requires_image and self._is_blank(values.get("image_url")):
            raise ValidationError("Image is required", details={"field": "image_url"})

        values["admin_id"] = admin_id
        return await self.repo.create(**values)

    async def get_by_slug(self, slug: str) -> ModelType:
        """
        Raises:
            NotFoundError: If no record in this type has the slug
        """
        return await self._get_by_field("slug", slug)

    async def update_by_id(self, record_id: int, payload: Any) -> ModelType:
        """
        Apply a partial update.

        Raises:
            NotFoundError: If no record has this id
            ValidationError: A required field blanked or nulled
        """
        changes = payload_values(payload, partial=True)
        self._validate_update(changes)
        if self.requires_image and "image_url" in changes and self._is_blank(changes["image_url"]):
            raise ValidationError("Image cannot be removed", details={"field": "image_url"})

        return await self.repo.update_by_id(record_id, **changes)
