"""
Content Repository

Generic repository for slugged content. Adds to BaseRepository the slug
and SEO metadata rules that every content type shares.

Write Rules:
============
┌─────────────────────────────────────────────────────────────────────────────┐
│ CREATE                                                                      │
│   fragment   = normalize(slug if given else title)                          │
│   slug       = first free of fragment, fragment-2, fragment-3 ...           │
│   meta_title = given, else derive_title(title)                              │
│   meta_desc  = given, else derive_description(body)                         │
├─────────────────────────────────────────────────────────────────────────────┤
│ UPDATE (only keys present in the payload count)                             │
│   title changed or slug present  → slug re-resolved, own id excluded        │
│   title changed, no meta_title   → meta_title re-derived                    │
│   body changed, no meta_desc     → meta_description re-derived              │
│   meta_* present as null         → re-derived from post-update values       │
│   nothing relevant changed       → slug/meta untouched                      │
└─────────────────────────────────────────────────────────────────────────────┘

Slug Races:
===========
The existence check and the write are separate statements, so two writers
can pick the same candidate. The unique index rejects the second one:

    candidate = next_available(fragment, start=n)
    SAVEPOINT → INSERT/UPDATE
        ok                    → RELEASE, done
        unique(slug) violated → ROLLBACK TO SAVEPOINT, n = attempt + 1, again

The walk is bounded by SLUG_MAX_ATTEMPTS; past it SlugExhaustedError.

Usage:
======
    class ArticleRepository(ContentRepository[Article]):
        title_field = "title"
        body_fields = ("content",)

    repo = ArticleRepository(db, normalizer, seo)
    article = await repo.create(title="On Being", content="...", admin_id=1, ...)
"""

from typing import Any, Generic, Mapping, Optional, Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.core.exceptions import NotFoundError, ValidationError
from athenaeum.shared.core.logging import get_logger
from athenaeum.shared.repositories.base import (
    BaseRepository,
    ModelType,
    is_unique_violation,
    violates_column,
)
from athenaeum.shared.utils.seo import SEOMetaDeriver
from athenaeum.shared.utils.slug import SlugNormalizer, SlugUniquenessResolver


log = get_logger("athenaeum.repository.content")


class ContentRepository(BaseRepository[ModelType], Generic[ModelType]):
    """
    Repository for a slugged content type.

    Subclasses name the field the slug and meta title come from and the
    field(s) the meta description comes from.

    Attributes:
        title_field: Column the slug and meta_title derive from
        body_fields: Columns joined into the text meta_description derives from
        body_separator: Joiner for multi-field bodies
        normalizer: Shared SlugNormalizer
        seo: Shared SEOMetaDeriver
        slugs: Uniqueness resolver bound to this table
    """

    title_field: str = "title"
    body_fields: tuple[str, ...] = ()
    body_separator: str = " "

    def __init__(
        self,
        model: Type[ModelType],
        session: AsyncSession,
        normalizer: Optional[SlugNormalizer] = None,
        seo: Optional[SEOMetaDeriver] = None,
    ) -> None:
        super().__init__(model, session)
        self.normalizer = normalizer or SlugNormalizer()
        self.seo = seo or SEOMetaDeriver()
        self.slugs = SlugUniquenessResolver(session, model)

    def body_text(self, values: Mapping[str, Any]) -> str:
        """Text the meta description is derived from."""
        parts = (values.get(field) for field in self.body_fields)
        return self.body_separator.join(str(part) for part in parts if part)

    @staticmethod
    def _changed(instance: ModelType, changes: Mapping[str, Any], field: str) -> bool:
        return field in changes and changes[field] != getattr(instance, field)

    def is_slug_collision(self, exc: IntegrityError) -> bool:
        return is_unique_violation(exc) and violates_column(exc, "slug")

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_slug(self, slug: str) -> Optional[ModelType]:
        """
        Get a record by its slug within this content type.

        SQL Generated:
            SELECT * FROM articles WHERE slug = 'on-being' LIMIT 1
        """
        return await self.get_by("slug", slug)

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **values: Any) -> ModelType:
        """
        Create a record with a unique slug and fallback SEO meta.

        Args:
            **values: Column values, including admin_id and the title field;
                      slug/meta_title/meta_description are optional overrides

        Returns:
            The created record, refreshed from the database

        Raises:
            ValidationError: If an id is supplied or a field is unknown
            InvalidTitleError: If the title (or explicit slug) has no usable characters
            SlugExhaustedError: If every suffix is taken
        """
        if "id" in values:
            raise ValidationError("id is assigned by the database", details={"field": "id"})
        values = {key: value for key, value in values.items() if value is not None}
        explicit_slug = values.pop("slug", None)
        self._check_columns(values)

        title = values.get(self.title_field)
        fragment = self.normalizer.normalize(explicit_slug or title)

        if not values.get("meta_title"):
            values["meta_title"] = self.seo.derive_title(title)
        if not values.get("meta_description"):
            values["meta_description"] = self.seo.derive_description(self.body_text(values))

        start = 1
        while True:
            candidate = await self.slugs.next_available(fragment, start=start)
            try:
                async with self.session.begin_nested():
                    instance = self.model(**values, slug=candidate.slug)
                    self.session.add(instance)
                    await self.session.flush()
            except IntegrityError as exc:
                if not self.is_slug_collision(exc):
                    raise self._translate(exc, "create") from exc
                log.warning(
                    "Slug taken at write time, retrying",
                    namespace=self.namespace,
                    slug=candidate.slug,
                    attempt=candidate.attempt,
                )
                start = candidate.attempt + 1
                continue
            except SQLAlchemyError as exc:
                raise self._translate(exc, "create") from exc
            break

        await self.session.refresh(instance)
        log.info(
            "Content created",
            namespace=self.namespace,
            record_id=instance.id,
            slug=instance.slug,
        )
        return instance

    async def update_by_id(self, record_id: int, **changes: Any) -> ModelType:
        """
        Apply a partial update, keeping slug and meta in step with it.

        ``changes`` must hold exactly the fields present in the request, so
        a field left out and a field sent as null stay distinguishable
        (``payload.model_dump(exclude_unset=True)``).

        Raises:
            NotFoundError: If no record has this id
            InvalidTitleError: If the new title (or slug) has no usable characters
            SlugExhaustedError: If every suffix is taken
        """
        if "id" in changes:
            raise ValidationError("id cannot be changed", details={"field": "id"})
        changes = dict(changes)
        slug_present = "slug" in changes
        explicit_slug = changes.pop("slug", None)
        self._check_columns(changes)

        instance = await self.get(record_id)
        if instance is None:
            raise NotFoundError(self.resource, record_id)

        # Post-update view of the fields slug and meta derive from
        source = {
            field: changes.get(field, getattr(instance, field))
            for field in (self.title_field, *self.body_fields)
        }
        # Re-sending the current value is not a change
        title_changed = self._changed(instance, changes, self.title_field)
        body_changed = any(self._changed(instance, changes, field) for field in self.body_fields)

        fragment = None
        if explicit_slug:
            fragment = self.normalizer.normalize(explicit_slug)
        elif title_changed or slug_present:
            fragment = self.normalizer.normalize(source[self.title_field])

        if "meta_title" in changes:
            if not changes["meta_title"]:
                changes["meta_title"] = self.seo.derive_title(source[self.title_field])
        elif title_changed:
            changes["meta_title"] = self.seo.derive_title(source[self.title_field])

        if "meta_description" in changes:
            if not changes["meta_description"]:
                changes["meta_description"] = self.seo.derive_description(self.body_text(source))
        elif body_changed:
            changes["meta_description"] = self.seo.derive_description(self.body_text(source))

        if fragment is None:
            return await super().update_by_id(record_id, **changes)

        start = 1
        while True:
            candidate = await self.slugs.next_available(fragment, exclude_id=record_id, start=start)
            try:
                async with self.session.begin_nested():
                    for field, value in changes.items():
                        setattr(instance, field, value)
                    instance.slug = candidate.slug
                    await self.session.flush()
            except IntegrityError as exc:
                if not self.is_slug_collision(exc):
                    raise self._translate(exc, "update", record_id=record_id) from exc
                log.warning(
                    "Slug taken at write time, retrying",
                    namespace=self.namespace,
                    record_id=record_id,
                    slug=candidate.slug,
                    attempt=candidate.attempt,
                )
                # The savepoint rollback expired the row; reload before reapplying
                await self.session.refresh(instance)
                start = candidate.attempt + 1
                continue
            except SQLAlchemyError as exc:
                raise self._translate(exc, "update", record_id=record_id) from exc
            break

        await self.session.refresh(instance)
        log.info(
            "Content updated",
            namespace=self.namespace,
            record_id=record_id,
            slug=instance.slug,
            fields=sorted(changes),
        )
        return instance
