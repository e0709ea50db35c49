"""
Base Repository

Generic repository with the CRUD and listing operations every content
table shares. Content repositories add slug/meta handling on top.

What This Provides:
===================
- get(id)                 → Fetch single record by id
- get_by(field, value)    → First record whose column equals value
- exists(id)              → Check if record exists
- count(filters)          → Count records with equality filters
- list(...)               → Ordered window of records
- get_all(params, filters)→ Paginated listing: Page(data, pagination)
- create(**values)        → Insert inside a SAVEPOINT
- update_by_id(id, ...)   → Apply changes inside a SAVEPOINT
- delete_by_id(id)        → Delete, FK refusal → RelatedRecordsError

Generic Type Pattern:
=====================
    class BiographyAnnexRepository(BaseRepository[BiographyAnnex]):
        pass

    repo = BiographyAnnexRepository(db)
    annex = await repo.get(3)  # Returns BiographyAnnex, not Any

Paginated Listing Flow:
=======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                          get_all(params, filters)                           │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   1. Validate sort_by against mapped columns  → ValidationError if unknown  │
│   2. SELECT COUNT(*) ... WHERE filters        → total                       │
│   3. SELECT ... WHERE filters                                               │
│        ORDER BY sort_by [DESC|ASC], id                                      │
│        OFFSET (page-1)*limit LIMIT limit      → data                        │
│   4. PaginationMeta.create(page, limit, total)                              │
│                                                                             │
│   Both reads run one after the other on the request's session; a row       │
│   inserted in between can make total and data disagree by one.             │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Constraint Signals:
===================
Writes run inside ``session.begin_nested()`` so a constraint failure rolls
back only that statement and leaves the request transaction usable.
IntegrityErrors are classified by SQLSTATE (PostgreSQL) or driver message
(SQLite):

    23505 / "UNIQUE constraint failed"       → unique violation
    23503 / "FOREIGN KEY constraint failed"  → foreign-key violation
    anything else                            → PersistenceError

flush() vs commit():
====================
Repository methods only flush; get_db() commits once the request succeeds.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from athenaeum.shared.core.exceptions import (
    AthenaeumException,
    ConflictError,
    NotFoundError,
    PersistenceError,
    RelatedRecordsError,
    ValidationError,
)
from athenaeum.shared.core.logging import get_logger
from athenaeum.shared.models.base import Base
from athenaeum.shared.schemas.common import PaginationMeta, PaginationParams


# TypeVar bound to Base ensures we only work with SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

_UNIQUE_MARKERS = ("unique constraint failed", "duplicate key")
_FOREIGN_KEY_MARKERS = ("foreign key constraint", "violates foreign key")

log = get_logger("athenaeum.repository")


# ═══════════════════════════════════════════════════════════════════════════════
# INTEGRITY ERROR CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════════════


def _sqlstate(exc: IntegrityError) -> Optional[str]:
    """SQLSTATE of the driver error, if the driver exposes one."""
    orig = getattr(exc, "orig", None)
    for source in (orig, getattr(orig, "__cause__", None)):
        code = getattr(source, "sqlstate", None) or getattr(source, "pgcode", None)
        if code:
            return str(code)
    return None


def _driver_message(exc: IntegrityError) -> str:
    return str(getattr(exc, "orig", None) or exc).lower()


def is_unique_violation(exc: IntegrityError) -> bool:
    """True if the write was rejected by a unique index."""
    code = _sqlstate(exc)
    if code is not None:
        return code == UNIQUE_VIOLATION
    message = _driver_message(exc)
    return any(marker in message for marker in _UNIQUE_MARKERS)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """True if the write was rejected by a foreign key."""
    code = _sqlstate(exc)
    if code is not None:
        return code == FOREIGN_KEY_VIOLATION
    message = _driver_message(exc)
    return any(marker in message for marker in _FOREIGN_KEY_MARKERS)


def violates_column(exc: IntegrityError, column: str) -> bool:
    """
    True if the driver message names ``column``.

    PostgreSQL reports the index name (``ix_articles_slug``), SQLite the
    qualified column (``articles.slug``); both contain the column name.
    """
    return column.lower() in _driver_message(exc)


@dataclass
class Page(Generic[ModelType]):
    """One window of a paginated listing."""

    data: list[ModelType]
    pagination: PaginationMeta


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., Article, BiographyAnnex)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    @property
    def resource(self) -> str:
        """Model name used in error messages."""
        return self.model.__name__

    @property
    def namespace(self) -> str:
        return self.model.namespace()

    def _column(self, field: str) -> Any:
        """
        Mapped column attribute for ``field``.

        Raises:
            ValidationError: If the model has no such column
        """
        if field not in self.model.__mapper__.columns.keys():
            raise ValidationError(
                f"Unknown field '{field}' for {self.resource}",
                details={"field": field},
            )
        return getattr(self.model, field)

    def _check_columns(self, fields: Iterable[str]) -> None:
        for field in fields:
            self._column(field)

    def _apply_filters(self, query: Any, filters: Optional[dict[str, Any]]) -> Any:
        """WHERE field = value for each filter; None values are skipped."""
        if filters:
            for field, value in filters.items():
                if value is not None and hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)
        return query

    def _translate(self, exc: SQLAlchemyError, operation: str, **context: Any) -> AthenaeumException:
        """
        Map a database error onto the error taxonomy.

        Unique violations become ConflictError, foreign-key violations on
        insert/update become ValidationError (the referenced row is missing)
        and on delete RelatedRecordsError. Everything else is wrapped in
        PersistenceError.
        """
        if isinstance(exc, IntegrityError):
            if is_unique_violation(exc):
                return ConflictError(
                    f"{self.resource} conflicts with an existing record",
                    details=context,
                )
            if is_foreign_key_violation(exc):
                if operation == "delete":
                    return RelatedRecordsError(self.resource, context.get("record_id"))
                return ValidationError(
                    f"{self.resource} references a record that does not exist",
                    details=context,
                )
        log.error(
            "Database error",
            operation=operation,
            namespace=self.namespace,
            error=str(exc),
            **context,
        )
        return PersistenceError(operation, self.resource, details=context)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by id.

        SQL Generated:
            SELECT * FROM articles WHERE id = 12
        """
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_by(self, field: str, value: Any) -> Optional[ModelType]:
        """
        Get the first record whose ``field`` equals ``value``.

        Exact match only; there is no fuzzy search.

        Example:
            term = await repo.get_by("term", "Dasein")

        SQL Generated:
            SELECT * FROM glossary_terms WHERE term = 'Dasein' ORDER BY id LIMIT 1
        """
        column = self._column(field)
        result = await self.session.execute(
            select(self.model).where(column == value).order_by(self.model.id).limit(1)
        )
        return result.scalar_one_or_none()

    async def exists(self, record_id: int) -> bool:
        """Check if a record exists without loading it."""
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    async def count(self, filters: Optional[dict[str, Any]] = None) -> int:
        """
        Count records with optional equality filters.

        SQL Generated:
            SELECT COUNT(*) FROM articles WHERE is_published = true
        """
        query = self._apply_filters(select(sql_count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar() or 0

    async def list(
        self,
        *,
        offset: int = 0,
        limit: int = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: str = "id",
        order_desc: bool = True,
    ) -> list[ModelType]:
        """
        Ordered window of records.

        Rows that tie on ``order_by`` are ordered by id in the same
        direction so consecutive pages never overlap.

        Raises:
            ValidationError: If order_by is not a column of the model
        """
        order_column = self._column(order_by)
        ordering = [order_column.desc() if order_desc else order_column.asc()]
        if order_by != "id":
            ordering.append(self.model.id.desc() if order_desc else self.model.id.asc())

        query = self._apply_filters(select(self.model), filters)
        query = query.order_by(*ordering).offset(offset).limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_all(
        self,
        params: Optional[PaginationParams] = None,
        filters: Optional[dict[str, Any]] = None,
    ) -> Page[ModelType]:
        """
        Paginated listing.

        A page past the end is not an error; it comes back with empty data
        and the same totals.

        Example:
            page = await repo.get_all(PaginationParams(page=2, limit=10))
            page.pagination.total_pages
        """
        params = params or PaginationParams()
        self._column(params.sort_by)

        total = await self.count(filters)
        data = await self.list(
            offset=params.offset,
            limit=params.limit,
            filters=filters,
            order_by=params.sort_by,
            order_desc=params.descending,
        )
        return Page(
            data=data,
            pagination=PaginationMeta.create(page=params.page, limit=params.limit, total=total),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **values: Any) -> ModelType:
        """
        Create a new record.

        None values are dropped so column defaults apply.

        Raises:
            ValidationError: If an id is supplied or a field is unknown
        """
        if "id" in values:
            raise ValidationError("id is assigned by the database", details={"field": "id"})
        values = {key: value for key, value in values.items() if value is not None}
        self._check_columns(values)

        try:
            async with self.session.begin_nested():
                instance = self.model(**values)
                self.session.add(instance)
                await self.session.flush()
        except SQLAlchemyError as exc:
            raise self._translate(exc, "create") from exc

        await self.session.refresh(instance)
        log.info("Record created", namespace=self.namespace, record_id=instance.id)
        return instance

    async def update_by_id(self, record_id: int, **changes: Any) -> ModelType:
        """
        Apply ``changes`` to a record.

        Every key given is written, including explicit None.

        Raises:
            NotFoundError: If no record has this id
        """
        if "id" in changes:
            raise ValidationError("id cannot be changed", details={"field": "id"})
        self._check_columns(changes)

        instance = await self.get(record_id)
        if instance is None:
            raise NotFoundError(self.resource, record_id)

        try:
            async with self.session.begin_nested():
                for field, value in changes.items():
                    setattr(instance, field, value)
                await self.session.flush()
        except SQLAlchemyError as exc:
            raise self._translate(exc, "update", record_id=record_id) from exc

        await self.session.refresh(instance)
        log.info(
            "Record updated",
            namespace=self.namespace,
            record_id=record_id,
            fields=sorted(changes),
        )
        return instance

    async def delete_by_id(self, record_id: int) -> ModelType:
        """
        Hard delete a record and return it.

        Raises:
            NotFoundError: If no record has this id
            RelatedRecordsError: If other records still reference it

        SQL Generated:
            DELETE FROM biography_entries WHERE id = 3
        """
        instance = await self.get(record_id)
        if instance is None:
            raise NotFoundError(self.resource, record_id)

        try:
            async with self.session.begin_nested():
                await self.session.delete(instance)
                await self.session.flush()
        except SQLAlchemyError as exc:
            raise self._translate(exc, "delete", record_id=record_id) from exc

        log.info("Record deleted", namespace=self.namespace, record_id=record_id)
        return instance
