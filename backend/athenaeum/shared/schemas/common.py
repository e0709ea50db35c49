"""
Common Schemas

Shared schemas for the listing contract and error/health responses.

Schema Types:
=============
- BaseSchema: Base with common config (from_attributes, populate_by_name)
- PaginationParams: page/limit/sort inputs, normalized instead of rejected
- PaginationMeta: the pagination envelope
- PaginatedResponse[T]: {data, pagination} as returned over HTTP

Pagination Rules:
=================
    page      = clamp(requested, 1, MAX_PAGE)        (missing → 1)
    limit     = clamp(requested, 1, MAX_PAGE_SIZE)   (missing → DEFAULT_PAGE_SIZE)
    offset    = (page - 1) * limit
    sort_by   = "id" unless given
    sort_order= "desc" unless given

    totalPages      = ceil(total / limit)            (0 when total is 0)
    hasNextPage     = page < totalPages
    hasPreviousPage = page > 1 (false when there is nothing at all)

Usage:
======
    params = PaginationParams(page=3, limit=10)
    meta = PaginationMeta.create(page=params.page, limit=params.limit, total=25)
    meta.total_pages      # 3
    meta.has_next_page    # False
"""

from datetime import datetime, timezone
from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from athenaeum.config.settings import settings


DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    - from_attributes: Allow creating from ORM models
    - populate_by_name: Allow field population by name or alias
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseModel):
    """
    Listing parameters.

    Out-of-range values are clamped rather than rejected, so
    ``PaginationParams(page=0, limit=500)`` is page 1 of 100. Pages past
    MAX_PAGE are read as MAX_PAGE, which is empty for any realistic table.
    """

    page: int = Field(default=1, description="Page number (1-indexed)")
    limit: int = Field(default=settings.DEFAULT_PAGE_SIZE, description="Items per page")
    sort_by: str = Field(default="id", description="Column to order by")
    sort_order: Literal["asc", "desc"] = Field(default="desc", description="asc or desc")

    @field_validator("page", mode="before")
    @classmethod
    def _normalize_page(cls, value: Any) -> int:
        if value is None:
            return 1
        return min(settings.MAX_PAGE, max(1, int(value)))

    @field_validator("limit", mode="before")
    @classmethod
    def _normalize_limit(cls, value: Any) -> int:
        if value is None:
            return settings.DEFAULT_PAGE_SIZE
        return min(settings.MAX_PAGE_SIZE, max(1, int(value)))

    @field_validator("sort_by", mode="before")
    @classmethod
    def _default_sort_by(cls, value: Any) -> str:
        return value or "id"

    @field_validator("sort_order", mode="before")
    @classmethod
    def _lower_sort_order(cls, value: Any) -> str:
        if not value:
            return "desc"
        return str(value).lower()

    @property
    def offset(self) -> int:
        """Rows to skip before the requested page."""
        return (self.page - 1) * self.limit

    @property
    def descending(self) -> bool:
        return self.sort_order == "desc"


class PaginationMeta(BaseModel):
    """
    Pagination envelope.

    Serialized with camelCase keys (``totalPages``, ``hasNextPage``,
    ``hasPreviousPage``); attributes stay snake_case in Python.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    total: int = Field(description="Total number of items")
    page: int = Field(description="Current page number")
    limit: int = Field(description="Items per page")
    total_pages: int = Field(description="Total number of pages")
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def create(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        """
        Build the envelope from already-normalized inputs.

        A page past the end is not an error: the caller gets empty data
        with these same numbers.
        """
        total_pages = (total + limit - 1) // limit if limit > 0 else 0
        return cls(
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_previous_page=page > 1 and total > 0,
        )


class PaginatedResponse(BaseModel, Generic[DataT]):
    """
    Generic paginated response.

    Example:
        PaginatedResponse[ArticleResponse](
            data=[article1, article2],
            pagination=PaginationMeta.create(page=1, limit=10, total=2)
        )
    """

    data: list[DataT]
    pagination: PaginationMeta


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "athenaeum"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# ═══════════════════════════════════════════════════════════════════════════════
# MIXINS
# ═══════════════════════════════════════════════════════════════════════════════


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields in responses."""

    created_at: datetime
    updated_at: datetime


class WriteSchema(BaseModel):
    """Base for create/update payloads; unknown keys (including ``id``) are rejected."""

    model_config = ConfigDict(extra="forbid")


class SeoFieldsMixin(WriteSchema):
    """Optional slug/meta overrides accepted on create and update."""

    slug: Optional[str] = Field(None, description="Explicit slug; derived from the title if absent")
    meta_title: Optional[str] = Field(None, description="Explicit SEO title; derived if absent")
    meta_description: Optional[str] = Field(
        None, description="Explicit SEO description; derived if absent"
    )
    is_published: Optional[bool] = None
    image_url: Optional[str] = Field(None, description="URL from the upload collaborator")


class SluggedResponseMixin(TimestampMixin):
    """Fields every slugged content response carries."""

    id: int
    admin_id: int
    slug: str
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    is_published: bool
    image_url: Optional[str] = None
