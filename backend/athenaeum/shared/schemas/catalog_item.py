"""
Catalog item Pydantic schemas.
"""

from typing import Optional

from athenaeum.shared.schemas.common import BaseSchema, SeoFieldsMixin, SluggedResponseMixin


class CatalogItemCreate(SeoFieldsMixin):
    """Request to create a catalog item."""

    title: str
    desc: str
    category: str
    price: str
    stock: str
    link: str
    is_available: Optional[bool] = None


class CatalogItemUpdate(SeoFieldsMixin):
    """Partial catalog item update."""

    title: Optional[str] = None
    desc: Optional[str] = None
    category: Optional[str] = None
    price: Optional[str] = None
    stock: Optional[str] = None
    link: Optional[str] = None
    is_available: Optional[bool] = None


class CatalogItemResponse(SluggedResponseMixin, BaseSchema):
    """Response for a catalog item."""

    title: str
    desc: str
    category: str
    price: str
    stock: str
    link: str
    is_available: bool
