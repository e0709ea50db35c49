"""
Article Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from athenaeum.shared.schemas.common import BaseSchema, SeoFieldsMixin, SluggedResponseMixin


class ArticleCreate(SeoFieldsMixin):
    """
    Request to create an article.

    ``content`` may carry HTML or Markdown; the derived meta description is
    taken from its plain text.
    """

    title: str = Field(description="Headline")
    content: str = Field(description="Body (HTML or Markdown)")
    author: str
    date: datetime = Field(description="Publication date shown to readers")
    keywords: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image_alt: Optional[str] = None
    canonical_url: Optional[str] = None
    is_featured: Optional[bool] = None


class ArticleUpdate(SeoFieldsMixin):
    """Partial article update."""

    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    date: Optional[datetime] = None
    keywords: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image_alt: Optional[str] = None
    canonical_url: Optional[str] = None
    is_featured: Optional[bool] = None
    view_count: Optional[int] = Field(None, ge=0)


class ArticleResponse(SluggedResponseMixin, BaseSchema):
    """Response for an article."""

    title: str
    content: str
    author: str
    date: datetime
    keywords: Optional[str] = None
    excerpt: Optional[str] = None
    featured_image_alt: Optional[str] = None
    canonical_url: Optional[str] = None
    is_featured: bool
    view_count: int
