"""
Article Entity Model

Long-form published writing.

SAMPLE ARTICLE RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 12                                                        │
│ title            │ "On Being and Time"                                       │
│ slug             │ "on-being-and-time"                                       │
│ author           │ "Ardian"                                                  │
│ meta_description │ "A reading of the first division of ..."                  │
│ is_published     │ true                                                      │
│ view_count       │ 340                                                       │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from athenaeum.shared.models.base import Base, OwnedMixin, SluggedMixin, TimestampMixin


class Article(Base, OwnedMixin, SluggedMixin, TimestampMixin):
    """
    Article model.

    Attributes:
        title: Headline (drives slug and meta title)
        content: Body, may contain HTML/Markdown (drives meta description)
        author: Byline
        date: Publication date shown to readers
    """

    __tablename__ = "articles"
    __namespace__ = "article"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # ═══════════════════════════════════════════════════════════════════════════
    # EDITORIAL EXTRAS
    # ═══════════════════════════════════════════════════════════════════════════

    keywords: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    excerpt: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    featured_image_alt: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    canonical_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Article(id={self.id}, slug={self.slug})>"
