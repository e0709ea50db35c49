"""
Base Model Classes

The declarative base plus the mixins every content table is assembled from.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── TimestampMixin   ← Automatic created_at/updated_at
       ├── OwnedMixin       ← admin_id of the authoring admin (set once)
       └── SluggedMixin     ← slug (unique per table), SEO meta, publish flag, image

Usage:
======
    class Article(Base, OwnedMixin, SluggedMixin, TimestampMixin):
        __tablename__ = "articles"
        id: Mapped[int] = mapped_column(primary_key=True)
        title: Mapped[str] = mapped_column(String(255))

Namespaces:
===========
Each content type has its own table, so the unique index on ``slug`` makes
a slug unique within its content type only. "being" may exist both as a
glossary term and as an article.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, Text, false, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Subclasses may set ``__namespace__``, the content-type name used in
    logs and error messages (defaults to the table name).
    """

    @classmethod
    def namespace(cls) -> str:
        """Content-type namespace this model's slugs live in."""
        return getattr(cls, "__namespace__", None) or cls.__tablename__


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    - created_at: Set by the database on INSERT via server_default
    - updated_at: Set on INSERT, refreshed by SQLAlchemy on every UPDATE
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


class OwnedMixin:
    """
    Mixin for the authoring admin.

    The id comes from the external auth collaborator; there is no admins
    table in this schema, so it is a plain indexed integer.
    """

    admin_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )


class SluggedMixin:
    """
    Mixin for published content that has a slug and SEO metadata.

    meta_title/meta_description are stored at write time (derived when the
    caller gave none), never computed lazily on read.
    """

    # Unique index doubles as the race arbiter for concurrent creates
    slug: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    meta_title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    meta_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Unpublished records stay reachable by id and by admin paths
    is_published: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )

    # Opaque URL set by the upload collaborator
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
