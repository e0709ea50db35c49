"""
Biography Entity Models

A biography entry profiles one philosopher; annexes hold the philosophical
analysis (metaphysics, epistemology, axiology) written about that entry.

Model Hierarchy:
================
    BiographyEntry
       └── annexes (BiographyAnnex[])  ← FK biography_id, ON DELETE RESTRICT

SAMPLE BIOGRAPHY_ENTRY RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 3                                                         │
│ philosofer       │ "Immanuel Kant"                                           │
│ geoorigin        │ "Prussia"                                                 │
│ detail_location  │ "Königsberg"                                              │
│ years            │ "1724 - 1804"                                             │
│ slug             │ "immanuel-kant"                                           │
│ meta_title       │ "Immanuel Kant"                                           │
└──────────────────────────────────────────────────────────────────────────────┘

A biography with annexes cannot be deleted; the database refuses and the
repository reports RelatedRecordsError.
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from athenaeum.shared.models.base import Base, OwnedMixin, SluggedMixin, TimestampMixin


class BiographyEntry(Base, OwnedMixin, SluggedMixin, TimestampMixin):
    """
    Biographical entry for one philosopher.

    Attributes:
        philosofer: Name of the philosopher (drives slug and meta title)
        geoorigin: Region of origin
        detail_location: More precise place (city, school)
        years: Free-text lifespan, e.g. "1724 - 1804"
    """

    __tablename__ = "biography_entries"
    __namespace__ = "biography"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    philosofer: Mapped[str] = mapped_column(String(255), nullable=False)
    geoorigin: Mapped[str] = mapped_column(String(255), nullable=False)
    detail_location: Mapped[str] = mapped_column(Text, nullable=False)
    years: Mapped[str] = mapped_column(String(100), nullable=False)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<BiographyEntry(id={self.id}, slug={self.slug})>"


class BiographyAnnex(Base, OwnedMixin, TimestampMixin):
    """
    Philosophical-analysis annex attached to a biography entry.

    Annexes have no title of their own, so they carry no slug or SEO meta;
    their natural key is the biography they belong to.
    """

    __tablename__ = "biography_annexes"
    __namespace__ = "biography_annex"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # RESTRICT: deleting the parent must fail while annexes exist
    biography_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("biography_entries.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    metafisika: Mapped[str] = mapped_column(Text, nullable=False)
    epsimologi: Mapped[str] = mapped_column(Text, nullable=False)
    aksiologi: Mapped[str] = mapped_column(Text, nullable=False)
    conclusion: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<BiographyAnnex(id={self.id}, biography_id={self.biography_id})>"
