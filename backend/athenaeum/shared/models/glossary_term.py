"""
GlossaryTerm Entity Model

One philosophical term and its definition.

SAMPLE GLOSSARY_TERM RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 5                                                         │
│ term             │ "Being"                                                   │
│ slug             │ "being"                                                   │
│ definition       │ "That which is; the most general concept ..."             │
│ etymology        │ "Old English beon"                                        │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from athenaeum.shared.models.base import Base, OwnedMixin, SluggedMixin, TimestampMixin


class GlossaryTerm(Base, OwnedMixin, SluggedMixin, TimestampMixin):
    """Glossary term model."""

    __tablename__ = "glossary_terms"
    __namespace__ = "glossary"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    term: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    definition: Mapped[str] = mapped_column(Text, nullable=False)

    etymology: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    examples: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    related_terms: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    keywords: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<GlossaryTerm(id={self.id}, slug={self.slug})>"
