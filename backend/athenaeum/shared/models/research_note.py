"""
ResearchNote Entity Model

Summary of a piece of research, with the researcher and date.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from athenaeum.shared.models.base import Base, OwnedMixin, SluggedMixin, TimestampMixin


class ResearchNote(Base, OwnedMixin, SluggedMixin, TimestampMixin):
    """
    Research note model.

    Attributes:
        research_title: Title of the research (drives slug and meta title)
        research_sum: Summary text (drives meta description)
        researcher: Who carried out the research
        research_date: When it was carried out
    """

    __tablename__ = "research_notes"
    __namespace__ = "research"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    research_title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    research_sum: Mapped[str] = mapped_column(Text, nullable=False)
    researcher: Mapped[str] = mapped_column(String(255), nullable=False)
    research_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    keywords: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<ResearchNote(id={self.id}, slug={self.slug})>"
