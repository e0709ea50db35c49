"""
DialogueTranscript Entity Model

A recorded dialogue (collected meditations) with its heading.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from athenaeum.shared.models.base import Base, OwnedMixin, SluggedMixin, TimestampMixin


class DialogueTranscript(Base, OwnedMixin, SluggedMixin, TimestampMixin):
    """
    Dialogue transcript model.

    Attributes:
        judul: Heading of the dialogue (drives slug and meta title)
        dialog: The transcript itself (drives meta description)
    """

    __tablename__ = "dialogue_transcripts"
    __namespace__ = "dialogue"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    judul: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    dialog: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<DialogueTranscript(id={self.id}, slug={self.slug})>"
