"""
Dialogue transcript Pydantic schemas.
"""

from typing import Optional

from athenaeum.shared.schemas.common import BaseSchema, SeoFieldsMixin, SluggedResponseMixin


class DialogueTranscriptCreate(SeoFieldsMixin):
    """Request to create a dialogue transcript."""

    judul: str
    dialog: str


class DialogueTranscriptUpdate(SeoFieldsMixin):
    """Partial dialogue transcript update."""

    judul: Optional[str] = None
    dialog: Optional[str] = None


class DialogueTranscriptResponse(SluggedResponseMixin, BaseSchema):
    """Response for a dialogue transcript."""

    judul: str
    dialog: str
