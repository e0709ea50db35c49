"""
Research note Pydantic schemas.
"""

from datetime import datetime
from typing import Optional

from athenaeum.shared.schemas.common import BaseSchema, SeoFieldsMixin, SluggedResponseMixin


class ResearchNoteCreate(SeoFieldsMixin):
    """Request to create a research note."""

    research_title: str
    research_sum: str
    researcher: str
    research_date: datetime
    keywords: Optional[str] = None


class ResearchNoteUpdate(SeoFieldsMixin):
    """Partial research note update."""

    research_title: Optional[str] = None
    research_sum: Optional[str] = None
    researcher: Optional[str] = None
    research_date: Optional[datetime] = None
    keywords: Optional[str] = None


class ResearchNoteResponse(SluggedResponseMixin, BaseSchema):
    """Response for a research note."""

    research_title: str
    research_sum: str
    researcher: str
    research_date: datetime
    keywords: Optional[str] = None
