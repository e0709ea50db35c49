"""
Glossary term Pydantic schemas.
"""

from typing import Optional

from athenaeum.shared.schemas.common import BaseSchema, SeoFieldsMixin, SluggedResponseMixin


class GlossaryTermCreate(SeoFieldsMixin):
    """Request to create a glossary term."""

    term: str
    definition: str
    etymology: Optional[str] = None
    examples: Optional[str] = None
    related_terms: Optional[str] = None
    keywords: Optional[str] = None


class GlossaryTermUpdate(SeoFieldsMixin):
    """Partial glossary term update."""

    term: Optional[str] = None
    definition: Optional[str] = None
    etymology: Optional[str] = None
    examples: Optional[str] = None
    related_terms: Optional[str] = None
    keywords: Optional[str] = None


class GlossaryTermResponse(SluggedResponseMixin, BaseSchema):
    """Response for a glossary term."""

    term: str
    definition: str
    etymology: Optional[str] = None
    examples: Optional[str] = None
    related_terms: Optional[str] = None
    keywords: Optional[str] = None
