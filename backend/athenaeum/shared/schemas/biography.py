"""
Biography-related Pydantic schemas.
"""

from typing import Optional

from pydantic import Field

from athenaeum.shared.schemas.common import (
    BaseSchema,
    SeoFieldsMixin,
    SluggedResponseMixin,
    TimestampMixin,
    WriteSchema,
)


class BiographyEntryCreate(SeoFieldsMixin):
    """Request to create a biography entry."""

    philosofer: str = Field(description="Philosopher's name; drives slug and meta title")
    geoorigin: str = Field(description="Region of origin")
    detail_location: str = Field(description="More precise place")
    years: str = Field(description="Lifespan, e.g. '1724 - 1804'")


class BiographyEntryUpdate(SeoFieldsMixin):
    """Partial update; only fields present in the payload are touched."""

    philosofer: Optional[str] = None
    geoorigin: Optional[str] = None
    detail_location: Optional[str] = None
    years: Optional[str] = None


class BiographyEntryResponse(SluggedResponseMixin, BaseSchema):
    """Response for a biography entry."""

    philosofer: str
    geoorigin: str
    detail_location: str
    years: str


class BiographyAnnexCreate(WriteSchema):
    """Request to attach an analysis annex to a biography."""

    biography_id: int = Field(description="Biography entry this annex belongs to")
    metafisika: str
    epsimologi: str
    aksiologi: str
    conclusion: str


class BiographyAnnexUpdate(WriteSchema):
    """Partial annex update."""

    biography_id: Optional[int] = None
    metafisika: Optional[str] = None
    epsimologi: Optional[str] = None
    aksiologi: Optional[str] = None
    conclusion: Optional[str] = None


class BiographyAnnexResponse(TimestampMixin, BaseSchema):
    """Response for a biography annex."""

    id: int
    admin_id: int
    biography_id: int
    metafisika: str
    epsimologi: str
    aksiologi: str
    conclusion: str
