"""
Biography Handlers

Routers for biography entries and their annexes.
"""

from fastapi import Depends

from athenaeum.api.dependencies.services import (
    get_biography_annex_service,
    get_biography_service,
)
from athenaeum.api.handlers.content_handler import build_content_router
from athenaeum.shared.schemas.biography import (
    BiographyAnnexCreate,
    BiographyAnnexResponse,
    BiographyAnnexUpdate,
    BiographyEntryCreate,
    BiographyEntryResponse,
    BiographyEntryUpdate,
)
from athenaeum.shared.services.biography_service import (
    BiographyAnnexService,
    BiographyEntryService,
)


router = build_content_router(
    get_service=get_biography_service,
    create_schema=BiographyEntryCreate,
    update_schema=BiographyEntryUpdate,
    response_schema=BiographyEntryResponse,
)


@router.get("/philosofer/{philosofer}", response_model=BiographyEntryResponse)
async def get_by_philosofer(
    philosofer: str,
    service: BiographyEntryService = Depends(get_biography_service),
):
    """Fetch a biography entry by the philosopher's exact name."""
    return await service.get_by_philosofer(philosofer)


annex_router = build_content_router(
    get_service=get_biography_annex_service,
    create_schema=BiographyAnnexCreate,
    update_schema=BiographyAnnexUpdate,
    response_schema=BiographyAnnexResponse,
    slugged=False,
)


@annex_router.get("/biography/{biography_id}", response_model=BiographyAnnexResponse)
async def get_by_biography_id(
    biography_id: int,
    service: BiographyAnnexService = Depends(get_biography_annex_service),
):
    """Fetch the annex written for a biography entry."""
    return await service.get_by_biography_id(biography_id)
