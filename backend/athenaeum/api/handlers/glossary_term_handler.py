"""
Glossary Term Handler
"""

from fastapi import Depends

from athenaeum.api.dependencies.services import get_glossary_term_service
from athenaeum.api.handlers.content_handler import build_content_router
from athenaeum.shared.schemas.glossary_term import (
    GlossaryTermCreate,
    GlossaryTermResponse,
    GlossaryTermUpdate,
)
from athenaeum.shared.services.glossary_term_service import GlossaryTermService


router = build_content_router(
    get_service=get_glossary_term_service,
    create_schema=GlossaryTermCreate,
    update_schema=GlossaryTermUpdate,
    response_schema=GlossaryTermResponse,
)


@router.get("/term/{term}", response_model=GlossaryTermResponse)
async def get_by_term(
    term: str,
    service: GlossaryTermService = Depends(get_glossary_term_service),
):
    """Fetch a glossary entry by the exact term."""
    return await service.get_by_term(term)


@router.get("/definition/{definition}", response_model=GlossaryTermResponse)
async def get_by_definition(
    definition: str,
    service: GlossaryTermService = Depends(get_glossary_term_service),
):
    """Fetch a glossary entry by its exact definition text."""
    return await service.get_by_definition(definition)
