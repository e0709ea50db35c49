"""
Research Note Handler
"""

from fastapi import Depends

from athenaeum.api.dependencies.services import get_research_note_service
from athenaeum.api.handlers.content_handler import build_content_router
from athenaeum.shared.schemas.research_note import (
    ResearchNoteCreate,
    ResearchNoteResponse,
    ResearchNoteUpdate,
)
from athenaeum.shared.services.research_note_service import ResearchNoteService


router = build_content_router(
    get_service=get_research_note_service,
    create_schema=ResearchNoteCreate,
    update_schema=ResearchNoteUpdate,
    response_schema=ResearchNoteResponse,
)


@router.get("/title/{research_title}", response_model=ResearchNoteResponse)
async def get_by_research_title(
    research_title: str,
    service: ResearchNoteService = Depends(get_research_note_service),
):
    return await service.get_by_research_title(research_title)
