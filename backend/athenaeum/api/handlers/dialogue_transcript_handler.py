"""
Dialogue Transcript Handler
"""

from fastapi import Depends

from athenaeum.api.dependencies.services import get_dialogue_transcript_service
from athenaeum.api.handlers.content_handler import build_content_router
from athenaeum.shared.schemas.dialogue_transcript import (
    DialogueTranscriptCreate,
    DialogueTranscriptResponse,
    DialogueTranscriptUpdate,
)
from athenaeum.shared.services.dialogue_transcript_service import DialogueTranscriptService


router = build_content_router(
    get_service=get_dialogue_transcript_service,
    create_schema=DialogueTranscriptCreate,
    update_schema=DialogueTranscriptUpdate,
    response_schema=DialogueTranscriptResponse,
)


@router.get("/judul/{judul}", response_model=DialogueTranscriptResponse)
async def get_by_judul(
    judul: str,
    service: DialogueTranscriptService = Depends(get_dialogue_transcript_service),
):
    return await service.get_by_judul(judul)
