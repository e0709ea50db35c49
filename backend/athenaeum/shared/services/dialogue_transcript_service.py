"""
Dialogue Transcript Service
"""

from athenaeum.shared.models.dialogue_transcript import DialogueTranscript
from athenaeum.shared.repositories.dialogue_transcript_repository import (
    DialogueTranscriptRepository,
)
from athenaeum.shared.services.content_service import ContentService


class DialogueTranscriptService(ContentService[DialogueTranscript]):
    """Service for dialogue transcripts."""

    repository_class = DialogueTranscriptRepository
    resource = "DialogueTranscript"
    required_fields = ("judul", "dialog")

    async def get_by_judul(self, judul: str) -> DialogueTranscript:
        return await self._get_by_field("judul", judul)
