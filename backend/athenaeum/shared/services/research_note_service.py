"""
Research Note Service
"""

from athenaeum.shared.models.research_note import ResearchNote
from athenaeum.shared.repositories.research_note_repository import ResearchNoteRepository
from athenaeum.shared.services.content_service import ContentService


class ResearchNoteService(ContentService[ResearchNote]):
    """Service for research notes; an image is required."""

    repository_class = ResearchNoteRepository
    resource = "ResearchNote"
    required_fields = ("research_title", "research_sum", "researcher", "research_date")
    requires_image = True

    async def get_by_research_title(self, research_title: str) -> ResearchNote:
        return await self._get_by_field("research_title", research_title)
