"""
Services

Business rules for each content type; handlers call these, never the
repositories directly.
"""

from athenaeum.shared.services.base import CrudService
from athenaeum.shared.services.content_service import ContentService
from athenaeum.shared.services.biography_service import (
    BiographyEntryService,
    BiographyAnnexService,
)
from athenaeum.shared.services.article_service import ArticleService
from athenaeum.shared.services.research_note_service import ResearchNoteService
from athenaeum.shared.services.glossary_term_service import GlossaryTermService
from athenaeum.shared.services.dialogue_transcript_service import DialogueTranscriptService
from athenaeum.shared.services.catalog_item_service import CatalogItemService

__all__ = [
    "CrudService",
    "ContentService",
    "BiographyEntryService",
    "BiographyAnnexService",
    "ArticleService",
    "ResearchNoteService",
    "GlossaryTermService",
    "DialogueTranscriptService",
    "CatalogItemService",
]
