"""
Repositories

Data access layer. Repositories flush; the request's get_db() commits.

Contents:
=========
- BaseRepository:      CRUD + paginated listing + constraint classification
- ContentRepository:   slug uniqueness and SEO meta on top of BaseRepository
- <Type>Repository:    one per table, with its natural-key lookups
"""

from athenaeum.shared.repositories.base import (
    BaseRepository,
    Page,
    is_unique_violation,
    is_foreign_key_violation,
)
from athenaeum.shared.repositories.content import ContentRepository
from athenaeum.shared.repositories.biography_repository import (
    BiographyEntryRepository,
    BiographyAnnexRepository,
)
from athenaeum.shared.repositories.article_repository import ArticleRepository
from athenaeum.shared.repositories.research_note_repository import ResearchNoteRepository
from athenaeum.shared.repositories.glossary_term_repository import GlossaryTermRepository
from athenaeum.shared.repositories.dialogue_transcript_repository import (
    DialogueTranscriptRepository,
)
from athenaeum.shared.repositories.catalog_item_repository import CatalogItemRepository

__all__ = [
    "BaseRepository",
    "Page",
    "is_unique_violation",
    "is_foreign_key_violation",
    "ContentRepository",
    "BiographyEntryRepository",
    "BiographyAnnexRepository",
    "ArticleRepository",
    "ResearchNoteRepository",
    "GlossaryTermRepository",
    "DialogueTranscriptRepository",
    "CatalogItemRepository",
]
