"""
Athenaeum SQLAlchemy Models

One table per content type; each table is its own slug namespace.

Model Overview:
===============
- BiographyEntry:     philosopher profile          (namespace "biography")
- BiographyAnnex:     analysis of a biography      (no slug, FK → biography)
- Article:            long-form writing            (namespace "article")
- ResearchNote:       research summaries           (namespace "research")
- GlossaryTerm:       term + definition            (namespace "glossary")
- DialogueTranscript: collected dialogues          (namespace "dialogue")
- CatalogItem:        shop catalog                 (namespace "catalog")
"""

from athenaeum.shared.models.base import Base, TimestampMixin, OwnedMixin, SluggedMixin
from athenaeum.shared.models.biography import BiographyEntry, BiographyAnnex
from athenaeum.shared.models.article import Article
from athenaeum.shared.models.research_note import ResearchNote
from athenaeum.shared.models.glossary_term import GlossaryTerm
from athenaeum.shared.models.dialogue_transcript import DialogueTranscript
from athenaeum.shared.models.catalog_item import CatalogItem

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "OwnedMixin",
    "SluggedMixin",
    # Content models
    "BiographyEntry",
    "BiographyAnnex",
    "Article",
    "ResearchNote",
    "GlossaryTerm",
    "DialogueTranscript",
    "CatalogItem",
]
