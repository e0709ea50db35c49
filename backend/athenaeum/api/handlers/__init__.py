"""
API Handlers

Route handlers for the Athenaeum API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer.
"""

from athenaeum.api.handlers import (
    article_handler,
    biography_handler,
    catalog_item_handler,
    dialogue_transcript_handler,
    glossary_term_handler,
    health_handler,
    research_note_handler,
)

__all__ = [
    "article_handler",
    "biography_handler",
    "catalog_item_handler",
    "dialogue_transcript_handler",
    "glossary_term_handler",
    "health_handler",
    "research_note_handler",
]
