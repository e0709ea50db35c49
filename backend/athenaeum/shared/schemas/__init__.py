"""
Pydantic Schemas

Request/response models for every content type plus the shared listing
contract.

Naming:
=======
    <Type>Create    → POST payload (unknown keys rejected)
    <Type>Update    → PATCH payload; read with model_dump(exclude_unset=True)
    <Type>Response  → built from ORM rows (from_attributes)
"""

from athenaeum.shared.schemas.common import (
    BaseSchema,
    WriteSchema,
    PaginationParams,
    PaginationMeta,
    PaginatedResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from athenaeum.shared.schemas.biography import (
    BiographyEntryCreate,
    BiographyEntryUpdate,
    BiographyEntryResponse,
    BiographyAnnexCreate,
    BiographyAnnexUpdate,
    BiographyAnnexResponse,
)
from athenaeum.shared.schemas.article import ArticleCreate, ArticleUpdate, ArticleResponse
from athenaeum.shared.schemas.research_note import (
    ResearchNoteCreate,
    ResearchNoteUpdate,
    ResearchNoteResponse,
)
from athenaeum.shared.schemas.glossary_term import (
    GlossaryTermCreate,
    GlossaryTermUpdate,
    GlossaryTermResponse,
)
from athenaeum.shared.schemas.dialogue_transcript import (
    DialogueTranscriptCreate,
    DialogueTranscriptUpdate,
    DialogueTranscriptResponse,
)
from athenaeum.shared.schemas.catalog_item import (
    CatalogItemCreate,
    CatalogItemUpdate,
    CatalogItemResponse,
)

__all__ = [
    # Common
    "BaseSchema",
    "WriteSchema",
    "PaginationParams",
    "PaginationMeta",
    "PaginatedResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # Biography
    "BiographyEntryCreate",
    "BiographyEntryUpdate",
    "BiographyEntryResponse",
    "BiographyAnnexCreate",
    "BiographyAnnexUpdate",
    "BiographyAnnexResponse",
    # Article
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    # Research
    "ResearchNoteCreate",
    "ResearchNoteUpdate",
    "ResearchNoteResponse",
    # Glossary
    "GlossaryTermCreate",
    "GlossaryTermUpdate",
    "GlossaryTermResponse",
    # Dialogue
    "DialogueTranscriptCreate",
    "DialogueTranscriptUpdate",
    "DialogueTranscriptResponse",
    # Catalog
    "CatalogItemCreate",
    "CatalogItemUpdate",
    "CatalogItemResponse",
]
