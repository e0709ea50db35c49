"""
Shared Module

Everything below the HTTP layer:

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Engine and session management
    ├── models/         ← SQLAlchemy models, one per content table
    ├── repositories/   ← Data access, slug resolution, SEO fallbacks
    ├── services/       ← Business rules per content type
    ├── schemas/        ← Pydantic request/response models
    ├── utils/          ← Slug, SEO and token helpers
    └── migrations/     ← Alembic environment and revisions

Usage:
======
    from athenaeum.shared.models import Article, GlossaryTerm
    from athenaeum.shared.repositories import ArticleRepository
    from athenaeum.shared.services import ArticleService
    from athenaeum.shared.schemas import ArticleCreate, PaginationParams
    from athenaeum.shared.core import get_logger, NotFoundError
"""
