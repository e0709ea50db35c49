"""
Database Module

Database connectivity and session management.

    FastAPI route
        │  Depends(get_db)
        ▼
    AsyncSession (one per request, commit/rollback/close handled by get_db)
        │
        ▼
    Content repositories (articles, glossary_terms, ...)
        │
        ▼
    PostgreSQL (unique slug index per table, RESTRICT foreign keys)
"""

from athenaeum.shared.db.session import (
    get_db,
    init_db,
    close_db,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "engine",
]
