"""
Database Dependency

FastAPI dependency for database sessions.

The session is committed when the handler returns normally and rolled back
when it raises, so a failed write leaves nothing behind.

Usage:
======
    from athenaeum.api.dependencies.database import DbSession

    @router.get("/articles/{article_id}")
    async def get_article(article_id: int, db: DbSession):
        return await ArticleRepository(db).get(article_id)

Tests swap the engine by overriding this dependency:

    app.dependency_overrides[get_db] = lambda: test_session
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.shared.db import get_db as _get_db


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield the request's database session.

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


# Type alias for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
