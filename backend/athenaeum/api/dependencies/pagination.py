"""
Pagination dependency.

Query names follow the public API (``sortBy``, ``sortOrder``); values are
normalized by PaginationParams rather than rejected.
"""

from typing import Annotated, Optional

from fastapi import Depends, Query

from athenaeum.shared.schemas.common import PaginationParams


async def get_pagination(
    page: Optional[int] = Query(None, description="Page number (1-indexed)"),
    limit: Optional[int] = Query(None, description="Items per page (clamped to 1..100)"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="Column to order by"),
    sort_order: Optional[str] = Query(None, alias="sortOrder", description="asc or desc"),
) -> PaginationParams:
    """Pagination parameters dependency."""
    return PaginationParams(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)


Pagination = Annotated[PaginationParams, Depends(get_pagination)]
