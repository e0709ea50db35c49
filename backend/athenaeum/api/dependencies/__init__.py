"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_admin(), CurrentAdmin
- Pagination: get_pagination(), Pagination
- Services: get_*_service() functions

Usage:
======
    from athenaeum.api.dependencies import CurrentAdmin, Pagination

    @router.get("")
    async def list_items(pagination: Pagination):
        ...
"""

from athenaeum.api.dependencies.database import (
    get_db,
    DbSession,
)
from athenaeum.api.dependencies.auth import (
    get_current_admin,
    CurrentAdmin,
)
from athenaeum.api.dependencies.pagination import (
    get_pagination,
    Pagination,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_current_admin",
    "CurrentAdmin",
    # Pagination
    "get_pagination",
    "Pagination",
]
