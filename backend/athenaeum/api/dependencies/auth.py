"""
Authentication Dependencies

Seam to the external auth collaborator: a bearer JWT signed with
SECRET_KEY whose ``admin_id`` claim identifies the acting admin.

The core trusts the id it is given. Any admin may write any record; there
is no ownership check.

Usage:
======
    from athenaeum.api.dependencies.auth import CurrentAdmin

    @router.post("")
    async def create(payload: ArticleCreate, admin_id: CurrentAdmin):
        ...
"""

from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from athenaeum.config.settings import settings
from athenaeum.shared.core.exceptions import AuthenticationError
from athenaeum.shared.core.logging import log_context
from athenaeum.shared.utils.security import SecurityUtils


# auto_error=False so a missing header becomes our 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> int:
    """
    Resolve the acting admin's id from the Authorization header.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    try:
        admin_id = SecurityUtils.admin_id_from_token(
            credentials.credentials,
            settings.SECRET_KEY,
            settings.JWT_ALGORITHM,
        )
    except ValueError as e:
        raise AuthenticationError(str(e)) from e

    log_context(admin_id=admin_id)
    return admin_id


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentAdmin = Annotated[int, Depends(get_current_admin)]
