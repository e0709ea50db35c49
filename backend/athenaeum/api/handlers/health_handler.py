"""
Probes for process supervisors.

    /live   process is up (no I/O)
    /health name and version of the running build
    /ready  the content database answers; 503 otherwise
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from athenaeum.api.dependencies.database import DbSession
from athenaeum.config.settings import settings
from athenaeum.shared.core.logging import get_logger
from athenaeum.shared.schemas.common import HealthResponse


log = get_logger("athenaeum.health")

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME.lower(),
        version=settings.APP_VERSION,
    )


@router.get("/ready")
async def readiness_check(db: DbSession):
    """Run ``SELECT 1`` on the request session."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        log.warning("Content database unavailable", error=str(exc))
        return JSONResponse(status_code=503, content={"status": "unavailable"})
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    return {"status": "alive"}
