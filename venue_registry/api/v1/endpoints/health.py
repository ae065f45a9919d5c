"""
Health check endpoints
"""

from typing import Any
import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from venue_registry.core.database import get_session, ping_db
from venue_registry.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/live")
async def liveness() -> Any:
    """
    Liveness probe
    """
    return {"status": "alive", "service": "venue-registry"}


@router.get("/ready")
async def readiness(
    db: AsyncSession = Depends(get_session)
) -> Any:
    """
    Readiness probe - checks the database
    """
    try:
        database_ok = await ping_db(db)
    except SQLAlchemyError as e:
        logger.warning(f"Readiness check failed: {e}")
        database_ok = False

    body = {
        "status": "ready" if database_ok else "not ready",
        "checks": {"database": database_ok},
        "version": settings.APP_VERSION
    }
    return JSONResponse(status_code=200 if database_ok else 503, content=body)
