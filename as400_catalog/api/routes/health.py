"""Health check endpoint for API monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from loguru import logger
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from as400_catalog.api.dependencies import get_db
from as400_catalog.api.schemas.common import APIResponse
from as400_catalog.config.settings import settings
from as400_catalog.core.exceptions import DatabaseHealthCheckError

router = APIRouter(tags=["Health"])


class HealthStatus(BaseModel):
    """Health check response data."""

    status: str
    database: str
    host_configured: bool
    timestamp: datetime


@router.get("/health", response_model=APIResponse[HealthStatus])
async def health_check(db: AsyncSession = Depends(get_db)) -> APIResponse[HealthStatus]:
    """
    Health check endpoint.

    Verifies the API is running and the catalog database is accessible.
    The AS400 is not contacted; only its settings are checked.
    """
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Catalog health check failed: {e}")
        raise DatabaseHealthCheckError(str(e)) from e

    return APIResponse.ok(HealthStatus(
        status="healthy",
        database="connected",
        host_configured=bool(settings.AS400_HOST and settings.AS400_USER),
        timestamp=datetime.now(timezone.utc),
    ))
