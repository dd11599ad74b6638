"""
Health check routes.

Reports the database and the Redis broker that carries the mail topic. A down
broker only degrades the service: notifications are best-effort.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import text
import redis.asyncio as redis

from app.core.database import get_db
from app.core.config import settings
from app.core.logging import get_logger
from app.schemas.base import BaseSchema

router = APIRouter(tags=["health"])

logger = get_logger(__name__)

HEALTHY = "healthy"


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    checks: Dict[str, str]


async def _check_database(db: AsyncSession) -> str:
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("health_check_failed", component="database", exc_type=type(e).__name__)
        return f"unhealthy: {type(e).__name__}"
    return HEALTHY


async def _check_broker() -> str:
    client = redis.from_url(settings.redis_url, socket_connect_timeout=2)
    try:
        await client.ping()
    except Exception as e:
        logger.warning("health_check_failed", component="broker", exc_type=type(e).__name__)
        return f"unhealthy: {type(e).__name__}"
    finally:
        await client.aclose()
    return HEALTHY


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    """Always 200; ``status`` is "degraded" when any dependency is down."""
    checks = {
        "database": await _check_database(db),
        "broker": await _check_broker(),
    }

    return HealthResponse(
        status=HEALTHY if all(v == HEALTHY for v in checks.values()) else "degraded",
        version=settings.app_version,
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )
