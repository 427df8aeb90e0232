from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
import logging
import time

from ..db import get_db

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check():
    """
    Health check endpoint for container orchestration.

    Returns basic health status of the gateway.
    """
    return {
        "status": "healthy",
        "service": "mt799-gateway",
        "timestamp": time.time()
    }


@router.get("/health/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """
    Readiness check - verifies the message database is reachable.
    """
    checks = {
        "database": "fail",
    }

    try:
        await db.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as e:
        logger.warning(f"Readiness check: database unavailable: {e}")

    status = "ready" if all(v == "ok" for v in checks.values()) else "not_ready"

    return {
        "status": status,
        "checks": checks
    }
