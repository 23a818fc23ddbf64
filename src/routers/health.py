"""
Health check router with database connectivity verification.
"""
import logging

import asyncpg
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.dependencies import get_pool
from src.repositories.base import STORAGE_ERRORS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

SERVICE_NAME = "matrix-backend"


@router.get("/health")
async def health_check(pool: asyncpg.Pool = Depends(get_pool)):
    """Health check endpoint with database connectivity verification.

    Returns 200 if the service and database are healthy.
    Returns 503 if the database is unreachable.
    """
    try:
        await pool.fetchval("SELECT 1")
        return {"status": "healthy", "service": SERVICE_NAME, "database": "connected"}
    except STORAGE_ERRORS as e:
        logger.warning(f"Health check failed: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "unhealthy", "service": SERVICE_NAME, "database": str(e)}
        )


@router.get("/health/pool")
async def pool_status(pool: asyncpg.Pool = Depends(get_pool)):
    """Report the asyncpg pool size, idle connections and configured bounds."""
    return {
        "size": pool.get_size(),
        "free_size": pool.get_idle_size(),
        "min_size": pool.get_min_size(),
        "max_size": pool.get_max_size(),
    }
