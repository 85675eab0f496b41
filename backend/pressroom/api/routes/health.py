"""Health Probes: process liveness and store readiness for the Pressroom API.

Invariants:
    - GET /api/v1/health/ never touches the store; 200 while the process serves
    - GET /api/v1/health/ready is 503 until init_db has run AND `SELECT 1` succeeds,
      so a replica takes no reads (and records no views) before its pool works
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import pressroom.infrastructure.database as database

SERVICE_NAME = "pressroom-api"
SERVICE_VERSION = "1.0.0"

router = APIRouter(prefix="/api/v1/health", tags=["health"])


async def _store_reachable() -> bool:
    manager = database.db_manager
    if manager is None:
        return False
    return await manager.health_check()


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness():
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness():
    if not await _store_reachable():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": {"database": "unreachable"}},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
