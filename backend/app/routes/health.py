"""
Shelter Admin Backend — Health Check Route
============================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Runs SELECT 1 against the engine and reports uptime.
Who:   Called by container health checks and load balancers.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app import __version__
from app.database import engine
from app.routes import ok
from app.schemas.common import ApiResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=ApiResponse[HealthResponse],
    summary="Service health check",
    description="Reports database connectivity and uptime. Public.",
)
async def health_check():
    db_status = "connected"
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        db_status = "disconnected"
        logger.warning("Health check: database unreachable: %s", str(e))

    health = HealthResponse(
        status="healthy" if db_status == "connected" else "unhealthy",
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if db_status != "connected":
        return JSONResponse(
            status_code=503,
            content=ApiResponse(data=health.model_dump(by_alias=True), code=503).model_dump(),
        )
    return ok(health)
