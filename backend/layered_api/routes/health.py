"""
Layered API — Health Check Route
=================================

What:  Health check endpoint for monitoring and container probes.
How:   Reports the backend chosen for each entity and, when a relational
       backend is active, whether the database answers SELECT 1.

Status levels:
    - healthy:   all active backends reachable
    - unhealthy: the relational store is unreachable
"""

import logging
import time

from fastapi import APIRouter, Request
from sqlalchemy import text

from layered_api import __version__
from layered_api.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(request: Request) -> HealthResponse:
    """
    Check the health of the service and its data-access backends.

    Database check:
        Executes SELECT 1 on the shared engine. Skipped ("not_used") when
        both entities run in memory.
    """
    container = request.app.state.container
    db_status = "not_used"
    overall = "healthy"

    if container.uses_relational:
        try:
            async with container.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            db_status = "connected"
        except Exception as e:
            db_status = "disconnected"
            overall = "unhealthy"
            logger.warning("Health check: database unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        backends={entity: kind.value for entity, kind in container.backends.items()},
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
