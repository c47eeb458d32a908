"""
CareBook Backend — Health Check Route
=======================================

What:  Health check endpoint for monitoring and container liveness checks.
How:   There are no external dependencies to check; the check reports the
       version, uptime and how many records each store currently holds.
"""

import time

from fastapi import APIRouter, Depends

from carebook import __version__
from carebook.registry import Registry, get_registry
from carebook.schemas.common import HealthResponse, RecordCounts

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the service status, version, uptime and store sizes.",
)
async def health_check(registry: Registry = Depends(get_registry)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        records=RecordCounts(
            patients=len(registry.patients.store),
            providers=len(registry.providers.store),
            appointments=len(registry.appointments.store),
        ),
    )
