"""Health and readiness probes (unversioned)."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from userhub.infrastructure.persistence.sqlalchemy import ping
from userhub.presentation.api.schemas import (
    ApiResponse,
    HealthStatus,
    ReadinessStatus,
    error_body,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model_exclude_none=True)
async def health_check() -> ApiResponse[HealthStatus]:
    """Liveness probe. Does not touch any dependency."""
    return ApiResponse[HealthStatus].ok(
        "Service is running",
        data=HealthStatus(status="healthy"),
    )


@router.get(
    "/ready",
    response_model_exclude_none=True,
    responses={503: {"description": "Database unreachable"}},
)
async def readiness_check(request: Request) -> ApiResponse[ReadinessStatus]:
    """Readiness probe.

    The database must answer; the cache is reported but never blocks
    readiness.
    """
    database_ok = await ping(request.app.state.engine)

    cache = request.app.state.cache
    if cache is None:
        cache_status = "disabled"
    else:
        cache_status = "up" if await cache.ping() else "down"

    readiness = ReadinessStatus(
        status="ready" if database_ok else "not ready",
        database="up" if database_ok else "down",
        cache=cache_status,
    )

    if not database_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=error_body("Service is not ready", readiness.model_dump()),
        )

    return ApiResponse[ReadinessStatus].ok("Service is ready", data=readiness)
