"""Health check endpoints for monitoring application status."""

import time

from fastapi import APIRouter, Depends, status

from shortlink.api import schemas
from shortlink.api.dependencies import get_link_repository, get_settings
from shortlink.core.config import Settings
from shortlink.repositories.base import RepositoryError
from shortlink.repositories.link_repository import LinkRepository

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=schemas.HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Get system health status",
    response_description="Health status of all system components"
)
async def health_check(
    settings: Settings = Depends(get_settings),
    link_repo: LinkRepository = Depends(get_link_repository),
):
    """Check that the record store can be read."""
    health_status = {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
        "timestamp": time.time(),
        "components": {}
    }

    start_time = time.time()
    try:
        store = await link_repo.load()
        health_status["components"]["store"] = {
            "status": "healthy",
            "links": len(store),
            "latency_ms": round((time.time() - start_time) * 1000, 2),
        }
    except RepositoryError as e:
        health_status["status"] = "degraded"
        health_status["components"]["store"] = {
            "status": "unhealthy",
            "error": str(e)
        }

    return health_status


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    response_description="Application liveness status"
)
async def liveness_probe():
    """Simple check that application is running."""
    return {"alive": True}
