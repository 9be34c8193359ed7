"""Health check endpoints for monitoring."""

from fastapi import APIRouter

from starterkit.api.core.dependencies import HealthServiceDep
from starterkit.modules.health.service import OverallHealthStatus
from starterkit.utils.settings.app import AppSettings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=OverallHealthStatus)
async def health_check(health_service: HealthServiceDep) -> OverallHealthStatus:
    """Report service and database health."""
    return await health_service.check(AppSettings().API_VERSION)


@router.get("/liveness")
async def liveness() -> dict:
    return {"status": "alive"}
