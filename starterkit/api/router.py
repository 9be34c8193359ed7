from fastapi import APIRouter

from starterkit.api.core.constants import API_PREFIX
from starterkit.api.health.router import router as health_router
from starterkit.api.organization.router import router as organization_router

# Administrative API router
admin_api_router = APIRouter(prefix=API_PREFIX)
admin_api_router.include_router(organization_router)

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(admin_api_router)
