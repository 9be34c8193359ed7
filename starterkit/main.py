import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from starterkit.api.core.exceptions.base import register_exception_handlers
from starterkit.api.core.middleware.logging import logging_middleware
from starterkit.api.core.middleware.security import (
    PayloadSizeMiddleware,
    SecurityHeadersMiddleware,
)
from starterkit.api.router import api_router
from starterkit.database.connection import (
    AsyncSessionLocal,
    async_engine,
    create_schema,
)
from starterkit.modules.admin.provisioning import AdminProvisioningService
from starterkit.utils.logger import setup_logging
from starterkit.utils.settings.app import AppSettings


app_settings = AppSettings()
is_production = app_settings.is_production


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger = setup_logging(app_settings.is_production, app_settings.LOG_LEVEL)
    logger.info("Starting organizations administration API...")
    app_settings.validate_prod()

    app.state.session_factory = AsyncSessionLocal
    logger.info("Database session factory added to app state")

    if app_settings.AUTO_CREATE_SCHEMA:
        await create_schema(async_engine)

    async with AsyncSessionLocal() as session:
        await AdminProvisioningService(session).ensure_admin(app_settings)

    yield

    # Shutdown
    logger.info("Shutting down organizations administration API...")


app = FastAPI(
    title="Organizations Administration API",
    description="Multi-tenant administration of organizations and their users",
    version=app_settings.API_VERSION,
    lifespan=lifespan,
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
    openapi_url=None if is_production else "/openapi.json",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware, is_production=is_production)
app.add_middleware(
    PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE
)
app.middleware("http")(logging_middleware)

app.include_router(api_router)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "starterkit.main:app", host="0.0.0.0", port=8080, reload=True, access_log=False
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "starterkit.main:app", host="0.0.0.0", port=8080, reload=False, access_log=False
    )
