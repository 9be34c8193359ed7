"""Global test configuration and fixtures for the organizations administration API."""

import os

# Settings are read at import time, so the environment is prepared first
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-for-testing-only")
os.environ.setdefault("ENVIRONMENT", "TEST")
os.environ.setdefault("ADMIN_EMAIL", "")

from collections.abc import AsyncGenerator  # noqa: E402
from typing import Callable  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from asgi_lifespan import LifespanManager  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from jose import jwt  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from starterkit.api.core.dependencies import (  # noqa: E402
    get_current_user_authenticated,
    get_organizations_read_service,
    get_organizations_service,
    get_users_read_service,
    get_users_service,
)
from starterkit.core.context import AuthenticatedUserContext  # noqa: E402
from starterkit.database.models import Base, User, UserRole  # noqa: E402
from starterkit.modules.organization.read_service import (  # noqa: E402
    OrganizationsReadService,
)
from starterkit.modules.organization.service import OrganizationsService  # noqa: E402
from starterkit.modules.user.read_service import UsersReadService  # noqa: E402
from starterkit.modules.user.service import UsersService  # noqa: E402
from starterkit.utils.settings.auth import AuthSettings  # noqa: E402

from tests.factories import OrganizationFactory, UserFactory  # noqa: E402

BASE_URL = "http://test-starterkit-api"
ADMIN_ORGANIZATION_ID = UUID("0b1f4a52-7f6e-4c1e-9d7a-2d8e6a0c9f11")
USER_ORGANIZATION_ID = UUID("53ac29ab-ecc6-431e-bde0-64440cd3dc93")


@pytest.fixture
def organization_factory():
    return OrganizationFactory


@pytest.fixture
def user_factory():
    return UserFactory


# Database fixtures
@pytest_asyncio.fixture
async def async_engine():
    """Create an isolated in-memory database per test."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Provide a database session bound to the per-test database."""
    async_session_factory = async_sessionmaker(
        bind=async_engine, expire_on_commit=False
    )
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app():
    """Create FastAPI application with lifespan manager for testing."""
    from starterkit.main import app

    async with LifespanManager(app):
        yield app

    app.dependency_overrides.clear()


# Principals
@pytest.fixture
def admin_user() -> User:
    return UserFactory.build(
        email="admin@umbrella.com",
        display_name="admin",
        organization_id=ADMIN_ORGANIZATION_ID,
        role=UserRole.ADMIN,
    )


@pytest.fixture
def org_user() -> User:
    return UserFactory.build(
        email="user@umbrella.com",
        display_name="user",
        organization_id=USER_ORGANIZATION_ID,
        role=UserRole.ORG_USER,
    )


# Collaborators replaced by mocks through dependency overrides
@pytest.fixture
def organizations_service() -> AsyncMock:
    return AsyncMock(spec=OrganizationsService)


@pytest.fixture
def organizations_read_service() -> AsyncMock:
    return AsyncMock(spec=OrganizationsReadService)


@pytest.fixture
def users_service() -> AsyncMock:
    return AsyncMock(spec=UsersService)


@pytest.fixture
def users_read_service() -> AsyncMock:
    return AsyncMock(spec=UsersReadService)


@pytest.fixture
def mocked_services(
    app: FastAPI,
    organizations_service: AsyncMock,
    organizations_read_service: AsyncMock,
    users_service: AsyncMock,
    users_read_service: AsyncMock,
) -> FastAPI:
    """Route every service dependency to its mock."""
    app.dependency_overrides[get_organizations_service] = lambda: organizations_service
    app.dependency_overrides[get_organizations_read_service] = (
        lambda: organizations_read_service
    )
    app.dependency_overrides[get_users_service] = lambda: users_service
    app.dependency_overrides[get_users_read_service] = lambda: users_read_service
    return app


def _client_as(app: FastAPI, user: User) -> AsyncClient:
    context = AuthenticatedUserContext(user=user)
    app.dependency_overrides[get_current_user_authenticated] = lambda: context
    return AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL)


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client without any credentials."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url=BASE_URL
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_client(
    mocked_services: FastAPI, admin_user: User
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client authenticated as an ADMIN, with mocked services."""
    async with _client_as(mocked_services, admin_user) as ac:
        yield ac


@pytest_asyncio.fixture
async def org_user_client(
    mocked_services: FastAPI, org_user: User
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client authenticated as an ORG_USER, with mocked services."""
    async with _client_as(mocked_services, org_user) as ac:
        yield ac


# JWT Token Fixtures
@pytest.fixture()
def jwt_token_factory() -> Callable[..., str]:
    """Factory for creating tokens the way the identity provider signs them."""
    auth_settings = AuthSettings()

    def create_token(user_id: str, **claims) -> str:
        payload = {
            "sub": user_id,
            "aud": auth_settings.JWT_AUDIENCE,
            **claims,
        }
        return jwt.encode(
            payload, auth_settings.JWT_SECRET, algorithm=auth_settings.JWT_ALGORITHM
        )

    return create_token
