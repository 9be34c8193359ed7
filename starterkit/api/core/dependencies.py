from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from starterkit.api.core.exceptions.base import StarterKitException
from starterkit.api.core.messages import MessageCode
from starterkit.core.context import AuthenticatedUserContext
from starterkit.modules.health.service import HealthService
from starterkit.modules.organization.read_service import OrganizationsReadService
from starterkit.modules.organization.service import OrganizationsService
from starterkit.modules.user.auth_handlers import handle_jwt_auth
from starterkit.modules.user.read_service import UsersReadService
from starterkit.modules.user.service import UsersService

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def get_organizations_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> OrganizationsService:
    """Get organizations write service with database session."""
    return OrganizationsService(db)


async def get_organizations_read_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> OrganizationsReadService:
    """Get organizations read service with database session."""
    return OrganizationsReadService(db)


async def get_users_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> UsersService:
    """Get users write service with database session."""
    return UsersService(db)


async def get_users_read_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> UsersReadService:
    """Get users read service with database session."""
    return UsersReadService(db)


async def get_health_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> HealthService:
    return HealthService(db)


async def get_current_user_authenticated(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    users_read_service: Annotated[UsersReadService, Depends(get_users_read_service)],
) -> AuthenticatedUserContext:
    """Dependency resolving the bearer token into the authenticated user context."""
    if not credentials or credentials.scheme.lower() != "bearer":
        raise StarterKitException(
            MessageCode.AUTH_REQUIRED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Authorization header must be 'Bearer <token>'"},
            headers={"WWW-Authenticate": "Bearer"},
        )

    return await handle_jwt_auth(credentials.credentials, users_read_service)


OrganizationsServiceDep = Annotated[
    OrganizationsService, Depends(get_organizations_service)
]
OrganizationsReadServiceDep = Annotated[
    OrganizationsReadService, Depends(get_organizations_read_service)
]
UsersServiceDep = Annotated[UsersService, Depends(get_users_service)]
UsersReadServiceDep = Annotated[UsersReadService, Depends(get_users_read_service)]
HealthServiceDep = Annotated[HealthService, Depends(get_health_service)]

CurrentUserAuthDep = Annotated[
    AuthenticatedUserContext, Depends(get_current_user_authenticated)
]
