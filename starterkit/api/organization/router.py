"""Organization domain router."""

from uuid import UUID

from fastapi import APIRouter, status

from starterkit.api.core.decorators.auth import (
    require_admin,
    require_admin_or_member_of,
)
from starterkit.api.core.dependencies import (
    CurrentUserAuthDep,
    OrganizationsReadServiceDep,
    OrganizationsServiceDep,
    UsersReadServiceDep,
    UsersServiceDep,
)
from starterkit.api.core.messages import APIResponse, MessageCode
from starterkit.api.organization.handler import (
    create_organization_handler,
    create_organization_user_handler,
    list_organization_users_handler,
    to_organization_models,
    update_organization_handler,
)
from starterkit.api.organization.schemas import (
    NewOrganizationRequest,
    NewUserRequest,
    OrganizationActionResponse,
    OrganizationCreateResponse,
    OrganizationListResponse,
    OrganizationModel,
    OrganizationResponse,
    UpdateOrganizationRequest,
    UserCreateResponse,
    UserListResponse,
)

router = APIRouter(
    prefix="/organizations",
    tags=["organizations"],
)


@router.get("/", response_model=OrganizationListResponse)
@require_admin()
async def list_organizations(
    organizations_read_service: OrganizationsReadServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationListResponse:
    """List every registered organization (admin only)."""
    organizations = await organizations_read_service.get_organizations()
    return APIResponse.success(data=to_organization_models(organizations))


@router.post(
    "/",
    response_model=OrganizationCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
@require_admin()
async def create_organization(
    organization_data: NewOrganizationRequest,
    organizations_service: OrganizationsServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationCreateResponse:
    """Register a new organization (admin only)."""
    return await create_organization_handler(
        organizations_service, organization_data, current_user.user_id
    )


@router.get("/{organization_id}", response_model=OrganizationResponse)
@require_admin_or_member_of("organization_id")
async def get_organization(
    organization_id: UUID,
    organizations_read_service: OrganizationsReadServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationResponse:
    """Get an organization; non-admins may only read their own."""
    organization = await organizations_read_service.get_by_id(organization_id)
    return APIResponse.success(data=OrganizationModel.model_validate(organization))


@router.put("/{organization_id}", response_model=OrganizationActionResponse)
@require_admin()
async def update_organization(
    organization_id: UUID,
    organization_data: UpdateOrganizationRequest,
    organizations_service: OrganizationsServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationActionResponse:
    """Replace an organization's details (admin only)."""
    return await update_organization_handler(
        organizations_service, organization_id, organization_data, current_user.user_id
    )


@router.delete("/{organization_id}", response_model=OrganizationActionResponse)
@require_admin()
async def deregister_organization(
    organization_id: UUID,
    organizations_service: OrganizationsServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationActionResponse:
    """Deregister an organization; the record is kept (admin only)."""
    await organizations_service.deregister_organization(
        current_user.user_id, organization_id
    )
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_DEREGISTERED, data=organization_id
    )


@router.post("/{organization_id}", response_model=OrganizationActionResponse)
@require_admin()
async def reregister_organization(
    organization_id: UUID,
    organizations_service: OrganizationsServiceDep,
    current_user: CurrentUserAuthDep,
) -> OrganizationActionResponse:
    """Reregister a previously deregistered organization (admin only)."""
    await organizations_service.reregister_organization(
        current_user.user_id, organization_id
    )
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_REREGISTERED, data=organization_id
    )


@router.get("/{organization_id}/users", response_model=UserListResponse)
@require_admin_or_member_of("organization_id")
async def list_organization_users(
    organization_id: UUID,
    users_read_service: UsersReadServiceDep,
    current_user: CurrentUserAuthDep,
) -> UserListResponse:
    """List the users of an organization."""
    return await list_organization_users_handler(users_read_service, organization_id)


@router.post(
    "/{organization_id}/users",
    response_model=UserCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
@require_admin()
async def create_organization_user(
    organization_id: UUID,
    user_data: NewUserRequest,
    users_service: UsersServiceDep,
    current_user: CurrentUserAuthDep,
) -> UserCreateResponse:
    """Create a user inside an organization (admin only)."""
    return await create_organization_user_handler(
        users_service, organization_id, user_data, current_user.user_id
    )
