from uuid import UUID

from starterkit.api.core.messages import APIResponse, MessageCode
from starterkit.api.organization.schemas import (
    NewUserRequest,
    OrganizationCreateResponse,
    OrganizationModel,
    OrganizationRequest,
    UserCreateResponse,
    UserModel,
    UserListResponse,
)
from starterkit.modules.organization.service import OrganizationsService
from starterkit.modules.user.read_service import UsersReadService
from starterkit.modules.user.service import UsersService


def organization_fields(organization_data: OrganizationRequest) -> dict:
    """Field set handed to the write service, exactly as received."""
    return {
        "name": organization_data.name,
        "street": organization_data.street,
        "city": organization_data.city,
        "state": organization_data.state,
        "country": organization_data.country,
        "postal_code": organization_data.postal_code,
        "website_url": organization_data.website_url,
        "contact_name": organization_data.contact_name,
        "phone_number": organization_data.phone_number,
        "email_address": organization_data.email_address,
    }


async def create_organization_handler(
    service: OrganizationsService,
    organization_data: OrganizationRequest,
    requesting_user_id: UUID,
) -> OrganizationCreateResponse:
    organization_id = await service.create_organization(
        requesting_user_id, **organization_fields(organization_data)
    )
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_CREATED,
        data=organization_id,
    )


async def update_organization_handler(
    service: OrganizationsService,
    organization_id: UUID,
    organization_data: OrganizationRequest,
    requesting_user_id: UUID,
) -> APIResponse:
    await service.update_organization(
        requesting_user_id, organization_id, **organization_fields(organization_data)
    )
    return APIResponse.success(
        message_code=MessageCode.ORGANIZATION_UPDATED,
        data=organization_id,
    )


async def list_organization_users_handler(
    service: UsersReadService, organization_id: UUID
) -> UserListResponse:
    users = await service.get_users_for_organization(organization_id)
    return APIResponse.success(
        message_code=MessageCode.SUCCESS,
        data=[UserModel.model_validate(user) for user in users],
    )


async def create_organization_user_handler(
    service: UsersService,
    organization_id: UUID,
    user_data: NewUserRequest,
    requesting_user_id: UUID,
) -> UserCreateResponse:
    user_id = await service.create_user(
        requesting_user_id,
        organization_id,
        user_data.email,
        user_data.display_name,
        user_data.password,
    )
    return APIResponse.success(message_code=MessageCode.USER_CREATED, data=user_id)


def to_organization_models(organizations) -> list[OrganizationModel]:
    return [
        OrganizationModel.model_validate(organization)
        for organization in organizations
    ]
