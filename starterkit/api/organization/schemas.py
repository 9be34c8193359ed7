"""Organization API schemas (combined models/requests)."""

from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from starterkit.api.core.messages import APIResponse


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class CamelModel(BaseModel):
    """Base schema using camelCase on the wire while accepting snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OrganizationAddressModel(CamelModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None


class OrganizationModel(CamelModel):
    id: UUID
    name: str
    address: OrganizationAddressModel
    website_url: str | None = None
    contact_name: str | None = None
    phone_number: str | None = None
    email_address: str | None = None
    deregistered: bool = False


class UserModel(CamelModel):
    id: UUID
    organization_id: UUID
    email: str
    display_name: str
    disabled: bool = False


class OrganizationRequest(CamelModel):
    name: NonBlankStr
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    website_url: str | None = None
    contact_name: str | None = None
    phone_number: str | None = None
    email_address: str | None = None


class NewOrganizationRequest(OrganizationRequest):
    pass


class UpdateOrganizationRequest(OrganizationRequest):
    pass


class NewUserRequest(CamelModel):
    email: NonBlankStr
    password: NonBlankStr
    display_name: NonBlankStr


OrganizationListResponse = APIResponse[list[OrganizationModel]]
OrganizationResponse = APIResponse[OrganizationModel]
OrganizationCreateResponse = APIResponse[UUID]
OrganizationActionResponse = APIResponse[UUID]
UserListResponse = APIResponse[list[UserModel]]
UserCreateResponse = APIResponse[UUID]
