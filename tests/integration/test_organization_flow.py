"""End-to-end organization administration flow through the real stack."""

from uuid import uuid4

import pytest
from fastapi import status
from httpx import AsyncClient

from starterkit.api.core.messages import MessageCode
from starterkit.database.connection import AsyncSessionLocal
from starterkit.modules.admin.provisioning import AdminProvisioningService
from starterkit.utils.settings.app import AppSettings
from tests.utils.assertions import assert_error_response, assert_success_response


async def provision_admin() -> str:
    settings = AppSettings(
        ADMIN_EMAIL=f"admin-{uuid4().hex}@umbrella.com",
        ADMIN_PASSWORD="admin-password",
    )
    async with AsyncSessionLocal() as session:
        admin_id = await AdminProvisioningService(session).ensure_admin(settings)
    return str(admin_id)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.asyncio
async def test_admin_manages_organization_and_members(
    public_client: AsyncClient, jwt_token_factory
):
    admin = bearer(jwt_token_factory(await provision_admin()))

    # Register
    response = await public_client.post(
        "/api/organizations/",
        json={"name": "Acme", "city": "Springfield", "postalCode": "99999"},
        headers=admin,
    )
    organization_id = assert_success_response(
        response, MessageCode.ORGANIZATION_CREATED, status.HTTP_201_CREATED
    )

    response = await public_client.get(
        f"/api/organizations/{organization_id}", headers=admin
    )
    assert_success_response(
        response,
        data_assertions={
            "name": "Acme",
            "address.city": "Springfield",
            "address.postalCode": "99999",
            "deregistered": False,
        },
    )

    response = await public_client.get("/api/organizations/", headers=admin)
    listed = assert_success_response(response)
    assert organization_id in [item["id"] for item in listed]

    # Update
    response = await public_client.put(
        f"/api/organizations/{organization_id}",
        json={"name": "Acme Corp", "city": "Shelbyville"},
        headers=admin,
    )
    assert_success_response(response, MessageCode.ORGANIZATION_UPDATED)

    response = await public_client.get(
        f"/api/organizations/{organization_id}", headers=admin
    )
    assert_success_response(
        response,
        data_assertions={
            "name": "Acme Corp",
            "address.city": "Shelbyville",
            "address.postalCode": None,
        },
    )

    # Members
    member_email = f"member-{uuid4().hex}@acme.com"
    response = await public_client.post(
        f"/api/organizations/{organization_id}/users",
        json={
            "email": member_email,
            "password": "member-password",
            "displayName": "Member",
        },
        headers=admin,
    )
    member_id = assert_success_response(
        response, MessageCode.USER_CREATED, status.HTTP_201_CREATED
    )

    response = await public_client.post(
        f"/api/organizations/{organization_id}/users",
        json={
            "email": member_email.upper(),
            "password": "another-password",
            "displayName": "Copy",
        },
        headers=admin,
    )
    assert_error_response(
        response, MessageCode.USER_ALREADY_EXISTS, status.HTTP_409_CONFLICT
    )

    response = await public_client.get(
        f"/api/organizations/{organization_id}/users", headers=admin
    )
    users = assert_success_response(response)
    assert users == [
        {
            "id": member_id,
            "organizationId": organization_id,
            "email": member_email,
            "displayName": "Member",
            "disabled": False,
        }
    ]

    # The member sees only their own organization
    member = bearer(jwt_token_factory(member_id))

    response = await public_client.get(
        f"/api/organizations/{organization_id}", headers=member
    )
    assert_success_response(response, data_assertions={"name": "Acme Corp"})

    response = await public_client.get(
        f"/api/organizations/{organization_id}/users", headers=member
    )
    assert [user["id"] for user in assert_success_response(response)] == [member_id]

    response = await public_client.get("/api/organizations/", headers=member)
    assert_error_response(
        response, MessageCode.AUTH_ADMIN_REQUIRED, status.HTTP_403_FORBIDDEN
    )

    response = await public_client.delete(
        f"/api/organizations/{organization_id}", headers=member
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.asyncio
async def test_deregistration_lifecycle(public_client: AsyncClient, jwt_token_factory):
    admin = bearer(jwt_token_factory(await provision_admin()))

    response = await public_client.post(
        "/api/organizations/", json={"name": "Short Lived"}, headers=admin
    )
    organization_id = assert_success_response(
        response, MessageCode.ORGANIZATION_CREATED, status.HTTP_201_CREATED
    )

    response = await public_client.delete(
        f"/api/organizations/{organization_id}", headers=admin
    )
    assert_success_response(response, MessageCode.ORGANIZATION_DEREGISTERED)

    response = await public_client.get(
        f"/api/organizations/{organization_id}", headers=admin
    )
    assert_success_response(response, data_assertions={"deregistered": True})

    response = await public_client.delete(
        f"/api/organizations/{organization_id}", headers=admin
    )
    assert_error_response(
        response,
        MessageCode.ORGANIZATION_ALREADY_DEREGISTERED,
        status.HTTP_409_CONFLICT,
    )

    response = await public_client.put(
        f"/api/organizations/{organization_id}",
        json={"name": "Renamed"},
        headers=admin,
    )
    assert response.status_code == status.HTTP_409_CONFLICT

    response = await public_client.post(
        f"/api/organizations/{organization_id}/users",
        json={
            "email": f"late-{uuid4().hex}@umbrella.com",
            "password": "password",
            "displayName": "Late",
        },
        headers=admin,
    )
    assert response.status_code == status.HTTP_409_CONFLICT

    response = await public_client.post(
        f"/api/organizations/{organization_id}", headers=admin
    )
    assert_success_response(response, MessageCode.ORGANIZATION_REREGISTERED)

    response = await public_client.post(
        f"/api/organizations/{organization_id}", headers=admin
    )
    assert_error_response(
        response, MessageCode.ORGANIZATION_NOT_DEREGISTERED, status.HTTP_409_CONFLICT
    )


@pytest.mark.asyncio
async def test_unknown_organization_is_not_found(
    public_client: AsyncClient, jwt_token_factory
):
    admin = bearer(jwt_token_factory(await provision_admin()))
    missing_id = uuid4()

    response = await public_client.get(
        f"/api/organizations/{missing_id}", headers=admin
    )
    assert_error_response(
        response, MessageCode.ORGANIZATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
    )

    response = await public_client.post(
        f"/api/organizations/{missing_id}/users",
        json={"email": "ghost@umbrella.com", "password": "p", "displayName": "G"},
        headers=admin,
    )
    assert_error_response(
        response, MessageCode.ORGANIZATION_NOT_FOUND, status.HTTP_404_NOT_FOUND
    )


@pytest.mark.asyncio
async def test_token_for_unknown_user_is_rejected(
    public_client: AsyncClient, jwt_token_factory
):
    response = await public_client.get(
        "/api/organizations/", headers=bearer(jwt_token_factory(str(uuid4())))
    )

    assert_error_response(
        response, MessageCode.INVALID_TOKEN, status.HTTP_401_UNAUTHORIZED
    )
