from datetime import datetime, timezone
from uuid import UUID, uuid4

from fastapi import status

from starterkit.api.core.exceptions.base import StarterKitException
from starterkit.api.core.messages import MessageCode
from starterkit.core.base import BaseService
from starterkit.database.models import Organization


class OrganizationsService(BaseService):
    """Registers organizations and applies changes to them.

    Every operation takes the id of the requesting user so the change can be
    attributed; role checks happen before these methods are called.
    """

    async def create_organization(
        self,
        requesting_user_id: UUID,
        name: str,
        street: str | None,
        city: str | None,
        state: str | None,
        country: str | None,
        postal_code: str | None,
        website_url: str | None,
        contact_name: str | None,
        phone_number: str | None,
        email_address: str | None,
        organization_id: UUID | None = None,
        commit: bool = True,
    ) -> UUID:
        """Register an organization; ``commit=False`` leaves the commit to the caller."""
        organization = Organization(
            id=organization_id or uuid4(),
            name=name,
            street=street,
            city=city,
            state=state,
            country=country,
            postal_code=postal_code,
            website_url=website_url,
            contact_name=contact_name,
            phone_number=phone_number,
            email_address=email_address,
            deregistered=False,
            registered_by_id=requesting_user_id,
        )
        self.db.add(organization)
        if commit:
            await self.db.commit()
        else:
            await self.db.flush()

        self.logger.info(
            "Organization registered",
            organization_id=str(organization.id),
            requesting_user_id=str(requesting_user_id),
        )
        return organization.id

    async def update_organization(
        self,
        requesting_user_id: UUID,
        organization_id: UUID,
        name: str,
        street: str | None,
        city: str | None,
        state: str | None,
        country: str | None,
        postal_code: str | None,
        website_url: str | None,
        contact_name: str | None,
        phone_number: str | None,
        email_address: str | None,
    ) -> None:
        organization = await self._get_organization(organization_id)
        if organization.deregistered:
            raise StarterKitException(
                MessageCode.ORGANIZATION_ALREADY_DEREGISTERED,
                status.HTTP_409_CONFLICT,
                {"organization_id": str(organization_id)},
            )

        organization.name = name
        organization.street = street
        organization.city = city
        organization.state = state
        organization.country = country
        organization.postal_code = postal_code
        organization.website_url = website_url
        organization.contact_name = contact_name
        organization.phone_number = phone_number
        organization.email_address = email_address
        organization.updated_at = datetime.now(timezone.utc)
        await self.db.commit()

        self.logger.info(
            "Organization updated",
            organization_id=str(organization_id),
            requesting_user_id=str(requesting_user_id),
        )

    async def deregister_organization(
        self, requesting_user_id: UUID, organization_id: UUID
    ) -> None:
        organization = await self._get_organization(organization_id)
        if organization.deregistered:
            raise StarterKitException(
                MessageCode.ORGANIZATION_ALREADY_DEREGISTERED,
                status.HTTP_409_CONFLICT,
                {"organization_id": str(organization_id)},
            )
        await self._set_deregistered(organization, True)

        self.logger.info(
            "Organization deregistered",
            organization_id=str(organization_id),
            requesting_user_id=str(requesting_user_id),
        )

    async def reregister_organization(
        self, requesting_user_id: UUID, organization_id: UUID
    ) -> None:
        organization = await self._get_organization(organization_id)
        if not organization.deregistered:
            raise StarterKitException(
                MessageCode.ORGANIZATION_NOT_DEREGISTERED,
                status.HTTP_409_CONFLICT,
                {"organization_id": str(organization_id)},
            )
        await self._set_deregistered(organization, False)

        self.logger.info(
            "Organization reregistered",
            organization_id=str(organization_id),
            requesting_user_id=str(requesting_user_id),
        )

    async def _get_organization(self, organization_id: UUID) -> Organization:
        organization = await self.db.get(Organization, organization_id)
        if not organization:
            raise StarterKitException(
                MessageCode.ORGANIZATION_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"organization_id": str(organization_id)},
            )
        return organization

    async def _set_deregistered(
        self, organization: Organization, deregistered: bool
    ) -> None:
        organization.deregistered = deregistered
        organization.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
