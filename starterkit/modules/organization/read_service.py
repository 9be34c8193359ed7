from uuid import UUID

from fastapi import status
from sqlalchemy import select

from starterkit.api.core.exceptions.base import StarterKitException
from starterkit.api.core.messages import MessageCode
from starterkit.core.base import BaseService
from starterkit.database.models import Organization


class OrganizationsReadService(BaseService):
    """Queries over registered organizations."""

    async def get_organizations(self) -> list[Organization]:
        stmt = select(Organization).order_by(Organization.created_at, Organization.id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, organization_id: UUID) -> Organization:
        organization = await self.db.get(Organization, organization_id)
        if not organization:
            raise StarterKitException(
                MessageCode.ORGANIZATION_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"organization_id": str(organization_id)},
            )
        return organization

    async def exists(self, organization_id: UUID) -> bool:
        stmt = select(Organization.id).where(Organization.id == organization_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none() is not None
