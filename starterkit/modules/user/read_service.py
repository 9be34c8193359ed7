from uuid import UUID

from fastapi import status
from sqlalchemy import func, select

from starterkit.api.core.exceptions.base import StarterKitException
from starterkit.api.core.messages import MessageCode
from starterkit.core.base import BaseService
from starterkit.database.models import User


class UsersReadService(BaseService):
    """Queries over users and their organization membership."""

    async def get_users_for_organization(self, organization_id: UUID) -> list[User]:
        stmt = (
            select(User)
            .where(User.organization_id == organization_id)
            .order_by(User.created_at, User.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, user_id: UUID) -> User:
        user = await self.db.get(User, user_id)
        if not user:
            raise StarterKitException(
                MessageCode.USER_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"user_id": str(user_id)},
            )
        return user

    async def get_by_email(self, email: str) -> User | None:
        # Emails are compared case-insensitively
        stmt = select(User).where(func.lower(User.email) == email.lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
