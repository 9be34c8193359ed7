from uuid import UUID, uuid4

from fastapi import status

from starterkit.api.core.exceptions.base import StarterKitException
from starterkit.api.core.messages import MessageCode
from starterkit.core.base import BaseService
from starterkit.database.models import Organization, User, UserRole
from starterkit.modules.user.read_service import UsersReadService
from starterkit.utils.hashing import PasswordHasher


class UsersService(BaseService):
    """Creates users inside organizations."""

    async def create_user(
        self,
        requesting_user_id: UUID,
        organization_id: UUID,
        email: str,
        display_name: str,
        raw_password: str,
        role: UserRole = UserRole.ORG_USER,
        user_id: UUID | None = None,
        commit: bool = True,
    ) -> UUID:
        organization = await self.db.get(Organization, organization_id)
        if not organization:
            raise StarterKitException(
                MessageCode.ORGANIZATION_NOT_FOUND,
                status.HTTP_404_NOT_FOUND,
                {"organization_id": str(organization_id)},
            )
        if organization.deregistered:
            raise StarterKitException(
                MessageCode.ORGANIZATION_ALREADY_DEREGISTERED,
                status.HTTP_409_CONFLICT,
                {"organization_id": str(organization_id)},
            )

        existing = await UsersReadService(self.db).get_by_email(email)
        if existing:
            raise StarterKitException(
                MessageCode.USER_ALREADY_EXISTS,
                status.HTTP_409_CONFLICT,
                {"email": email},
            )

        user = User(
            id=user_id or uuid4(),
            organization_id=organization_id,
            email=email,
            display_name=display_name,
            password_hash=PasswordHasher.hash_password(raw_password),
            role=role,
            disabled=False,
            created_by_id=requesting_user_id,
        )
        self.db.add(user)
        if commit:
            await self.db.commit()
        else:
            await self.db.flush()

        self.logger.info(
            "User created",
            user_id=str(user.id),
            organization_id=str(organization_id),
            requesting_user_id=str(requesting_user_id),
            role=role.value,
        )
        return user.id
