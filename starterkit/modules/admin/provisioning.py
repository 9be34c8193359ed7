"""Startup provisioning of the initial administrator."""

from uuid import UUID, uuid4

from starterkit.core.base import BaseService
from starterkit.database.models import UserRole
from starterkit.modules.organization.service import OrganizationsService
from starterkit.modules.user.read_service import UsersReadService
from starterkit.modules.user.service import UsersService
from starterkit.utils.settings.app import AppSettings


class AdminProvisioningService(BaseService):
    async def ensure_admin(self, settings: AppSettings) -> UUID | None:
        """Create the admin organization and user unless the admin already exists.

        Returns the admin user id, or None when provisioning is not configured.
        """
        password = settings.ADMIN_PASSWORD.get_secret_value()
        if not settings.ADMIN_EMAIL or not password:
            self.logger.info("Admin provisioning not configured, skipping")
            return None

        existing = await UsersReadService(self.db).get_by_email(settings.ADMIN_EMAIL)
        if existing:
            self.logger.debug(
                "Admin user already provisioned", user_id=str(existing.id)
            )
            return existing.id

        admin_id = uuid4()
        # Organization and user are committed together
        try:
            organization_id = await OrganizationsService(
                self.db
            ).create_organization(
                requesting_user_id=admin_id,
                name=settings.ADMIN_ORGANIZATION_NAME,
                street=None,
                city=None,
                state=None,
                country=None,
                postal_code=None,
                website_url=None,
                contact_name=settings.ADMIN_DISPLAY_NAME,
                phone_number=None,
                email_address=settings.ADMIN_EMAIL,
                commit=False,
            )
            await UsersService(self.db).create_user(
                requesting_user_id=admin_id,
                organization_id=organization_id,
                email=settings.ADMIN_EMAIL,
                display_name=settings.ADMIN_DISPLAY_NAME,
                raw_password=password,
                role=UserRole.ADMIN,
                user_id=admin_id,
                commit=False,
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        self.logger.info(
            "Admin user provisioned",
            user_id=str(admin_id),
            organization_id=str(organization_id),
        )
        return admin_id
