"""Authentication context model for typed user authentication."""

from dataclasses import dataclass
from uuid import UUID

from starterkit.database.models.users import User


@dataclass
class AuthenticatedUserContext:
    """Context containing the authenticated user and their organization membership."""

    user: User

    def __post_init__(self):
        """Ensure all required fields are present and valid."""
        if not self.user:
            raise ValueError("User is required in authentication context")
        if not self.user.organization_id:
            raise ValueError("User must belong to an organization")

    @property
    def user_id(self) -> UUID:
        return self.user.id

    @property
    def organization_id(self) -> UUID:
        return self.user.organization_id

    @property
    def is_admin(self) -> bool:
        return self.user.is_admin

    def belongs_to(self, organization_id: UUID) -> bool:
        return self.organization_id == organization_id
