"""Database models for the organizations administration API."""

from .base import Base
from .organizations import Organization, OrganizationAddress
from .users import User, UserRole

__all__ = [
    # Base
    "Base",
    # Enums
    "UserRole",
    # Value objects
    "OrganizationAddress",
    # Models
    "Organization",
    "User",
]
