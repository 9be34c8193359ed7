"""Test factories for organizations administration models."""

from .base import AsyncSQLAlchemyModelFactory
from .users import UserFactory
from .organizations import OrganizationFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "UserFactory",
    "OrganizationFactory",
]
