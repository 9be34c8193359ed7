"""Role-based authorization decorators for endpoints."""

from functools import wraps
from typing import Any

from fastapi import status

from starterkit.api.core.exceptions.base import StarterKitException
from starterkit.api.core.messages import MessageCode
from starterkit.core.context import AuthenticatedUserContext
from starterkit.utils.logger import get_logger

logger = get_logger(__name__)


def _extract_auth_context(*args: Any, **kwargs: Any) -> AuthenticatedUserContext:
    """Find the authenticated user context among endpoint args/kwargs."""
    for value in (*args, *kwargs.values()):
        if isinstance(value, AuthenticatedUserContext):
            return value

    raise StarterKitException(
        MessageCode.AUTH_MISSING_CONTEXT,
        status.HTTP_401_UNAUTHORIZED,
        {"description": "Authenticated user context not found"},
    )


def require_admin():
    """
    Decorator restricting an endpoint to users holding the ADMIN role.

    The decorated endpoint must declare a ``CurrentUserAuthDep`` parameter.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            current_user = _extract_auth_context(*args, **kwargs)

            if not current_user.is_admin:
                logger.warning(
                    "Admin access denied",
                    user_id=str(current_user.user_id),
                    endpoint=func.__name__,
                )
                raise StarterKitException(
                    MessageCode.AUTH_ADMIN_REQUIRED,
                    status.HTTP_403_FORBIDDEN,
                    {"description": "Admin access required"},
                )

            return await func(*args, **kwargs)

        return wrapper

    return decorator


def require_admin_or_member_of(organization_param: str = "organization_id"):
    """
    Decorator allowing admins, or users whose organization is the one addressed.

    Args:
        organization_param: Name of the endpoint parameter holding the
            organization id taken from the path.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            current_user = _extract_auth_context(*args, **kwargs)
            organization_id = kwargs.get(organization_param)

            if organization_id is None:
                raise ValueError(
                    f"Endpoint parameter '{organization_param}' not found"
                )

            if not current_user.is_admin and not current_user.belongs_to(
                organization_id
            ):
                logger.warning(
                    "Cross-organization access denied",
                    user_id=str(current_user.user_id),
                    user_organization_id=str(current_user.organization_id),
                    organization_id=str(organization_id),
                    endpoint=func.__name__,
                )
                raise StarterKitException(
                    MessageCode.AUTH_ORGANIZATION_MISMATCH,
                    status.HTTP_403_FORBIDDEN,
                    {"organization_id": str(organization_id)},
                )

            return await func(*args, **kwargs)

        return wrapper

    return decorator
