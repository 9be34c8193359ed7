"""Authentication handler for bearer tokens issued by the identity provider."""

from uuid import UUID

from fastapi import status
from jose import JWTError, jwt

from starterkit.api.core.exceptions.base import StarterKitException
from starterkit.api.core.messages import MessageCode
from starterkit.core.context import AuthenticatedUserContext
from starterkit.modules.user.read_service import UsersReadService
from starterkit.utils.logger import get_logger
from starterkit.utils.settings.auth import AuthSettings

logger = get_logger(__name__)


def decode_token(token: str, settings: AuthSettings | None = None) -> dict:
    settings = settings or AuthSettings()
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.warning(f"JWT decoding failed: {e}")
        raise StarterKitException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Invalid or expired authentication token"},
        )


async def handle_jwt_auth(
    token: str,
    users_read_service: UsersReadService,
    settings: AuthSettings | None = None,
) -> AuthenticatedUserContext:
    payload = decode_token(token, settings)

    try:
        user_id = UUID(str(payload.get("sub", "")))
    except ValueError:
        raise StarterKitException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token subject is not a user id"},
        )

    try:
        user = await users_read_service.get_by_id(user_id)
    except StarterKitException as e:
        if e.message_code != MessageCode.USER_NOT_FOUND:
            raise
        raise StarterKitException(
            MessageCode.INVALID_TOKEN,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Token subject is not a known user"},
        ) from e

    if user.disabled:
        raise StarterKitException(
            MessageCode.USER_DISABLED,
            status.HTTP_403_FORBIDDEN,
            {"user_id": str(user_id)},
        )

    return AuthenticatedUserContext(user=user)
