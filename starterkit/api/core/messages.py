"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"

    # Authentication & Authorization
    AUTH_REQUIRED = "AUTH_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    FORBIDDEN = "FORBIDDEN"
    AUTH_ADMIN_REQUIRED = "AUTH_ADMIN_REQUIRED"
    AUTH_ORGANIZATION_MISMATCH = "AUTH_ORGANIZATION_MISMATCH"
    AUTH_MISSING_CONTEXT = "AUTH_MISSING_CONTEXT"
    USER_DISABLED = "USER_DISABLED"

    # User management
    USER_CREATED = "USER_CREATED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"

    # Organization management
    ORGANIZATION_CREATED = "ORGANIZATION_CREATED"
    ORGANIZATION_UPDATED = "ORGANIZATION_UPDATED"
    ORGANIZATION_DEREGISTERED = "ORGANIZATION_DEREGISTERED"
    ORGANIZATION_REREGISTERED = "ORGANIZATION_REREGISTERED"
    ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"
    ORGANIZATION_ALREADY_DEREGISTERED = "ORGANIZATION_ALREADY_DEREGISTERED"
    ORGANIZATION_NOT_DEREGISTERED = "ORGANIZATION_NOT_DEREGISTERED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # Routing errors
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFLICT = "CONFLICT"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    # Authentication & Authorization
    MessageCode.AUTH_REQUIRED: "Authentication required",
    MessageCode.INVALID_TOKEN: "Invalid authentication token",
    MessageCode.FORBIDDEN: "Access denied",
    MessageCode.AUTH_ADMIN_REQUIRED: "Administrator role required",
    MessageCode.AUTH_ORGANIZATION_MISMATCH: "Access restricted to your own organization",
    MessageCode.AUTH_MISSING_CONTEXT: "Authentication context required",
    MessageCode.USER_DISABLED: "User account is disabled",
    # User management
    MessageCode.USER_CREATED: "User created successfully",
    MessageCode.USER_NOT_FOUND: "User not found",
    MessageCode.USER_ALREADY_EXISTS: "A user with this email already exists",
    # Organization management
    MessageCode.ORGANIZATION_CREATED: "Organization created successfully",
    MessageCode.ORGANIZATION_UPDATED: "Organization updated successfully",
    MessageCode.ORGANIZATION_DEREGISTERED: "Organization deregistered successfully",
    MessageCode.ORGANIZATION_REREGISTERED: "Organization reregistered successfully",
    MessageCode.ORGANIZATION_NOT_FOUND: "Organization not found",
    MessageCode.ORGANIZATION_ALREADY_DEREGISTERED: "Organization is deregistered",
    MessageCode.ORGANIZATION_NOT_DEREGISTERED: "Organization is not deregistered",
    # Validation errors
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    MessageCode.PAYLOAD_TOO_LARGE: "Request payload too large",
    # Routing errors
    MessageCode.METHOD_NOT_ALLOWED: "Method not allowed",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.CONFLICT: "Request conflicts with current state",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.NOT_FOUND: "Resource not found",
}

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Base API response model with consistent structure and proper typing."""

    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
