"""
Custom exceptions and error handling for FuelBhai.

Defines application-specific exceptions with error codes for consistent
error handling across the Lambda endpoint and the foreground bridge.

Usage:
    from core.errors import DeliveryError, ErrorCode

    raise DeliveryError("Unauthorized", code=ErrorCode.DELIVERY_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Validation errors
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Unsupported operations
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # Delivery errors
    DELIVERY_FAILED = "DELIVERY_FAILED"
    PROVIDER_NOT_CONFIGURED = "PROVIDER_NOT_CONFIGURED"

    # Host platform errors
    PERMISSION_DENIED = "PERMISSION_DENIED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.MISSING_FIELDS: "Missing required fields",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.METHOD_NOT_ALLOWED: "Method Not Allowed",
    ErrorCode.DELIVERY_FAILED: "Failed to send email",
    ErrorCode.PROVIDER_NOT_CONFIGURED: "Failed to send email",
    ErrorCode.PERMISSION_DENIED: "Trip tracking could not run in the background.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class FuelBhaiError(Exception):
    """Base exception for all FuelBhai errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(FuelBhaiError):
    """Request body is missing fields or cannot be parsed."""

    pass


class DeliveryError(FuelBhaiError):
    """Email provider rejected the send or could not be reached."""

    pass


class ConfigurationError(FuelBhaiError):
    """Required configuration (e.g. provider API key) is missing."""

    pass


class HostPermissionError(FuelBhaiError):
    """Host OS refused a foreground-service request."""

    pass
