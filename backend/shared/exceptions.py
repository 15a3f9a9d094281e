"""
Base exception classes for the Guidepost backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status in one place.
"""

from typing import Optional, Any


class GuidepostError(Exception):
    """
    Base exception for all Guidepost errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(GuidepostError):
    """Resource not found (or not visible to the caller)."""

    pass


class ValidationError(GuidepostError):
    """Input validation failed."""

    pass


class InvalidInputError(ValidationError):
    """A required field is missing or malformed."""

    def __init__(self, message: str = "Invalid input", field: Optional[str] = None):
        details = {"field": field} if field else None
        super().__init__(message, code="INVALID_INPUT", details=details)


class AuthenticationError(GuidepostError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class NotAuthenticatedError(AuthenticationError):
    """Raised when an operation requires a signed-in, active user."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class AuthorizationError(GuidepostError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(GuidepostError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class ConfigurationError(GuidepostError):
    """A required dependency or setting is not configured."""

    def __init__(self, message: str, setting: Optional[str] = None):
        details = {"setting": setting} if setting else None
        super().__init__(message, code="NOT_CONFIGURED", details=details)


class DatabaseError(GuidepostError):
    """Unexpected failure in the storage backend."""

    def __init__(self, message: str, operation: Optional[str] = None):
        details = {"operation": operation} if operation else None
        super().__init__(message, code="DATABASE_ERROR", details=details)
