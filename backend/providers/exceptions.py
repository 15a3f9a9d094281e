"""
Identity provider exceptions.

Both are treated as client-correctable by the API layer: the user can
simply start the login again.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class ExchangeFailedError(ExternalServiceError):
    """Raised when the authorization code cannot be exchanged for a token."""

    def __init__(self, provider: str, reason: Optional[str] = None):
        super().__init__(
            "Token exchange failed",
            service=provider,
            code="EXCHANGE_FAILED",
            details={"reason": reason} if reason else None,
        )


class ProfileFetchFailedError(ExternalServiceError):
    """Raised when the provider profile cannot be fetched or parsed."""

    def __init__(self, provider: str, reason: Optional[str] = None):
        super().__init__(
            "Failed to fetch provider user",
            service=provider,
            code="PROFILE_FETCH_FAILED",
            details={"reason": reason} if reason else None,
        )
