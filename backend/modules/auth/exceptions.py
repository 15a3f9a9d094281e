"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import ValidationError

from providers.exceptions import ExchangeFailedError, ProfileFetchFailedError


class MissingEmailScopeError(ValidationError):
    """Raised when the provider profile carries no email address.

    Distinct from a generic invalid input: the user has to grant the
    email scope on the consent screen.
    """

    def __init__(self, provider: str):
        super().__init__(
            f"{provider} did not return an email; ensure the 'email' scope is granted",
            code="MISSING_EMAIL_SCOPE",
            details={"provider": provider},
        )


class InvalidOAuthStateError(ValidationError):
    """Raised when the callback state does not match the state cookie."""

    def __init__(self, reason: str = "invalid oauth state"):
        super().__init__(
            "Invalid OAuth state",
            code="INVALID_OAUTH_STATE",
            details={"reason": reason},
        )


__all__ = [
    "MissingEmailScopeError",
    "InvalidOAuthStateError",
    "ExchangeFailedError",
    "ProfileFetchFailedError",
]
