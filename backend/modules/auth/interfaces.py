"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks and fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import User

from .models import LoginResult


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer and the session middleware.
    """

    def build_authorization_url(self, state: str) -> str:
        """
        Build the identity provider's consent URL.

        Args:
            state: Anti-forgery value to embed

        Raises:
            ConfigurationError: If no provider is configured
        """
        ...

    async def login_with_provider(self, code: str) -> LoginResult:
        """
        Complete a provider login and issue a session.

        Args:
            code: Authorization code from the provider callback

        Returns:
            LoginResult with the new session id, its expiry and the user

        Raises:
            InvalidInputError: If code is empty
            ExchangeFailedError: If the code cannot be exchanged
            ProfileFetchFailedError: If the profile cannot be fetched
            MissingEmailScopeError: If the profile has no email
            DatabaseError: If the user or session cannot be stored
        """
        ...

    async def logout(self, session_id: Optional[str]) -> None:
        """
        Revoke a session. Empty or unknown session ids are a no-op.
        """
        ...

    async def resolve_session(self, session_id: str) -> Optional[User]:
        """
        Resolve a session id to its user.

        Returns:
            The user if the session is unexpired and the user is active,
            None otherwise
        """
        ...

    async def purge_expired_sessions(self) -> int:
        """
        Delete expired session rows.

        Returns:
            Number of sessions removed
        """
        ...
