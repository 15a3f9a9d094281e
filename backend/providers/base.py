"""Base classes and models for OAuth identity providers."""

from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field


class ProviderProfile(BaseModel):
    """Remote user profile returned by an identity provider.

    Attributes:
        external_id: The provider's stable user id
        username: Provider account name
        global_name: Preferred display name, if the user set one
        email: Email address (requires the email scope)
        verified: Whether the provider verified the email
        avatar: Avatar asset id, used to build the avatar URL
    """

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    external_id: str = Field(..., alias="id")
    username: str
    global_name: Optional[str] = None
    email: Optional[str] = None
    verified: bool = False
    avatar: Optional[str] = None


@runtime_checkable
class IdentityProvider(Protocol):
    """Three-legged OAuth2 handshake against a single identity provider.

    The auth service depends on this protocol, not on a concrete provider,
    so tests can substitute a fake.
    """

    name: str

    def build_authorization_url(self, state: str) -> str:
        """Return the URL the browser is redirected to for consent.

        Args:
            state: Anti-forgery value echoed back on the callback

        Returns:
            Absolute authorization URL
        """
        ...

    async def exchange_code(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Raises:
            ExchangeFailedError: On transport error or non-success response
        """
        ...

    async def fetch_profile(self, access_token: str) -> ProviderProfile:
        """Fetch the signed-in user's profile.

        Raises:
            ProfileFetchFailedError: On transport error, non-2xx or bad payload
        """
        ...

    def avatar_url(self, external_id: str, asset_id: Optional[str]) -> Optional[str]:
        """Build the public avatar URL, or None when there is no asset."""
        ...
