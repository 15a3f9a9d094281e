"""OAuth identity provider implementations."""

from .base import IdentityProvider, ProviderProfile
from .discord import DiscordProvider
from .exceptions import ExchangeFailedError, ProfileFetchFailedError
from .factory import get_identity_provider

__all__ = [
    "IdentityProvider",
    "ProviderProfile",
    "DiscordProvider",
    "ExchangeFailedError",
    "ProfileFetchFailedError",
    "get_identity_provider",
]
