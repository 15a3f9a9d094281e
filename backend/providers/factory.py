"""Factory functions for creating identity providers."""

from typing import Optional

from shared.config import Settings, get_settings

from .base import IdentityProvider
from .discord import DiscordProvider


def get_identity_provider(settings: Optional[Settings] = None) -> IdentityProvider:
    """Build the configured identity provider.

    Args:
        settings: Settings to read from; defaults to the cached settings.

    Returns:
        A configured provider instance

    Raises:
        ConfigurationError: If the provider credentials are missing
    """
    settings = settings or get_settings()
    return DiscordProvider(
        client_id=settings.discord_client_id,
        client_secret=settings.discord_client_secret,
        redirect_url=settings.discord_redirect_url,
        api_base=settings.discord_api_base,
        cdn_base=settings.discord_cdn_base,
        timeout=settings.provider_timeout_seconds,
    )
