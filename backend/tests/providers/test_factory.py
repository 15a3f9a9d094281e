"""Tests for providers/factory.py."""

import pytest

from providers.discord import DiscordProvider
from providers.factory import get_identity_provider
from shared.config import Settings
from shared.exceptions import ConfigurationError


class TestGetIdentityProvider:
    def test_builds_discord_provider(self):
        settings = Settings(
            _env_file=None,
            discord_client_id="id",
            discord_client_secret="secret",
            discord_redirect_url="http://localhost/cb",
        )
        provider = get_identity_provider(settings)
        assert isinstance(provider, DiscordProvider)
        assert provider.name == "discord"

    def test_missing_credentials(self):
        with pytest.raises(ConfigurationError):
            get_identity_provider(Settings(_env_file=None, discord_client_id="", discord_client_secret=""))
