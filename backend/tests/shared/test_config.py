"""Tests for shared/config.py."""

import os
from unittest.mock import patch

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "Guidepost API"
        assert settings.port == 8080
        assert settings.session_ttl_days == 14
        assert settings.oauth_state_ttl_seconds == 600
        assert settings.provider_timeout_seconds == 10.0
        assert settings.cookie_secure is True
        assert settings.cookie_samesite == "lax"
        assert settings.cookie_domain is None

    def test_loads_from_prefixed_env(self):
        """Settings should load GUIDEPOST_* environment variables."""
        with patch.dict(os.environ, {
            "GUIDEPOST_DEBUG": "true",
            "GUIDEPOST_PORT": "9000",
            "GUIDEPOST_COOKIE_SAMESITE": "strict",
            "GUIDEPOST_DISCORD_CLIENT_ID": "client-123",
        }):
            settings = Settings(_env_file=None)
        assert settings.debug is True
        assert settings.port == 9000
        assert settings.cookie_samesite == "strict"
        assert settings.discord_client_id == "client-123"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
