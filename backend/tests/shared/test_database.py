"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, MagicMock

from shared.database import get_supabase_client, reset_client_cache
from shared.exceptions import ConfigurationError


class TestSupabaseClient:
    def setup_method(self):
        """Reset cache before each test."""
        reset_client_cache()

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_creates_client_with_service_role_key(self, mock_settings, mock_create):
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.return_value = MagicMock()

        client = get_supabase_client()

        mock_create.assert_called_once_with("https://test.supabase.co", "test-key")
        assert client is mock_create.return_value

    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_caches_client(self, mock_settings, mock_create):
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"

        assert get_supabase_client() is get_supabase_client()
        mock_create.assert_called_once()

    @patch("shared.database.get_settings")
    def test_raises_without_config(self, mock_settings):
        mock_settings.return_value.supabase_url = ""
        mock_settings.return_value.supabase_service_role_key = ""

        with pytest.raises(ConfigurationError):
            get_supabase_client()
