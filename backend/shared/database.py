"""
Database client factory for Supabase.

The backend always talks to Postgres with the service-role key; row-level
authorization is enforced by the service layer, not by RLS.
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .exceptions import ConfigurationError

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Returns:
        Supabase client configured with service role key

    Raises:
        ConfigurationError: If the Supabase URL or key is not set
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise ConfigurationError(
                "Supabase configuration missing. "
                "Set GUIDEPOST_SUPABASE_URL and GUIDEPOST_SUPABASE_SERVICE_ROLE_KEY.",
                setting="supabase_url",
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None
