"""
Centralized configuration for the Guidepost backend.

All settings are loaded from environment variables (prefixed GUIDEPOST_)
with sensible defaults. Module-specific settings are namespaced
(e.g., DISCORD_*, SUPABASE_*, COOKIE_*).
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GUIDEPOST_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Guidepost API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, used by run_migrations.py

    # Discord OAuth
    discord_client_id: str = ""
    discord_client_secret: str = ""
    discord_redirect_url: str = ""
    discord_api_base: str = "https://discord.com/api"
    discord_cdn_base: str = "https://cdn.discordapp.com"
    provider_timeout_seconds: float = 10.0

    # Sessions
    session_ttl_days: int = 14
    session_cookie_name: str = "gp_session"

    # OAuth transaction cookies
    oauth_state_cookie_name: str = "gp_oauth_state"
    return_to_cookie_name: str = "gp_return_to"
    oauth_state_ttl_seconds: int = 600
    state_secret: str = ""

    # Cookie attributes shared by all cookies
    cookie_secure: bool = True
    cookie_domain: Optional[str] = None
    cookie_samesite: Literal["lax", "strict"] = "lax"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
