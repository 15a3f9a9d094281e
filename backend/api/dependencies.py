"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Tests swap the whole container with set_container(), or override single
dependency functions through app.dependency_overrides.
"""

import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Optional

from shared.config import get_settings
from shared.exceptions import ConfigurationError

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import SessionRepository
    from modules.guides.interfaces import IGuideService
    from modules.guides.repository import GuideRepository
    from modules.users.repository import UserRepository
    from providers.base import IdentityProvider

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "Optional[IAuthService]" = None
        self._guide_service: "Optional[IGuideService]" = None
        self._user_repository: "Optional[UserRepository]" = None
        self._session_repository: "Optional[SessionRepository]" = None
        self._guide_repository: "Optional[GuideRepository]" = None
        self._provider: "Optional[IdentityProvider]" = None
        self._provider_loaded = False

    @property
    def users(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def sessions(self) -> "SessionRepository":
        """Get the session repository instance."""
        if self._session_repository is None:
            from modules.auth.repository import SessionRepository
            from shared.database import get_supabase_client
            self._session_repository = SessionRepository(get_supabase_client())
        return self._session_repository

    @property
    def guide_repository(self) -> "GuideRepository":
        """Get the guide repository instance."""
        if self._guide_repository is None:
            from modules.guides.repository import GuideRepository
            from shared.database import get_supabase_client
            self._guide_repository = GuideRepository(get_supabase_client())
        return self._guide_repository

    @property
    def provider(self) -> "Optional[IdentityProvider]":
        """
        Get the identity provider, or None when OAuth is not configured.

        Session resolution works without a provider; only the login
        endpoints need one, and they report NOT_CONFIGURED themselves.
        """
        if not self._provider_loaded:
            from providers.factory import get_identity_provider
            try:
                self._provider = get_identity_provider()
            except ConfigurationError as e:
                logger.warning("Identity provider unavailable: %s", e.message)
                self._provider = None
            self._provider_loaded = True
        return self._provider

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                provider=self.provider,
                users=self.users,
                sessions=self.sessions,
                session_ttl=timedelta(days=get_settings().session_ttl_days),
            )
        return self._auth_service

    @property
    def guides(self) -> "IGuideService":
        """Get the guide service instance."""
        if self._guide_service is None:
            from modules.guides.service import GuideService
            self._guide_service = GuideService(repository=self.guide_repository)
        return self._guide_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._guide_service = None
        self._user_repository = None
        self._session_repository = None
        self._guide_repository = None
        self._provider = None
        self._provider_loaded = False


# Module-level container singleton
_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a pre-wired container (used by tests and scripts)."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_guide_service() -> "IGuideService":
    """FastAPI dependency for guide service."""
    return get_container().guides
