"""
Authentication service implementation.

Drives the provider OAuth handshake, upserts the local user and issues
server-side sessions. Also resolves session tokens back to users for the
session middleware.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from providers.base import IdentityProvider, ProviderProfile
from shared.exceptions import ConfigurationError, InvalidInputError
from shared.models import User

from modules.users.repository import UserRepository

from .interfaces import IAuthService
from .models import LoginResult
from .repository import SessionRepository
from .exceptions import MissingEmailScopeError

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(days=14)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def display_name_for(profile: ProviderProfile) -> str:
    """Prefer the provider's display name, falling back to the username."""
    if profile.global_name and profile.global_name.strip():
        return profile.global_name
    return profile.username


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Collaborators are injected so the API container, maintenance scripts
    and tests can each wire their own.
    """

    def __init__(
        self,
        provider: Optional[IdentityProvider],
        users: Optional[UserRepository],
        sessions: Optional[SessionRepository],
        session_ttl: timedelta = DEFAULT_SESSION_TTL,
    ):
        self._provider = provider
        self._users = users
        self._sessions = sessions
        self._session_ttl = session_ttl if session_ttl > timedelta(0) else DEFAULT_SESSION_TTL

    @property
    def session_ttl(self) -> timedelta:
        return self._session_ttl

    def _require_provider(self) -> IdentityProvider:
        if self._provider is None:
            raise ConfigurationError("Identity provider not configured", setting="discord_client_id")
        return self._provider

    def _require_stores(self) -> tuple[UserRepository, SessionRepository]:
        if self._users is None or self._sessions is None:
            raise ConfigurationError("Auth service not configured")
        return self._users, self._sessions

    def build_authorization_url(self, state: str) -> str:
        return self._require_provider().build_authorization_url(state)

    async def login_with_provider(self, code: str) -> LoginResult:
        """
        Complete a provider login.

        Steps: exchange the code, fetch the profile, upsert the user by
        email, then issue a session lasting session_ttl.
        """
        if not code or not code.strip():
            raise InvalidInputError("Missing OAuth code", field="code")

        provider = self._require_provider()
        users, sessions = self._require_stores()

        access_token = await provider.exchange_code(code)
        profile = await provider.fetch_profile(access_token)

        display_name = display_name_for(profile)
        avatar_url = provider.avatar_url(profile.external_id, profile.avatar)

        if not profile.email:
            logger.info("Login rejected: %s profile %s has no email", provider.name, profile.external_id)
            raise MissingEmailScopeError(provider.name)

        user = users.upsert_by_email(
            email=profile.email,
            display_name=display_name,
            avatar_url=avatar_url,
            email_verified=profile.verified,
        )

        expires_at = _utcnow() + self._session_ttl
        session = sessions.create(user.id, expires_at)

        logger.info("User %s signed in via %s", user.id, provider.name)
        return LoginResult(session_id=session.id, expires_at=session.expires_at, user=user)

    async def logout(self, session_id: Optional[str]) -> None:
        if not session_id:
            return
        _, sessions = self._require_stores()
        if sessions.delete(session_id):
            logger.info("Session revoked")

    async def resolve_session(self, session_id: str) -> Optional[User]:
        """
        Resolve a session token to an active user.

        A session is valid only while now < expires_at and its user is
        active. Anything else resolves to None.
        """
        if not session_id:
            return None
        users, sessions = self._require_stores()

        now = _utcnow()
        session = sessions.get_active(session_id, now)
        if session is None or session.is_expired(now):
            return None

        user = users.get_by_id(session.user_id)
        if user is None or not user.is_active:
            return None
        return user

    async def purge_expired_sessions(self) -> int:
        _, sessions = self._require_stores()
        removed = sessions.delete_expired(_utcnow())
        logger.info("Purged %d expired session(s)", removed)
        return removed
