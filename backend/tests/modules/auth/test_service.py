"""Tests for AuthService."""

from datetime import datetime, timedelta, timezone

import pytest

from modules.auth.exceptions import ExchangeFailedError, MissingEmailScopeError
from modules.auth.service import AuthService, display_name_for
from providers.base import ProviderProfile
from shared.exceptions import ConfigurationError, InvalidInputError

from tests.fakes import (
    FakeIdentityProvider,
    FakeSessionRepository,
    FakeUserRepository,
    make_user,
)


def make_profile(**overrides) -> ProviderProfile:
    data = {
        "id": "1234",
        "username": "tester",
        "global_name": "Test User",
        "email": "test@example.com",
        "verified": True,
        "avatar": "abc123",
    }
    data.update(overrides)
    return ProviderProfile.model_validate(data)


class TestLoginWithProvider:
    @pytest.fixture
    def users(self):
        return FakeUserRepository()

    @pytest.fixture
    def sessions(self):
        return FakeSessionRepository()

    def service_for(self, users, sessions, profile=None, **provider_kwargs) -> AuthService:
        provider = FakeIdentityProvider(profile=profile or make_profile(), **provider_kwargs)
        return AuthService(provider, users, sessions)

    @pytest.mark.asyncio
    async def test_creates_user_and_session(self, users, sessions):
        service = self.service_for(users, sessions)

        before = datetime.now(timezone.utc)
        result = await service.login_with_provider("code-1")

        assert result.user.email == "test@example.com"
        assert result.user.display_name == "Test User"
        assert result.user.avatar_url == "https://cdn.example/avatars/1234/abc123.png"
        assert result.session_id in sessions.sessions
        assert sessions.sessions[result.session_id].user_id == result.user.id
        assert before + timedelta(days=14) <= result.expires_at <= datetime.now(timezone.utc) + timedelta(days=14)

    @pytest.mark.asyncio
    async def test_same_email_any_case_updates_one_user(self, users, sessions):
        first = await self.service_for(users, sessions).login_with_provider("code-1")
        second = await self.service_for(
            users, sessions, profile=make_profile(email="TEST@Example.COM", global_name="Renamed")
        ).login_with_provider("code-2")

        assert len(users.users) == 1
        assert first.user.id == second.user.id
        assert users.users[first.user.id].display_name == "Renamed"
        assert first.session_id != second.session_id

    @pytest.mark.asyncio
    async def test_display_name_falls_back_to_username(self, users, sessions):
        result = await self.service_for(
            users, sessions, profile=make_profile(global_name=None)
        ).login_with_provider("code")
        assert result.user.display_name == "tester"

    @pytest.mark.asyncio
    async def test_no_avatar(self, users, sessions):
        result = await self.service_for(users, sessions, profile=make_profile(avatar=None)).login_with_provider("c")
        assert result.user.avatar_url is None

    @pytest.mark.asyncio
    async def test_missing_email(self, users, sessions):
        service = self.service_for(users, sessions, profile=make_profile(email=None))

        with pytest.raises(MissingEmailScopeError) as exc_info:
            await service.login_with_provider("code")

        assert exc_info.value.code == "MISSING_EMAIL_SCOPE"
        assert users.upsert_calls == 0
        assert sessions.sessions == {}

    @pytest.mark.asyncio
    async def test_blank_code(self, users, sessions):
        provider = FakeIdentityProvider()
        service = AuthService(provider, users, sessions)

        with pytest.raises(InvalidInputError):
            await service.login_with_provider("   ")
        assert provider.exchanged_codes == []

    @pytest.mark.asyncio
    async def test_exchange_failure_propagates(self, users, sessions):
        service = self.service_for(users, sessions, fail_exchange=True)

        with pytest.raises(ExchangeFailedError):
            await service.login_with_provider("code")
        assert users.users == {}
        assert sessions.sessions == {}

    @pytest.mark.asyncio
    async def test_custom_session_ttl(self, users, sessions):
        service = AuthService(FakeIdentityProvider(), users, sessions, session_ttl=timedelta(hours=1))
        result = await service.login_with_provider("code")
        assert result.expires_at <= datetime.now(timezone.utc) + timedelta(hours=1)

    @pytest.mark.asyncio
    async def test_missing_collaborators(self):
        with pytest.raises(ConfigurationError):
            await AuthService(None, FakeUserRepository(), FakeSessionRepository()).login_with_provider("c")
        with pytest.raises(ConfigurationError):
            await AuthService(FakeIdentityProvider(), None, None).login_with_provider("c")

    def test_build_authorization_url_requires_provider(self):
        with pytest.raises(ConfigurationError):
            AuthService(None, None, None).build_authorization_url("s")


class TestLogout:
    @pytest.mark.asyncio
    async def test_deletes_session(self):
        sessions = FakeSessionRepository()
        record = sessions.put("user-1", datetime.now(timezone.utc) + timedelta(days=1))
        service = AuthService(FakeIdentityProvider(), FakeUserRepository(), sessions)

        await service.logout(record.id)

        assert sessions.sessions == {}

    @pytest.mark.asyncio
    async def test_empty_and_unknown_ids_are_noops(self):
        service = AuthService(FakeIdentityProvider(), FakeUserRepository(), FakeSessionRepository())
        await service.logout(None)
        await service.logout("")
        await service.logout("never-issued")
        await service.logout("never-issued")


class TestResolveSession:
    @pytest.fixture
    def setup(self):
        users = FakeUserRepository()
        sessions = FakeSessionRepository()
        user = users.add(make_user())
        service = AuthService(FakeIdentityProvider(), users, sessions)
        return service, users, sessions, user

    @pytest.mark.asyncio
    async def test_active_session(self, setup):
        service, _, sessions, user = setup
        record = sessions.put(user.id, datetime.now(timezone.utc) + timedelta(minutes=5))
        assert (await service.resolve_session(record.id)).id == user.id

    @pytest.mark.asyncio
    async def test_expired_session(self, setup):
        service, _, sessions, user = setup
        record = sessions.put(user.id, datetime.now(timezone.utc) - timedelta(seconds=1))
        assert await service.resolve_session(record.id) is None

    @pytest.mark.asyncio
    async def test_inactive_user(self, setup):
        service, users, sessions, user = setup
        record = sessions.put(user.id, datetime.now(timezone.utc) + timedelta(days=1))
        users.set_active(user.id, False)
        assert await service.resolve_session(record.id) is None

    @pytest.mark.asyncio
    async def test_missing_user(self, setup):
        service, _, sessions, _ = setup
        record = sessions.put("ghost", datetime.now(timezone.utc) + timedelta(days=1))
        assert await service.resolve_session(record.id) is None

    @pytest.mark.asyncio
    async def test_unknown_or_empty(self, setup):
        service = setup[0]
        assert await service.resolve_session("nope") is None
        assert await service.resolve_session("") is None


class TestPurgeExpiredSessions:
    @pytest.mark.asyncio
    async def test_removes_only_expired(self):
        sessions = FakeSessionRepository()
        now = datetime.now(timezone.utc)
        live = sessions.put("u", now + timedelta(days=1))
        sessions.put("u", now - timedelta(days=1))
        sessions.put("u", now - timedelta(seconds=5))
        service = AuthService(None, FakeUserRepository(), sessions)

        assert await service.purge_expired_sessions() == 2
        assert list(sessions.sessions) == [live.id]


class TestDisplayName:
    def test_blank_global_name(self):
        assert display_name_for(make_profile(global_name="  ")) == "tester"
