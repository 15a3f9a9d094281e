"""
Shared test fixtures and utilities.

Every test runs against fresh settings (no real Supabase or Discord
credentials) and a fresh service container.
"""

from datetime import datetime, timedelta, timezone

import pytest

from api.dependencies import reset_container, set_container
from shared.config import get_settings
from shared.database import reset_client_cache
from shared.models import UserRole

from tests.fakes import (
    TEST_STATE_SECRET,
    FakeGuideRepository,
    FakeIdentityProvider,
    FakeSessionRepository,
    FakeUserRepository,
    build_container,
    make_user,
)


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Isolated settings: no external services, cookies usable over http."""
    monkeypatch.setenv("GUIDEPOST_STATE_SECRET", TEST_STATE_SECRET)
    monkeypatch.setenv("GUIDEPOST_COOKIE_SECURE", "false")
    monkeypatch.setenv("GUIDEPOST_SUPABASE_URL", "")
    monkeypatch.setenv("GUIDEPOST_SUPABASE_SERVICE_ROLE_KEY", "")
    monkeypatch.setenv("GUIDEPOST_DISCORD_CLIENT_ID", "")
    monkeypatch.setenv("GUIDEPOST_DISCORD_CLIENT_SECRET", "")
    monkeypatch.setenv("GUIDEPOST_DISCORD_REDIRECT_URL", "")
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield get_settings()
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def users() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def sessions() -> FakeSessionRepository:
    return FakeSessionRepository()


@pytest.fixture
def guides() -> FakeGuideRepository:
    return FakeGuideRepository()


@pytest.fixture
def container(provider, users, sessions, guides):
    """Install a container wired to the fakes."""
    container = build_container(provider=provider, users=users, sessions=sessions, guides=guides)
    set_container(container)
    return container


@pytest.fixture
def member(users):
    return users.add(make_user(display_name="Member", email="member@example.com"))


@pytest.fixture
def other_member(users):
    return users.add(make_user(display_name="Other", email="other@example.com"))


@pytest.fixture
def editor(users):
    return users.add(make_user(display_name="Editor", email="editor@example.com", role=UserRole.EDITOR))


@pytest.fixture
def login(sessions, test_settings):
    """Return a function that opens a session for a user and yields cookies."""

    def _login(user) -> dict[str, str]:
        record = sessions.put(user.id, datetime.now(timezone.utc) + timedelta(days=1))
        return {test_settings.session_cookie_name: record.id}

    return _login
