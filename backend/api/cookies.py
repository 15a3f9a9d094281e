"""
Cookie helpers.

Every cookie the API sets is HTTP-only with path ``/``; SameSite, Secure
and Domain come from settings so local development can run over http.
"""

from datetime import datetime, timezone
from typing import Optional

from starlette.responses import Response

from shared.config import Settings


def _set(response: Response, settings: Settings, name: str, value: str, max_age: int) -> None:
    response.set_cookie(
        key=name,
        value=value,
        max_age=max_age,
        path="/",
        domain=settings.cookie_domain,
        secure=settings.cookie_secure,
        httponly=True,
        samesite=settings.cookie_samesite,
    )


def _clear(response: Response, settings: Settings, name: str) -> None:
    response.delete_cookie(
        key=name,
        path="/",
        domain=settings.cookie_domain,
        secure=settings.cookie_secure,
        httponly=True,
        samesite=settings.cookie_samesite,
    )


def seconds_until(expires_at: datetime, now: Optional[datetime] = None) -> int:
    """Whole seconds from now until expires_at, never negative."""
    now = now or datetime.now(timezone.utc)
    return max(0, int((expires_at - now).total_seconds()))


def set_session_cookie(response: Response, settings: Settings, session_id: str, expires_at: datetime) -> None:
    _set(response, settings, settings.session_cookie_name, session_id, seconds_until(expires_at))


def clear_session_cookie(response: Response, settings: Settings) -> None:
    _clear(response, settings, settings.session_cookie_name)


def set_oauth_cookies(response: Response, settings: Settings, signed_state: str, return_to: str) -> None:
    """Store the signed anti-forgery state and the return path for the callback."""
    ttl = settings.oauth_state_ttl_seconds
    _set(response, settings, settings.oauth_state_cookie_name, signed_state, ttl)
    _set(response, settings, settings.return_to_cookie_name, return_to, ttl)


def clear_state_cookie(response: Response, settings: Settings) -> None:
    _clear(response, settings, settings.oauth_state_cookie_name)


def clear_return_to_cookie(response: Response, settings: Settings) -> None:
    _clear(response, settings, settings.return_to_cookie_name)
